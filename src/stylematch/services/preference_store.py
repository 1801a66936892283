"""
Preference store: the single owner of a user's preference profile.

State machine::

    EMPTY --first swipe--> IN_PROGRESS --last swipe--> COMPLETE
      ^                                                   |
      +------------------- start_quiz() ------------------+

- EMPTY: no swipes recorded in this quiz run
- IN_PROGRESS: a swipe session is under way (never persisted)
- COMPLETE: archetype, style tag, project types and onboarding flag are
  written together as one profile replacement and persisted

Persistence is fire-and-forget from the store's point of view: a failed
write is logged and the in-memory profile stays authoritative, so quiz
progression and ranking never wait on storage.
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Union

from stylematch.core.errors import ProfilePersistenceError, QuizAlreadyCompleteError
from stylematch.core.logging import LoggerMixin, get_logger, user_context
from stylematch.engines.factory import get_default_classifier, get_default_deck
from stylematch.engines.personality import Archetype, PersonalityClassifier
from stylematch.engines.swipe_engine import SwipeResult, SwipeSession
from stylematch.engines.traits import TraitCard, TraitDeck
from stylematch.scoring.constants.project_types import clean_project_types, project_type_label
from stylematch.scoring.feed_ranker import FeedRanker, RankingMode, get_feed_ranker
from stylematch.scoring.models import ContentItem, UserPreferenceProfile
from stylematch.services.profile_repository import InMemoryProfileBackend, ProfileRepository

logger = get_logger(__name__)


class QuizState(str, Enum):
    EMPTY = "empty"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class PreferenceStore(LoggerMixin):
    """
    Owns one user's UserPreferenceProfile and the quiz that produces it.

    Usage:
        store = PreferenceStore.load("user-1", repository)
        store.start_quiz(project_types={"kitchen"})
        while store.state is not QuizState.COMPLETE:
            store.record_swipe(accepted=...)
        feed = store.rank(catalog, RankingMode.PERSONALIZED)
    """

    def __init__(
        self,
        user_id: str,
        repository: Optional[ProfileRepository] = None,
        deck: Optional[TraitDeck] = None,
        classifier: Optional[PersonalityClassifier] = None,
        profile: Optional[UserPreferenceProfile] = None,
    ):
        self.user_id = user_id
        self._repository = repository if repository is not None else InMemoryProfileBackend()
        self._deck = deck if deck is not None else get_default_deck()
        self._classifier = classifier if classifier is not None else get_default_classifier()

        self._profile = profile or UserPreferenceProfile.empty()
        self._state = QuizState.COMPLETE if self._profile.has_completed_quiz else QuizState.EMPTY
        self._session: Optional[SwipeSession] = None
        # A first quiz run keeps the interests declared before it started
        self._pending_project_types: frozenset = (
            frozenset() if self._state is QuizState.COMPLETE
            else self._profile.declared_project_types
        )
        self.last_persist_error: Optional[Exception] = None

    @classmethod
    def load(
        cls,
        user_id: str,
        repository: ProfileRepository,
        deck: Optional[TraitDeck] = None,
        classifier: Optional[PersonalityClassifier] = None,
    ) -> "PreferenceStore":
        """
        Restore the persisted profile for ``user_id``.

        Starts COMPLETE when the stored record carries an archetype and EMPTY
        otherwise. An unreadable record is logged and treated as absent.
        """
        with user_context(user_id):
            profile = None
            try:
                profile = repository.load(user_id)
            except ProfilePersistenceError as e:
                logger.warning("profile_load_failed", error=str(e))

            store = cls(user_id, repository, deck, classifier, profile)
            store.logger.debug("profile_loaded", state=store.state.value)
        return store

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def profile(self) -> UserPreferenceProfile:
        """Most recent in-memory profile (may not be durably saved yet)."""
        return self._profile

    @property
    def state(self) -> QuizState:
        return self._state

    @property
    def session(self) -> Optional[SwipeSession]:
        return self._session

    @property
    def deck(self) -> TraitDeck:
        return self._deck

    @property
    def current_card(self) -> Optional[TraitCard]:
        if self._state is QuizState.COMPLETE:
            return None
        if self._session is None:
            return self._deck[0]
        return self._session.current_card

    @property
    def progress(self) -> float:
        if self._state is QuizState.COMPLETE:
            return 1.0
        if self._session is None:
            return 0.0
        return self._session.progress

    @property
    def archetype(self) -> Optional[Archetype]:
        if self._profile.archetype_name is None:
            return None
        return self._classifier.find(self._profile.archetype_name)

    @property
    def has_preferences(self) -> bool:
        return self._profile.has_completed_quiz or bool(self._profile.declared_project_types)

    def feed_label(self) -> str:
        """Header text for the personalized feed."""
        if self._profile.archetype_name:
            return f"Personalized for: {self._profile.archetype_name}"
        if self._profile.declared_project_types:
            labels = ", ".join(sorted(self._profile.declared_project_types))
            return f"Showing: {labels}"
        return "Showing: All"

    def project_type_labels(self) -> List[str]:
        return [project_type_label(p) for p in sorted(self._profile.declared_project_types)]

    # =========================================================================
    # Quiz flow
    # =========================================================================

    def start_quiz(self, project_types: Optional[Iterable[str]] = None) -> SwipeSession:
        """
        Enter (or re-enter) the quiz.

        Re-entry from COMPLETE discards the archetype, style tag, declared
        project types and onboarding flag of the current profile; the quiz
        result replaces them wholesale when the last card is answered. A
        first run started without ``project_types`` keeps the interests the
        user declared before it.

        Args:
            project_types: Project interests collected alongside this quiz
                run; they become ``declared_project_types`` on completion.
        """
        with user_context(self.user_id):
            previous = self._state
            if project_types is not None:
                pending = frozenset(clean_project_types(project_types))
            elif previous is QuizState.COMPLETE:
                pending = frozenset()
            else:
                pending = self._pending_project_types

            if previous is QuizState.COMPLETE or project_types is not None:
                self._profile = UserPreferenceProfile.empty()
            self._pending_project_types = pending
            self._session = SwipeSession(self._deck, self._classifier)
            self._state = QuizState.EMPTY

            self.logger.info(
                "quiz_started",
                previous_state=previous.value,
                deck_size=len(self._deck),
                project_types=sorted(pending),
            )
        return self._session

    def restart_quiz(self) -> SwipeSession:
        """Start over, keeping the project interests given to the current run."""
        return self.start_quiz(self._pending_project_types)

    def record_swipe(self, accepted: bool) -> SwipeResult:
        """
        Apply one swipe to the running quiz.

        Raises:
            QuizAlreadyCompleteError: the quiz is complete; call start_quiz()
                to take it again
        """
        if self._state is QuizState.COMPLETE:
            raise QuizAlreadyCompleteError(len(self._deck))

        with user_context(self.user_id):
            if self._session is None:
                self._session = SwipeSession(self._deck, self._classifier)

            result = self._session.swipe(accepted)
            self._state = QuizState.IN_PROGRESS

            if result.archetype is not None:
                self._complete(result.archetype)
        return result

    def _complete(self, archetype: Archetype) -> None:
        self._profile = UserPreferenceProfile(
            archetype_name=archetype.name,
            primary_style_tag=archetype.primary_style_tag,
            declared_project_types=self._pending_project_types,
            onboarding_complete=True,
        )
        self._state = QuizState.COMPLETE
        self.logger.info(
            "profile_completed",
            archetype=archetype.name,
            style_tag=archetype.primary_style_tag,
            project_types=sorted(self._pending_project_types),
        )
        self._persist()

    # =========================================================================
    # Edits outside the quiz
    # =========================================================================

    def set_declared_project_types(self, project_types: Iterable[str]) -> UserPreferenceProfile:
        """Replace the declared project interests and persist."""
        cleaned = clean_project_types(project_types)
        self._profile = self._profile.with_project_types(cleaned)
        if self._state is not QuizState.COMPLETE:
            self._pending_project_types = frozenset(cleaned)
        with user_context(self.user_id):
            self._persist()
        return self._profile

    def set_onboarding_complete(self, complete: bool = True) -> UserPreferenceProfile:
        self._profile = self._profile.with_onboarding_complete(complete)
        with user_context(self.user_id):
            self._persist()
        return self._profile

    # =========================================================================
    # Ranking
    # =========================================================================

    def rank(
        self,
        catalog: Sequence[ContentItem],
        mode: Union[RankingMode, str] = RankingMode.PERSONALIZED,
        ranker: Optional[FeedRanker] = None,
    ) -> List[ContentItem]:
        """Rank ``catalog`` against the current in-memory profile."""
        return (ranker or get_feed_ranker()).rank(self._profile, catalog, mode)

    # =========================================================================
    # Persistence
    # =========================================================================

    def _persist(self) -> None:
        # Runs inside user_context; a slow backend is bounded by its own timeouts.
        try:
            self._repository.save(self.user_id, self._profile)
        except Exception as e:
            self.last_persist_error = e
            self.logger.warning("profile_persist_failed", error=str(e))
        else:
            self.last_persist_error = None
            self.logger.debug("profile_persisted")
