"""
Swipe-based Style Learning Engine

Folds binary swipe decisions over trait cards into a preference vector:

    accepted:  vector[dim] += weight
    rejected:  vector[dim] -= weight

for every (dim, weight) on the card. ``apply_decision`` is pure and returns a
new mapping. ``SwipeSession`` adds deck traversal on top of it:

- current_index starts at 0 and advances by exactly one per decision
- the deck is finished when current_index == len(deck)
- the classifier runs exactly once, on the completing swipe
- there is no undo; swiping past the end raises QuizAlreadyCompleteError
- restart() is the only way back to an empty vector
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple

from stylematch.core.errors import QuizAlreadyCompleteError
from stylematch.core.logging import get_logger
from stylematch.engines.personality import Archetype, PersonalityClassifier
from stylematch.engines.traits import TraitCard, TraitDeck

logger = get_logger(__name__)


PreferenceVector = Dict[str, float]


class SwipeAction(Enum):
    LIKE = 1
    DISLIKE = -1

    @property
    def accepted(self) -> bool:
        return self is SwipeAction.LIKE


def apply_decision(
    vector: Mapping[str, float],
    card: TraitCard,
    accepted: bool,
) -> PreferenceVector:
    """
    Fold one card decision into a preference vector.

    Args:
        vector: Accumulated vector so far (not modified)
        card: The card that was swiped
        accepted: True for a right swipe / like

    Returns:
        A new vector with the card's signed weights added
    """
    updated = dict(vector)
    sign = 1 if accepted else -1
    for trait in card.traits:
        updated[trait.dimension] = updated.get(trait.dimension, 0) + sign * trait.weight
    return updated


def apply_action(
    vector: Mapping[str, float],
    card: TraitCard,
    action: SwipeAction,
) -> PreferenceVector:
    """``apply_decision`` keyed by a SwipeAction."""
    return apply_decision(vector, card, action.accepted)


@dataclass(frozen=True)
class SwipeResult:
    """Outcome of one swipe."""
    card_id: str
    accepted: bool
    index: int                              # position of the swiped card
    vector: Mapping[str, float]             # snapshot after this swipe
    archetype: Optional[Archetype] = None   # set only on the completing swipe

    @property
    def completed(self) -> bool:
        return self.archetype is not None


class SwipeSession:
    """
    One pass through a trait deck.

    Usage:
        session = SwipeSession(deck, classifier)
        while not session.is_complete:
            card = session.current_card
            result = session.swipe(accepted=user_said_yes(card))
        archetype = session.archetype
    """

    def __init__(self, deck: TraitDeck, classifier: PersonalityClassifier):
        self._deck = deck
        self._classifier = classifier
        self._vector: PreferenceVector = {}
        self._index = 0
        self._history: List[Tuple[str, bool]] = []
        self._archetype: Optional[Archetype] = None

    @property
    def deck(self) -> TraitDeck:
        return self._deck

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def vector(self) -> PreferenceVector:
        """Copy of the accumulated vector."""
        return dict(self._vector)

    @property
    def history(self) -> List[Tuple[str, bool]]:
        """(card_id, accepted) pairs in the order they were applied."""
        return list(self._history)

    @property
    def archetype(self) -> Optional[Archetype]:
        return self._archetype

    @property
    def is_complete(self) -> bool:
        return self._index >= len(self._deck)

    @property
    def has_started(self) -> bool:
        return self._index > 0

    @property
    def remaining(self) -> int:
        return len(self._deck) - self._index

    @property
    def progress(self) -> float:
        """Fraction of the deck answered, 0.0 to 1.0."""
        return self._index / len(self._deck)

    @property
    def current_card(self) -> Optional[TraitCard]:
        if self.is_complete:
            return None
        return self._deck[self._index]

    def swipe(self, accepted: bool) -> SwipeResult:
        """
        Apply the decision for the current card and advance.

        Raises:
            QuizAlreadyCompleteError: every card has already been answered
        """
        if self.is_complete:
            raise QuizAlreadyCompleteError(len(self._deck))

        card = self._deck[self._index]
        self._vector = apply_decision(self._vector, card, accepted)
        self._history.append((card.id, accepted))
        index = self._index
        self._index += 1

        logger.debug(
            "swipe_recorded",
            card_id=card.id,
            accepted=accepted,
            index=index,
            remaining=self.remaining,
        )

        if self.is_complete:
            self._archetype = self._classifier.classify(self._vector)
            logger.info(
                "quiz_completed",
                archetype=self._archetype.name,
                swipes=len(self._history),
                dimensions=len(self._vector),
            )

        return SwipeResult(
            card_id=card.id,
            accepted=accepted,
            index=index,
            vector=dict(self._vector),
            archetype=self._archetype,
        )

    def like(self) -> SwipeResult:
        return self.swipe(True)

    def dislike(self) -> SwipeResult:
        return self.swipe(False)

    def swipe_action(self, action: SwipeAction) -> SwipeResult:
        return self.swipe(action.accepted)

    def restart(self) -> None:
        """Discard all progress and start again from the first card."""
        self._vector = {}
        self._index = 0
        self._history = []
        self._archetype = None
        logger.info("quiz_restarted", deck_size=len(self._deck))
