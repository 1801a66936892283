"""
Unit tests for the PreferenceStore state machine.

Tests cover:
1. EMPTY -> IN_PROGRESS -> COMPLETE transitions
2. Atomic profile write on completion
3. Re-entry wiping the previous profile
4. Persistence: restore on load, failures logged but never blocking
5. Feed header and ranking against the live profile
"""

from unittest.mock import MagicMock

import pytest
import structlog

from stylematch.core.errors import ProfilePersistenceError, QuizAlreadyCompleteError
from stylematch.scoring.feed_ranker import RankingMode
from stylematch.scoring.models import UserPreferenceProfile
from stylematch.services.preference_store import PreferenceStore, QuizState
from stylematch.services.profile_repository import RedisProfileBackend


@pytest.fixture
def store(in_memory_profile_backend, three_card_deck, three_rule_classifier):
    return PreferenceStore(
        "user-1",
        repository=in_memory_profile_backend,
        deck=three_card_deck,
        classifier=three_rule_classifier,
    )


def _finish(store, decisions=(True, True, False)):
    for accepted in decisions:
        store.record_swipe(accepted)


# =============================================================================
# State transitions
# =============================================================================

class TestStateTransitions:

    def test_new_store_is_empty(self, store):
        assert store.state is QuizState.EMPTY
        assert store.profile == UserPreferenceProfile()
        assert store.current_card.id == "card1"
        assert store.progress == 0.0

    def test_first_swipe_moves_to_in_progress(self, store):
        store.record_swipe(True)
        assert store.state is QuizState.IN_PROGRESS
        assert store.current_card.id == "card2"

    def test_middle_swipes_stay_in_progress(self, store):
        store.record_swipe(True)
        store.record_swipe(True)
        assert store.state is QuizState.IN_PROGRESS
        assert store.profile.archetype_name is None

    def test_last_swipe_completes(self, store):
        _finish(store)
        assert store.state is QuizState.COMPLETE
        assert store.current_card is None
        assert store.progress == 1.0

    def test_swipe_after_complete_raises(self, store):
        _finish(store)
        with pytest.raises(QuizAlreadyCompleteError):
            store.record_swipe(True)
        assert store.state is QuizState.COMPLETE

    def test_start_quiz_from_empty(self, store):
        session = store.start_quiz()
        assert store.session is session
        assert store.state is QuizState.EMPTY
        assert session.current_index == 0


# =============================================================================
# Completion
# =============================================================================

class TestCompletion:

    def test_profile_written_as_one_record(self, store):
        store.start_quiz(project_types={"kitchen", "bathroom"})
        store.record_swipe(True)
        store.record_swipe(True)
        # nothing visible until the quiz ends
        assert store.profile == UserPreferenceProfile()

        store.record_swipe(False)
        assert store.profile == UserPreferenceProfile(
            archetype_name="Creative",
            primary_style_tag="creative",
            declared_project_types={"kitchen", "bathroom"},
            onboarding_complete=True,
        )

    def test_archetype_resolves_from_classifier(self, store, three_rule_classifier):
        _finish(store)
        assert store.archetype is three_rule_classifier.fallback

    def test_completion_persists(self, store, in_memory_profile_backend):
        _finish(store)
        assert in_memory_profile_backend.load("user-1") == store.profile

    def test_in_progress_state_is_not_persisted(self, store, in_memory_profile_backend):
        store.record_swipe(True)
        assert in_memory_profile_backend.load("user-1") is None

    def test_default_deck_and_classifier(self, in_memory_profile_backend):
        store = PreferenceStore("user-2", repository=in_memory_profile_backend)
        while store.state is not QuizState.COMPLETE:
            store.record_swipe(True)
        assert store.profile.archetype_name == "The Refined"
        assert store.profile.primary_style_tag == "the_refined"


# =============================================================================
# Re-entry
# =============================================================================

class TestReentry:

    def test_start_quiz_wipes_profile(self, store):
        store.start_quiz(project_types={"kitchen"})
        _finish(store)
        assert store.profile.has_completed_quiz

        store.start_quiz()
        assert store.state is QuizState.EMPTY
        assert store.profile == UserPreferenceProfile()
        assert store.current_card.id == "card1"

    def test_reentry_replaces_project_types(self, store):
        store.start_quiz(project_types={"kitchen"})
        _finish(store)

        store.start_quiz(project_types={"outdoor"})
        _finish(store)
        assert store.profile.declared_project_types == frozenset({"outdoor"})

    def test_restart_keeps_pending_project_types(self, store):
        store.start_quiz(project_types={"kitchen"})
        store.record_swipe(True)
        store.restart_quiz()
        assert store.session.current_index == 0
        _finish(store)
        assert store.profile.declared_project_types == frozenset({"kitchen"})

    def test_project_types_cleaned(self, store):
        store.start_quiz(project_types=[" kitchen ", "", "bathroom"])
        _finish(store)
        assert store.profile.declared_project_types == frozenset({"kitchen", "bathroom"})


# =============================================================================
# Persistence
# =============================================================================

class TestPersistence:

    def test_load_restores_completed_profile(self, in_memory_profile_backend, three_card_deck,
                                             three_rule_classifier):
        in_memory_profile_backend.save("user-1", UserPreferenceProfile(
            archetype_name="Naturalist",
            primary_style_tag="naturalist",
            declared_project_types={"kitchen"},
            onboarding_complete=True,
        ))
        store = PreferenceStore.load("user-1", in_memory_profile_backend,
                                     three_card_deck, three_rule_classifier)
        assert store.state is QuizState.COMPLETE
        assert store.archetype.name == "Naturalist"

    def test_load_missing_profile_is_empty(self, in_memory_profile_backend):
        store = PreferenceStore.load("nobody", in_memory_profile_backend)
        assert store.state is QuizState.EMPTY

    def test_load_project_types_only_is_empty_state(self, in_memory_profile_backend):
        in_memory_profile_backend.save(
            "user-1", UserPreferenceProfile(declared_project_types={"kitchen"})
        )
        store = PreferenceStore.load("user-1", in_memory_profile_backend)
        assert store.state is QuizState.EMPTY
        assert store.has_preferences

    def test_unreadable_record_treated_as_absent(self):
        repository = MagicMock()
        repository.load.side_effect = ProfilePersistenceError("corrupt")
        store = PreferenceStore.load("user-1", repository)
        assert store.state is QuizState.EMPTY
        assert store.profile == UserPreferenceProfile()

    def test_save_failure_does_not_block_completion(self, three_card_deck, three_rule_classifier):
        repository = MagicMock()
        repository.save.side_effect = ProfilePersistenceError("redis down")
        store = PreferenceStore("user-1", repository, three_card_deck, three_rule_classifier)

        _finish(store)
        assert store.state is QuizState.COMPLETE
        assert store.profile.archetype_name == "Creative"
        assert isinstance(store.last_persist_error, ProfilePersistenceError)
        repository.save.assert_called_once()

    def test_successful_save_clears_error(self, three_card_deck, three_rule_classifier):
        repository = MagicMock()
        repository.save.side_effect = [ProfilePersistenceError("blip"), None]
        store = PreferenceStore("user-1", repository, three_card_deck, three_rule_classifier)

        store.set_onboarding_complete()
        assert store.last_persist_error is not None
        store.set_onboarding_complete()
        assert store.last_persist_error is None

    def test_set_declared_project_types_persists(self, store, in_memory_profile_backend):
        store.set_declared_project_types(["kitchen", "flooring"])
        saved = in_memory_profile_backend.load("user-1")
        assert saved.declared_project_types == frozenset({"kitchen", "flooring"})
        assert saved.archetype_name is None

    def test_project_types_declared_before_quiz_carry_into_result(self, store):
        store.set_declared_project_types(["kitchen"])
        _finish(store)
        assert store.profile.declared_project_types == frozenset({"kitchen"})

    def test_set_project_types_after_complete_keeps_archetype(self, store):
        _finish(store)
        store.set_declared_project_types(["outdoor"])
        assert store.profile.archetype_name == "Creative"
        assert store.profile.declared_project_types == frozenset({"outdoor"})

    def test_stored_project_types_survive_first_quiz(self, in_memory_profile_backend,
                                                     three_card_deck, three_rule_classifier):
        first = PreferenceStore("user-1", in_memory_profile_backend,
                                three_card_deck, three_rule_classifier)
        first.set_declared_project_types({"kitchen"})

        # New process: only the stored record is available
        second = PreferenceStore.load("user-1", in_memory_profile_backend,
                                      three_card_deck, three_rule_classifier)
        assert second.state is QuizState.EMPTY
        _finish(second, (True, True, True))

        assert second.profile.declared_project_types == frozenset({"kitchen"})
        assert in_memory_profile_backend.load("user-1").declared_project_types == frozenset(
            {"kitchen"}
        )

    def test_start_quiz_keeps_stored_project_types(self, in_memory_profile_backend,
                                                   three_card_deck, three_rule_classifier):
        in_memory_profile_backend.save(
            "user-1", UserPreferenceProfile(declared_project_types={"bathroom"})
        )
        store = PreferenceStore.load("user-1", in_memory_profile_backend,
                                     three_card_deck, three_rule_classifier)

        store.start_quiz()
        assert store.feed_label() == "Showing: bathroom"
        _finish(store)
        assert store.profile.declared_project_types == frozenset({"bathroom"})

    def test_reentry_after_load_still_discards_project_types(
        self, in_memory_profile_backend, three_card_deck, three_rule_classifier
    ):
        in_memory_profile_backend.save("user-1", UserPreferenceProfile(
            archetype_name="Creative",
            primary_style_tag="creative",
            declared_project_types={"kitchen"},
            onboarding_complete=True,
        ))
        store = PreferenceStore.load("user-1", in_memory_profile_backend,
                                     three_card_deck, three_rule_classifier)

        store.start_quiz()
        _finish(store)
        assert store.profile.declared_project_types == frozenset()

    def test_timed_out_redis_write_does_not_block_completion(self, three_card_deck,
                                                             three_rule_classifier):
        client = MagicMock()
        client.set.side_effect = TimeoutError("Timeout reading from socket")
        repository = RedisProfileBackend(client=client)
        store = PreferenceStore("user-1", repository, three_card_deck, three_rule_classifier)

        _finish(store)

        assert store.state is QuizState.COMPLETE
        assert store.profile.archetype_name == "Creative"
        assert isinstance(store.last_persist_error, ProfilePersistenceError)
        client.set.assert_called_once()


# =============================================================================
# Log context
# =============================================================================

class TestLogContext:

    def test_user_id_bound_while_persisting(self, three_card_deck, three_rule_classifier):
        seen = []
        repository = MagicMock()
        repository.save.side_effect = (
            lambda user_id, profile: seen.append(structlog.contextvars.get_contextvars())
        )
        store = PreferenceStore("user-7", repository, three_card_deck, three_rule_classifier)

        _finish(store)

        assert seen[0]["user_id"] == "user-7"
        assert "user_id" not in structlog.contextvars.get_contextvars()

    def test_user_id_bound_during_swipes(self, store, three_rule_classifier, monkeypatch):
        seen = []
        original = three_rule_classifier.classify

        def recording(vector):
            seen.append(structlog.contextvars.get_contextvars().get("user_id"))
            return original(vector)

        monkeypatch.setattr(three_rule_classifier, "classify", recording)
        _finish(store)
        assert seen == ["user-1"]


# =============================================================================
# Feed
# =============================================================================

class TestFeed:

    def test_feed_label_all(self, store):
        assert store.feed_label() == "Showing: All"

    def test_feed_label_project_types(self, store):
        store.set_declared_project_types(["kitchen", "bathroom"])
        assert store.feed_label() == "Showing: bathroom, kitchen"

    def test_feed_label_archetype(self, store):
        _finish(store)
        assert store.feed_label() == "Personalized for: Creative"

    def test_project_type_labels(self, store):
        store.set_declared_project_types(["kitchen", "garage"])
        assert store.project_type_labels() == ["Garage", "Kitchen"]

    def test_rank_uses_current_profile(self, store, sample_feed):
        store.set_declared_project_types(["bathroom"])
        ranked = store.rank(sample_feed, RankingMode.PERSONALIZED)
        assert ranked[0].id == "5"

    def test_rank_following(self, store, sample_feed):
        assert [i.id for i in store.rank(sample_feed, "following")] == ["1", "2", "4"]
