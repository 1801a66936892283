"""
Services module for stateful preference handling.

Provides the PreferenceStore state machine and its persistence backends.
"""

from stylematch.services.preference_store import PreferenceStore, QuizState
from stylematch.services.profile_repository import (
    InMemoryProfileBackend,
    ProfileRepository,
    RedisProfileBackend,
    get_profile_repository,
)

__all__ = [
    "PreferenceStore",
    "QuizState",
    "ProfileRepository",
    "InMemoryProfileBackend",
    "RedisProfileBackend",
    "get_profile_repository",
]
