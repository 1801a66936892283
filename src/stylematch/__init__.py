"""
stylematch: swipe-driven style preference inference and feed ranking.

- engines: trait cards, swipe accumulation, personality classification
- scoring: content/profile models and the feed ranker
- services: preference store and profile persistence
"""

from stylematch.engines import (
    Archetype,
    PersonalityClassifier,
    SwipeSession,
    TraitCard,
    TraitDeck,
    apply_decision,
    get_default_classifier,
    get_default_deck,
)
from stylematch.scoring import ContentItem, RankingMode, UserPreferenceProfile, rank
from stylematch.services import PreferenceStore, QuizState

__version__ = "0.1.0"

__all__ = [
    "Archetype",
    "PersonalityClassifier",
    "SwipeSession",
    "TraitCard",
    "TraitDeck",
    "apply_decision",
    "get_default_classifier",
    "get_default_deck",
    "ContentItem",
    "RankingMode",
    "UserPreferenceProfile",
    "rank",
    "PreferenceStore",
    "QuizState",
]
