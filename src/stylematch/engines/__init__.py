"""
Quiz engines for style discovery.

- TraitCard / TraitDeck: the swipeable cards and their fixed order
- apply_decision / SwipeSession: fold swipes into a preference vector
- PersonalityClassifier: first-match archetype rules with a fallback

Factory functions:
- get_default_deck: built-in twelve-card deck
- get_default_classifier: built-in seven-archetype classifier
- new_session: swipe session over the defaults
"""
from .traits import CardKind, ChoiceOption, Trait, TraitCard, TraitDeck
from .personality import Archetype, ArchetypeRule, PersonalityClassifier, StyleFlags
from .swipe_engine import (
    PreferenceVector,
    SwipeAction,
    SwipeResult,
    SwipeSession,
    apply_action,
    apply_decision,
)
from .factory import clear_engines, get_default_classifier, get_default_deck, new_session

__all__ = [
    # Cards
    'CardKind', 'ChoiceOption', 'Trait', 'TraitCard', 'TraitDeck',
    # Classification
    'Archetype', 'ArchetypeRule', 'PersonalityClassifier', 'StyleFlags',
    # Accumulation
    'PreferenceVector', 'SwipeAction', 'SwipeResult', 'SwipeSession',
    'apply_action', 'apply_decision',
    # Factory functions
    'get_default_deck',
    'get_default_classifier',
    'new_session',
    'clear_engines',
]
