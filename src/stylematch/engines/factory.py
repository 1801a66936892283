"""
Engine Factory Module.

Builds the default deck and classifier once and hands out shared instances.
Both are immutable, so sharing them across sessions is safe.
"""

from typing import Optional

from stylematch.core.logging import get_logger
from stylematch.engines.catalog import DEFAULT_CARDS, DEFAULT_FALLBACK, DEFAULT_RULES
from stylematch.engines.personality import PersonalityClassifier
from stylematch.engines.swipe_engine import SwipeSession
from stylematch.engines.traits import TraitDeck

logger = get_logger(__name__)

_deck: Optional[TraitDeck] = None
_classifier: Optional[PersonalityClassifier] = None


def get_default_deck() -> TraitDeck:
    """Get the default twelve-card style deck (validated on first use)."""
    global _deck
    if _deck is None:
        _deck = TraitDeck(DEFAULT_CARDS)
        logger.debug("default_deck_loaded", cards=len(_deck), dimensions=len(_deck.dimensions))
    return _deck


def get_default_classifier() -> PersonalityClassifier:
    """Get the classifier built from the default archetype rules."""
    global _classifier
    if _classifier is None:
        _classifier = PersonalityClassifier(DEFAULT_RULES, DEFAULT_FALLBACK)
        logger.debug("default_classifier_loaded", archetypes=len(_classifier.archetypes))
    return _classifier


def new_session(
    deck: Optional[TraitDeck] = None,
    classifier: Optional[PersonalityClassifier] = None,
) -> SwipeSession:
    """Start a swipe session, defaulting to the built-in deck and rules."""
    return SwipeSession(
        deck if deck is not None else get_default_deck(),
        classifier if classifier is not None else get_default_classifier(),
    )


def clear_engines() -> None:
    """Drop cached instances. Useful for testing."""
    global _deck, _classifier
    _deck = None
    _classifier = None
