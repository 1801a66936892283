"""
Exception hierarchy for the preference engine.

Sequencing and configuration errors are programmer/flow errors and propagate
to the caller. Persistence errors are raised by repository backends and
absorbed by the PreferenceStore, which logs them and carries on.
"""


class StyleMatchError(Exception):
    """Base class for all engine errors."""


class SequencingError(StyleMatchError):
    """An operation was invoked in a state that does not allow it."""


class QuizAlreadyCompleteError(SequencingError):
    """Raised when a swipe is applied after the last card of the deck."""

    def __init__(self, deck_size: int):
        self.deck_size = deck_size
        super().__init__(
            f"Quiz already complete: all {deck_size} cards have been answered"
        )


class ConfigurationError(StyleMatchError, ValueError):
    """Static engine data (deck, classifier rules) is malformed."""


class DeckConfigurationError(ConfigurationError):
    """Raised when a trait card or deck is malformed."""


class ClassifierConfigurationError(ConfigurationError):
    """Raised when a classifier is built without a valid fallback archetype."""


class ProfilePersistenceError(StyleMatchError):
    """Raised by a profile backend when a read or write fails."""
