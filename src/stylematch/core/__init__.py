"""
Core module for cross-cutting concerns.

This module provides:
- Structured logging configuration
- The engine's exception hierarchy
- Common utilities
"""

from stylematch.core.errors import (
    ClassifierConfigurationError,
    ConfigurationError,
    DeckConfigurationError,
    ProfilePersistenceError,
    QuizAlreadyCompleteError,
    SequencingError,
    StyleMatchError,
)
from stylematch.core.logging import configure_logging, get_logger
from stylematch.core.utils import slugify_style_name

__all__ = [
    "configure_logging",
    "get_logger",
    "StyleMatchError",
    "SequencingError",
    "QuizAlreadyCompleteError",
    "ConfigurationError",
    "DeckConfigurationError",
    "ClassifierConfigurationError",
    "ProfilePersistenceError",
    "slugify_style_name",
]
