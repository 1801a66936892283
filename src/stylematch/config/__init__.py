"""
Configuration module for the preference engine.

Usage:
    from stylematch.config import get_settings

    settings = get_settings()
    backend = settings.profile_backend
"""

from stylematch.config.settings import Settings, get_settings, get_settings_for_testing

__all__ = ["Settings", "get_settings", "get_settings_for_testing"]
