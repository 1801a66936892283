"""
Core Utility Functions.

Common helpers shared by the engines and the ranking code.
"""

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def slugify_style_name(name: str) -> str:
    """
    Turn an archetype display name into its style-tag slug.

    Lower-cases the name and replaces each run of whitespace with a single
    underscore. The name is not trimmed, so
    leading and trailing whitespace also become underscores.

    Examples:
        >>> slugify_style_name("The Modernist")
        'the_modernist'
        >>> slugify_style_name("The  Zen Seeker")
        'the_zen_seeker'
    """
    return _WHITESPACE_RUN.sub("_", name.lower())
