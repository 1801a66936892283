"""
Style keywords per style tag.

Keys are archetype slugs (``Archetype.primary_style_tag``) plus the plain
style names used by content authors, so a profile carrying either form
resolves to a keyword set. Keywords are lowercase and are compared against
lower-cased content tags.
"""

from typing import Dict, FrozenSet, Mapping, Optional, Tuple

# fmt: off
_STYLE_VOCABULARY: Dict[str, Tuple[str, ...]] = {
    "modern":      ("modern", "minimalist", "clean", "sleek", "contemporary"),
    "traditional": ("traditional", "classic", "timeless", "elegant", "ornate"),
    "rustic":      ("rustic", "farmhouse", "natural", "wood", "reclaimed"),
    "industrial":  ("industrial", "metal", "concrete", "raw", "urban"),
    "coastal":     ("coastal", "beach", "blue", "white", "nautical"),
    "bohemian":    ("bohemian", "eclectic", "colorful", "artisan", "textured"),
}

STYLE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "the_modernist":      _STYLE_VOCABULARY["modern"],
    "the_naturalist":     _STYLE_VOCABULARY["rustic"],
    "the_refined":        ("luxury", "marble", "elegant", "timeless", "quartzite"),
    "the_entertainer":    ("entertaining", "colorful", "statement", "bold", "island"),
    "the_traditionalist": _STYLE_VOCABULARY["traditional"],
    "the_zen_seeker":     ("minimalist", "clean", "calm", "serene", "natural"),
    "the_creative":       _STYLE_VOCABULARY["bohemian"],
    **_STYLE_VOCABULARY,
}
# fmt: on


def get_style_keywords(
    style_tag: Optional[str],
    table: Optional[Mapping[str, Tuple[str, ...]]] = None,
) -> FrozenSet[str]:
    """
    Keyword set for a style tag.

    Tags and table keys compare case-insensitively. Unknown or missing tags
    resolve to an empty set rather than an error.
    """
    if not style_tag:
        return frozenset()
    table = STYLE_KEYWORDS if table is None else table
    key = style_tag.lower()
    for name, keywords in table.items():
        if name.lower() == key:
            return frozenset(k.lower() for k in keywords)
    return frozenset()
