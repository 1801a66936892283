"""
Style personality classification.

Maps a completed preference vector to exactly one archetype using an ordered
list of rules. Each rule is a predicate over sign-derived flags; the first
rule (in declaration order) whose predicate holds wins. This is first-match,
not best-match.

The fallback archetype is a separate, mandatory constructor argument rather
than the last entry of the rule list, so every classifier is total: any
vector, including the empty one, yields an archetype.

Flags use a strict ``> 0`` test. A dimension that was never touched (or that
netted out to zero) is false for its positive pole and gives no evidence
either way.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Mapping, Optional, Tuple

from stylematch.core.errors import ClassifierConfigurationError
from stylematch.core.logging import get_logger
from stylematch.core.utils import slugify_style_name

logger = get_logger(__name__)


# Dimension names used by the default deck and rules
COLOR_TEMP = "colorTemp"
BOLDNESS = "boldness"
MODERN = "modern"
MINIMALISM = "minimalism"
NATURAL = "natural"
LUXURY = "luxury"
SOCIAL = "social"
CALMNESS = "calmness"


@dataclass(frozen=True)
class Archetype:
    """A named style personality with its display content."""
    name: str
    tagline: str = ""
    description: str = ""
    colors: Tuple[str, ...] = field(default_factory=tuple)
    materials: Tuple[str, ...] = field(default_factory=tuple)
    tips: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ClassifierConfigurationError("Archetype name must be non-empty")
        object.__setattr__(self, "colors", tuple(self.colors))
        object.__setattr__(self, "materials", tuple(self.materials))
        object.__setattr__(self, "tips", tuple(self.tips))

    @property
    def primary_style_tag(self) -> str:
        """Slug used as the join key into the style-keyword table."""
        return slugify_style_name(self.name)

    @property
    def primary_color(self) -> Optional[str]:
        return self.colors[0] if self.colors else None


@dataclass(frozen=True)
class StyleFlags:
    """
    Boolean view over a preference vector.

    ``flag(dim)`` is true only when the accumulated value is strictly
    positive. The named properties cover the dimensions of the default quiz.
    """
    vector: Mapping[str, float]

    def flag(self, dimension: str) -> bool:
        return self.vector.get(dimension, 0) > 0

    @classmethod
    def from_vector(cls, vector: Mapping[str, float]) -> "StyleFlags":
        return cls(vector=dict(vector))

    @property
    def is_warm(self) -> bool:
        return self.flag(COLOR_TEMP)

    @property
    def is_bold(self) -> bool:
        return self.flag(BOLDNESS)

    @property
    def is_modern(self) -> bool:
        return self.flag(MODERN)

    @property
    def is_minimal(self) -> bool:
        return self.flag(MINIMALISM)

    @property
    def is_natural(self) -> bool:
        return self.flag(NATURAL)

    @property
    def is_luxury(self) -> bool:
        return self.flag(LUXURY)

    @property
    def is_social(self) -> bool:
        return self.flag(SOCIAL)

    @property
    def is_calm(self) -> bool:
        return self.flag(CALMNESS)

    def as_dict(self) -> dict:
        return {
            "is_warm": self.is_warm,
            "is_bold": self.is_bold,
            "is_modern": self.is_modern,
            "is_minimal": self.is_minimal,
            "is_natural": self.is_natural,
            "is_luxury": self.is_luxury,
            "is_social": self.is_social,
            "is_calm": self.is_calm,
        }


Predicate = Callable[[StyleFlags], bool]


@dataclass(frozen=True)
class ArchetypeRule:
    """(predicate, archetype) pair. ``label`` documents the condition."""
    archetype: Archetype
    predicate: Predicate
    label: str = ""


class PersonalityClassifier:
    """
    First-match rule classifier with a structural fallback.

    Usage:
        classifier = PersonalityClassifier(
            rules=[
                ArchetypeRule(modernist, lambda f: f.is_modern and f.is_minimal),
                ArchetypeRule(naturalist, lambda f: f.is_warm and f.is_natural),
            ],
            fallback=creative,
        )
        archetype = classifier.classify({"modern": 1, "minimalism": 1})
    """

    def __init__(self, rules: Iterable[ArchetypeRule], fallback: Archetype):
        if not isinstance(fallback, Archetype):
            raise ClassifierConfigurationError(
                "A classifier requires an unconditional fallback archetype"
            )
        rules = tuple(rules)
        for rule in rules:
            if not isinstance(rule, ArchetypeRule) or not callable(rule.predicate):
                raise ClassifierConfigurationError(f"Invalid classifier rule: {rule!r}")

        self._rules = rules
        self._fallback = fallback

    @property
    def rules(self) -> Tuple[ArchetypeRule, ...]:
        return self._rules

    @property
    def fallback(self) -> Archetype:
        return self._fallback

    @property
    def archetypes(self) -> Tuple[Archetype, ...]:
        """Every archetype the classifier can return, fallback last."""
        return tuple(r.archetype for r in self._rules) + (self._fallback,)

    def classify(self, vector: Mapping[str, float]) -> Archetype:
        flags = StyleFlags.from_vector(vector)
        for rule in self._rules:
            if rule.predicate(flags):
                logger.debug("archetype_matched", archetype=rule.archetype.name, rule=rule.label)
                return rule.archetype

        logger.debug("archetype_fallback", archetype=self._fallback.name)
        return self._fallback

    def matching_rules(self, vector: Mapping[str, float]) -> List[Archetype]:
        """All archetypes whose rule holds for ``vector``, in declaration order."""
        flags = StyleFlags.from_vector(vector)
        matches = [r.archetype for r in self._rules if r.predicate(flags)]
        matches.append(self._fallback)
        return matches

    def find(self, name: str) -> Optional[Archetype]:
        """Look up an archetype by display name."""
        for archetype in self.archetypes:
            if archetype.name == name:
                return archetype
        return None
