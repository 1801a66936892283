"""
Trait cards and the quiz deck.

A trait card is one swipeable unit (a statement, an image, a colour swatch or
an either/or choice). Each card tags one or more taste dimensions with a
signed weight; the weight is applied as-is when the card is accepted
("swiped right") and negated when it is rejected.

The deck is an ordered, fixed sequence. It is never shuffled so that quiz
runs are reproducible.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

from stylematch.core.errors import DeckConfigurationError


class CardKind(str, Enum):
    """How a card is presented."""
    STATEMENT = "statement"
    IMAGE = "image"
    COLOR = "color"
    EITHER_OR = "either_or"


@dataclass(frozen=True)
class Trait:
    """One (dimension, weight) pair carried by a card."""
    dimension: str
    weight: int = 1

    def __post_init__(self):
        if not self.dimension:
            raise DeckConfigurationError("Trait dimension must be a non-empty string")


@dataclass(frozen=True)
class ChoiceOption:
    """One side of an either/or card."""
    label: str
    icon: Optional[str] = None
    color: Optional[str] = None


@dataclass(frozen=True)
class TraitCard:
    """
    Immutable quiz card.

    Only ``traits`` take part in accumulation; the remaining fields are
    presentation content for the UI layer.
    """
    id: str
    kind: CardKind
    traits: Tuple[Trait, ...]

    # Presentation
    statement: Optional[str] = None
    subtext: Optional[str] = None
    icon: Optional[str] = None
    image_url: Optional[str] = None
    image_label: Optional[str] = None
    option_a: Optional[ChoiceOption] = None
    option_b: Optional[ChoiceOption] = None
    colors: Tuple[str, ...] = field(default_factory=tuple)
    color_label: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise DeckConfigurationError("Trait card id must be a non-empty string")
        # Accept lists for convenience; store tuples so the card stays hashable.
        object.__setattr__(self, "kind", CardKind(self.kind))
        object.__setattr__(self, "traits", tuple(self.traits))
        object.__setattr__(self, "colors", tuple(self.colors))
        if not self.traits:
            raise DeckConfigurationError(f"Trait card '{self.id}' has no traits")

    @property
    def dimensions(self) -> Tuple[str, ...]:
        return tuple(t.dimension for t in self.traits)


class TraitDeck:
    """
    Ordered, validated collection of trait cards.

    Raises DeckConfigurationError at construction if the deck is empty or
    contains duplicate card ids.
    """

    def __init__(self, cards: Iterable[TraitCard]):
        cards = tuple(cards)
        if not cards:
            raise DeckConfigurationError("A deck needs at least one card")

        seen = set()
        for card in cards:
            if card.id in seen:
                raise DeckConfigurationError(f"Duplicate card id in deck: '{card.id}'")
            seen.add(card.id)

        self._cards = cards

    @property
    def cards(self) -> Tuple[TraitCard, ...]:
        return self._cards

    @property
    def dimensions(self) -> Tuple[str, ...]:
        """Every dimension referenced by the deck, in first-seen order."""
        ordered = {}
        for card in self._cards:
            for dim in card.dimensions:
                ordered.setdefault(dim, None)
        return tuple(ordered)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[TraitCard]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> TraitCard:
        return self._cards[index]

    def __repr__(self) -> str:
        return f"TraitDeck({len(self._cards)} cards)"
