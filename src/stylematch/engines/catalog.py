"""
Default quiz content: the twelve-card style deck and the seven archetypes.

Rules are evaluated top to bottom; The Creative is the unconditional
fallback and is kept out of the rule list.
"""

from typing import Tuple

from stylematch.engines.personality import (
    BOLDNESS,
    CALMNESS,
    COLOR_TEMP,
    LUXURY,
    MINIMALISM,
    MODERN,
    NATURAL,
    SOCIAL,
    Archetype,
    ArchetypeRule,
)
from stylematch.engines.traits import CardKind, ChoiceOption, Trait, TraitCard


# =============================================================================
# Cards
# =============================================================================

DEFAULT_CARDS: Tuple[TraitCard, ...] = (
    TraitCard(
        id="energy-1",
        kind=CardKind.STATEMENT,
        statement="I love bright, vibrant colors",
        subtext="They energize me and make me happy",
        icon="sunny",
        traits=(Trait("colorEnergy", 1), Trait(BOLDNESS, 1)),
    ),
    TraitCard(
        id="energy-2",
        kind=CardKind.STATEMENT,
        statement="My ideal space feels calm and peaceful",
        subtext="A retreat from the busy world",
        icon="leaf",
        traits=(Trait("colorEnergy", -1), Trait(MINIMALISM, 1)),
    ),
    TraitCard(
        id="space-1",
        kind=CardKind.EITHER_OR,
        option_a=ChoiceOption("Cozy & Intimate", icon="home", color="#f59e0b"),
        option_b=ChoiceOption("Open & Airy", icon="expand", color="#06b6d4"),
        traits=(Trait("spaceFeel", 1),),
    ),
    TraitCard(
        id="color-1",
        kind=CardKind.COLOR,
        colors=("#1e3a5f", "#2d5a87", "#4a90b8", "#87ceeb"),
        color_label="Cool Ocean Blues",
        traits=(Trait(COLOR_TEMP, -1), Trait(CALMNESS, 1)),
    ),
    TraitCard(
        id="color-2",
        kind=CardKind.COLOR,
        colors=("#8b4513", "#d2691e", "#deb887", "#f5deb3"),
        color_label="Warm Earth Tones",
        traits=(Trait(COLOR_TEMP, 1), Trait(NATURAL, 1)),
    ),
    TraitCard(
        id="lifestyle-1",
        kind=CardKind.STATEMENT,
        statement="I love hosting dinner parties",
        subtext="My kitchen is the heart of my home",
        icon="restaurant",
        traits=(Trait(SOCIAL, 1), Trait("kitchenFocus", 1)),
    ),
    TraitCard(
        id="lifestyle-2",
        kind=CardKind.STATEMENT,
        statement="Less is more",
        subtext="I prefer clean surfaces and hidden storage",
        icon="remove-circle",
        traits=(Trait(MINIMALISM, 1), Trait("clutter", -1)),
    ),
    TraitCard(
        id="style-1",
        kind=CardKind.EITHER_OR,
        option_a=ChoiceOption("Modern & Sleek", icon="cube", color="#6366f1"),
        option_b=ChoiceOption("Warm & Traditional", icon="heart", color="#ef4444"),
        # Right swipe picks option B
        traits=(Trait(MODERN, -1), Trait("traditional", 1)),
    ),
    TraitCard(
        id="material-1",
        kind=CardKind.STATEMENT,
        statement="I'm drawn to natural materials",
        subtext="Wood, stone, marble - things with character",
        icon="leaf",
        traits=(Trait(NATURAL, 1), Trait(LUXURY, 1)),
    ),
    TraitCard(
        id="image-1",
        kind=CardKind.IMAGE,
        image_url="https://images.unsplash.com/photo-1600210492486-724fe5c67fb0?w=800",
        image_label="Modern Kitchen",
        traits=(Trait(MODERN, 1), Trait(MINIMALISM, 1)),
    ),
    TraitCard(
        id="image-2",
        kind=CardKind.IMAGE,
        image_url="https://images.unsplash.com/photo-1600585154526-990dced4db0d?w=800",
        image_label="Farmhouse Charm",
        traits=(Trait("traditional", 1), Trait(NATURAL, 1)),
    ),
    TraitCard(
        id="final-1",
        kind=CardKind.EITHER_OR,
        option_a=ChoiceOption("Timeless Classic", icon="time", color="#78716c"),
        option_b=ChoiceOption("On-Trend Now", icon="trending-up", color="#22c55e"),
        traits=(Trait("traditional", -1), Trait("trendy", 1)),
    ),
)


# =============================================================================
# Archetypes
# =============================================================================

MODERNIST = Archetype(
    name="The Modernist",
    tagline="Clean lines, clear mind",
    description=(
        "You appreciate the beauty of simplicity. Your ideal space is uncluttered, "
        "functional, and lets each carefully chosen piece shine."
    ),
    colors=("Cool grays", "Pure whites", "Black accents", "Navy blue"),
    materials=("Quartz", "Polished concrete", "Steel", "Glass"),
    tips=(
        "Choose handleless cabinets",
        "Consider a waterfall edge countertop",
        "Invest in statement lighting",
    ),
)

NATURALIST = Archetype(
    name="The Naturalist",
    tagline="Bringing the outdoors in",
    description=(
        "You're drawn to organic beauty and materials that tell a story. Your space "
        "feels grounded, warm, and connected to nature."
    ),
    colors=("Warm beiges", "Forest greens", "Terracotta", "Cream"),
    materials=("Natural marble", "Wood", "Granite", "Soapstone"),
    tips=(
        "Embrace natural stone with unique veining",
        "Mix wood tones for depth",
        "Add plants to complement materials",
    ),
)

REFINED = Archetype(
    name="The Refined",
    tagline="Quiet luxury speaks volumes",
    description=(
        "You appreciate quality over quantity. Your space exudes understated elegance "
        "with premium materials and thoughtful details."
    ),
    colors=("Soft whites", "Warm grays", "Champagne", "Muted gold"),
    materials=("Calacatta marble", "Quartzite", "Brushed brass", "Natural stone"),
    tips=(
        "Invest in book-matched slabs",
        "Choose honed finishes",
        "Layer textures for visual interest",
    ),
)

ENTERTAINER = Archetype(
    name="The Entertainer",
    tagline="Life of the party, heart of the home",
    description=(
        "Your kitchen is your stage! You love spaces that spark conversation and "
        "make a statement."
    ),
    colors=("Bold blues", "Rich greens", "Dramatic black", "Pops of color"),
    materials=("Dramatic veined marble", "Colorful quartz", "Patterned tile", "Mixed metals"),
    tips=(
        "Consider a large island for gathering",
        "Choose statement backsplash",
        "Install good task and ambient lighting",
    ),
)

TRADITIONALIST = Archetype(
    name="The Traditionalist",
    tagline="Timeless beauty never goes out of style",
    description=(
        "You value classic design that stands the test of time. Your space feels "
        "welcoming and elegantly appointed."
    ),
    colors=("Cream", "Warm white", "Soft sage", "Classic navy"),
    materials=("Granite", "Marble", "Natural wood", "Ceramic tile"),
    tips=(
        "Choose classic edge profiles",
        "Consider furniture-style cabinet details",
        "Mix traditional patterns",
    ),
)

ZEN_SEEKER = Archetype(
    name="The Zen Seeker",
    tagline="Find peace in your space",
    description=(
        "Your home is your sanctuary. You crave calm, balanced spaces that help "
        "you decompress."
    ),
    colors=("Soft whites", "Pale grays", "Sage green", "Sand"),
    materials=("Matte quartz", "Light wood", "Natural stone", "Concrete"),
    tips=(
        "Keep countertops clear",
        "Choose seamless, integrated sinks",
        "Use soft, diffused lighting",
    ),
)

CREATIVE = Archetype(
    name="The Creative",
    tagline="Rules are meant to be broken",
    description=(
        "You don't fit in a box - and neither should your space! You love mixing "
        "styles and materials."
    ),
    colors=("Mixed palette", "Unexpected combos", "Personal favorites", "Accent colors"),
    materials=("Mixed materials", "Vintage finds", "Bold patterns", "Unique stones"),
    tips=(
        "Don't be afraid to mix materials",
        "Let your personality guide choices",
        "Focus on pieces that bring you joy",
    ),
)


DEFAULT_RULES: Tuple[ArchetypeRule, ...] = (
    ArchetypeRule(
        MODERNIST,
        lambda f: f.is_modern and f.is_minimal and not f.is_warm,
        label="modern & minimal & !warm",
    ),
    ArchetypeRule(
        NATURALIST,
        lambda f: f.is_warm and f.is_natural and not f.is_modern,
        label="warm & natural & !modern",
    ),
    ArchetypeRule(REFINED, lambda f: f.is_luxury and f.is_calm, label="luxury & calm"),
    ArchetypeRule(ENTERTAINER, lambda f: f.is_bold and f.is_social, label="bold & social"),
    ArchetypeRule(
        TRADITIONALIST,
        lambda f: f.is_warm and not f.is_modern,
        label="warm & !modern",
    ),
    ArchetypeRule(ZEN_SEEKER, lambda f: f.is_minimal and f.is_calm, label="minimal & calm"),
)

DEFAULT_FALLBACK = CREATIVE
