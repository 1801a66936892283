"""
Pytest configuration and shared fixtures for the preference engine tests.
"""
import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))

# Load environment variables
from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"))


# ============================================================================
# Fixtures: Quiz Content
# ============================================================================

@pytest.fixture
def three_card_deck():
    """card1 {dimA:+1}, card2 {dimA:+1, dimB:-1}, card3 {dimB:+1}."""
    from stylematch.engines.traits import CardKind, Trait, TraitCard, TraitDeck
    return TraitDeck([
        TraitCard(id="card1", kind=CardKind.STATEMENT, traits=[Trait("dimA", 1)]),
        TraitCard(id="card2", kind=CardKind.IMAGE, traits=[Trait("dimA", 1), Trait("dimB", -1)]),
        TraitCard(id="card3", kind=CardKind.COLOR, traits=[Trait("dimB", 1)]),
    ])


@pytest.fixture
def three_rule_classifier():
    """Modernist / Naturalist / Creative (fallback)."""
    from stylematch.engines.personality import Archetype, ArchetypeRule, PersonalityClassifier
    return PersonalityClassifier(
        rules=[
            ArchetypeRule(Archetype("Modernist"), lambda f: f.is_modern and f.is_minimal),
            ArchetypeRule(Archetype("Naturalist"), lambda f: f.is_warm and f.is_natural),
        ],
        fallback=Archetype("Creative"),
    )


@pytest.fixture
def default_deck():
    from stylematch.engines.factory import get_default_deck
    return get_default_deck()


@pytest.fixture
def default_classifier():
    from stylematch.engines.factory import get_default_classifier
    return get_default_classifier()


# ============================================================================
# Fixtures: Content
# ============================================================================

def make_item(item_id: str, **overrides):
    """Build a ContentItem with sensible defaults."""
    from stylematch.scoring.models import ContentItem
    defaults = {
        "id": item_id,
        "tags": [],
        "project_type": None,
        "style": None,
        "engagement": {"likes": 0, "saves": 0, "comments": 0, "shares": 0},
        "verified": False,
    }
    defaults.update(overrides)
    return ContentItem(**defaults)


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def sample_feed():
    """A small feed modelled on the inspiration feed content."""
    return [
        make_item(
            "1", tags=["modern", "quartz", "kitchen", "minimalist"], style="Modern",
            project_type="kitchen", verified=True,
            engagement={"likes": 2341, "saves": 456, "comments": 89, "shares": 23},
        ),
        make_item(
            "2", tags=["luxury", "marble", "italian", "traditional", "elegant"], style="Luxury",
            project_type="countertops", verified=True,
            engagement={"likes": 1876, "saves": 892, "comments": 45, "shares": 67},
        ),
        make_item(
            "3", tags=["tips", "countertops", "guide"], style="Educational",
            project_type="countertops",
            engagement={"likes": 5678, "saves": 2341, "comments": 234, "shares": 156},
        ),
        make_item(
            "4", tags=["rustic", "farmhouse", "natural", "wood", "reclaimed"], style="Rustic",
            project_type="kitchen", verified=True,
            engagement={"likes": 3892, "saves": 1567, "comments": 134, "shares": 78},
        ),
        make_item(
            "5", tags=["sale", "remnants", "deal"], project_type="bathroom",
            engagement={"likes": 2145, "saves": 543, "comments": 67, "shares": 234},
        ),
    ]


@pytest.fixture
def empty_profile():
    from stylematch.scoring.models import UserPreferenceProfile
    return UserPreferenceProfile()


# ============================================================================
# Fixtures: Persistence
# ============================================================================

@pytest.fixture
def in_memory_profile_backend():
    """In-memory profile backend for testing."""
    from stylematch.services.profile_repository import InMemoryProfileBackend
    return InMemoryProfileBackend()


@pytest.fixture(autouse=True)
def reset_engine_cache():
    """Make sure cached default engines never leak between tests."""
    from stylematch.engines.factory import clear_engines
    clear_engines()
    yield
    clear_engines()


# ============================================================================
# Markers auto-use
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "redis: marks tests that require a Redis server")
