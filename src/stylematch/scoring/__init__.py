"""
Feed Scoring Module.

Quick start::

    from stylematch.scoring import ContentItem, RankingMode, UserPreferenceProfile, rank

    profile = UserPreferenceProfile(
        archetype_name="The Modernist",
        primary_style_tag="the_modernist",
        declared_project_types={"kitchen"},
    )
    feed = rank(profile, catalog, RankingMode.PERSONALIZED)
"""

from stylematch.scoring.feed_ranker import (
    FeedRanker,
    FeedScoringConfig,
    RankingMode,
    ScoredItem,
    get_feed_ranker,
    rank,
)
from stylematch.scoring.models import (
    ContentItem,
    ContentKind,
    Engagement,
    UserPreferenceProfile,
)

__all__ = [
    "ContentItem",
    "ContentKind",
    "Engagement",
    "UserPreferenceProfile",
    "FeedRanker",
    "FeedScoringConfig",
    "RankingMode",
    "ScoredItem",
    "get_feed_ranker",
    "rank",
]
