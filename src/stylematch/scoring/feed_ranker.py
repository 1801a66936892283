"""
Feed ranking: orders a content catalog for one user.

Three independent modes:

- ``PERSONALIZED`` ("for_you"): additive taste score, descending
      score = project_match + style_keyword_hits + style_label_match
              + min(5, (likes + 2 * saves) / 1000)
- ``FOLLOWING``: verified authors only, catalog order kept
- ``TRENDING``: likes + saves, descending; the profile is ignored

Every call works from the full catalog it is given, and every sort is
stable: items with equal keys keep their catalog order.

Usage::

    from stylematch.scoring.feed_ranker import FeedRanker, RankingMode

    ranker = FeedRanker()
    feed = ranker.rank(profile, catalog, RankingMode.PERSONALIZED)

    # Debugging / admin UI
    breakdown = ranker.explain_item(feed[0], profile)
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from stylematch.core.logging import get_logger
from stylematch.scoring.constants.style_keywords import STYLE_KEYWORDS, get_style_keywords
from stylematch.scoring.models import ContentItem, UserPreferenceProfile

logger = get_logger(__name__)


class RankingMode(str, Enum):
    PERSONALIZED = "for_you"
    FOLLOWING = "following"
    TRENDING = "trending"

    @classmethod
    def parse(cls, value: Union[str, "RankingMode"]) -> "RankingMode":
        """Accept an enum, its value ("for_you") or its name ("personalized")."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for mode in cls:
            if key in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"Unknown ranking mode: {value!r}")


@dataclass(frozen=True)
class FeedScoringConfig:
    """
    Weights for personalized scoring.

    The engagement boost divides by a fixed constant and is capped so that
    popularity can nudge the order but never outweigh a taste match.
    """
    project_match: float = 10.0
    style_keyword_match: float = 5.0     # per matching tag
    style_label_match: float = 3.0
    engagement_divisor: float = 1000.0
    engagement_save_weight: int = 2
    engagement_cap: float = 5.0


DEFAULT_SCORING_CONFIG = FeedScoringConfig()


@dataclass(frozen=True)
class ScoredItem:
    item: ContentItem
    score: float


class FeedRanker:
    """
    Deterministic, explainable feed ranking.

    Stateless apart from its configuration, so one instance can be shared.
    """

    def __init__(
        self,
        config: Optional[FeedScoringConfig] = None,
        style_keywords: Optional[Mapping[str, Tuple[str, ...]]] = None,
    ) -> None:
        self.config = config or DEFAULT_SCORING_CONFIG
        self.style_keywords = STYLE_KEYWORDS if style_keywords is None else style_keywords

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def engagement_boost(self, item: ContentItem) -> float:
        cfg = self.config
        e = item.engagement
        raw = (e.likes + cfg.engagement_save_weight * e.saves) / cfg.engagement_divisor
        return min(cfg.engagement_cap, raw)

    def _components(
        self,
        item: ContentItem,
        profile: UserPreferenceProfile,
        keywords: frozenset,
    ) -> dict:
        cfg = self.config
        style_tag = (profile.primary_style_tag or "").lower()

        project = 0.0
        if item.project_type is not None and item.project_type in profile.declared_project_types:
            project = cfg.project_match

        keyword_hits = sum(1 for tag in item.tags if tag.lower() in keywords)

        label = 0.0
        if item.style is not None and style_tag and style_tag in item.style.lower():
            label = cfg.style_label_match

        return {
            "project": project,
            "keyword_hits": keyword_hits,
            "keywords": keyword_hits * cfg.style_keyword_match,
            "style_label": label,
            "engagement": self.engagement_boost(item),
        }

    def score_item(
        self,
        item: ContentItem,
        profile: UserPreferenceProfile,
        keywords: Optional[frozenset] = None,
    ) -> float:
        """Personalized score for one item. Always >= 0."""
        if keywords is None:
            keywords = get_style_keywords(profile.primary_style_tag, self.style_keywords)
        c = self._components(item, profile, keywords)
        return c["project"] + c["keywords"] + c["style_label"] + c["engagement"]

    def score_items(
        self,
        items: Sequence[ContentItem],
        profile: UserPreferenceProfile,
    ) -> List[ScoredItem]:
        """Score every item, in catalog order."""
        keywords = get_style_keywords(profile.primary_style_tag, self.style_keywords)
        return [ScoredItem(item, self.score_item(item, profile, keywords)) for item in items]

    def explain_item(self, item: ContentItem, profile: UserPreferenceProfile) -> dict:
        """Per-component breakdown of ``score_item`` for debugging."""
        keywords = get_style_keywords(profile.primary_style_tag, self.style_keywords)
        c = self._components(item, profile, keywords)
        breakdown = {
            "item_id": item.id,
            "project": c["project"],
            "keyword_hits": c["keyword_hits"],
            "keywords": c["keywords"],
            "style_label": c["style_label"],
            "engagement": round(c["engagement"], 4),
        }
        breakdown["total"] = round(
            c["project"] + c["keywords"] + c["style_label"] + c["engagement"], 4
        )
        return breakdown

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------

    def personalized(
        self,
        profile: UserPreferenceProfile,
        catalog: Sequence[ContentItem],
    ) -> List[ContentItem]:
        scored = self.score_items(catalog, profile)
        scored = sorted(scored, key=lambda s: s.score, reverse=True)
        return [s.item for s in scored]

    @staticmethod
    def following(catalog: Sequence[ContentItem]) -> List[ContentItem]:
        return [item for item in catalog if item.verified]

    @staticmethod
    def trending(catalog: Sequence[ContentItem]) -> List[ContentItem]:
        return sorted(
            catalog,
            key=lambda item: item.engagement.likes + item.engagement.saves,
            reverse=True,
        )

    def rank(
        self,
        profile: UserPreferenceProfile,
        catalog: Sequence[ContentItem],
        mode: Union[RankingMode, str] = RankingMode.PERSONALIZED,
    ) -> List[ContentItem]:
        """
        Order ``catalog`` for presentation.

        Returns a new list of the same item objects; the catalog is never
        modified.
        """
        mode = RankingMode.parse(mode)

        if mode is RankingMode.PERSONALIZED:
            ranked = self.personalized(profile, catalog)
        elif mode is RankingMode.FOLLOWING:
            ranked = self.following(catalog)
        else:
            ranked = self.trending(catalog)

        logger.debug(
            "feed_ranked",
            mode=mode.value,
            catalog_size=len(catalog),
            result_size=len(ranked),
            style_tag=profile.primary_style_tag,
        )
        return ranked


_default_ranker: Optional[FeedRanker] = None


def get_feed_ranker() -> FeedRanker:
    """Shared ranker with the default weights and keyword table."""
    global _default_ranker
    if _default_ranker is None:
        _default_ranker = FeedRanker()
    return _default_ranker


def rank(
    profile: UserPreferenceProfile,
    catalog: Sequence[ContentItem],
    mode: Union[RankingMode, str] = RankingMode.PERSONALIZED,
    style_keywords: Optional[Mapping[str, Tuple[str, ...]]] = None,
) -> List[ContentItem]:
    """Rank with the default weights; pass ``style_keywords`` to swap the table."""
    if style_keywords is not None:
        return FeedRanker(style_keywords=style_keywords).rank(profile, catalog, mode)
    return get_feed_ranker().rank(profile, catalog, mode)
