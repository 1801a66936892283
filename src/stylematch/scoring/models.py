"""
Pydantic models for ranking.

Models cover:
- ContentItem / Engagement: one piece of feed content from the content source
- UserPreferenceProfile: the durable result of the style quiz plus declared
  project interests

Both are frozen. The ranker only reorders references to items, and the
preference store replaces the profile as a whole record instead of patching
it.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# Enums
# =============================================================================

class ContentKind(str, Enum):
    """What a feed card shows."""
    PROJECT = "project"
    PRODUCT = "product"
    TIP = "tip"
    BEFORE_AFTER = "before_after"


# =============================================================================
# Content
# =============================================================================

class Engagement(BaseModel):
    """Interaction counters for a content item."""
    model_config = ConfigDict(frozen=True)

    likes: int = Field(0, ge=0)
    saves: int = Field(0, ge=0)
    comments: int = Field(0, ge=0)
    shares: int = Field(0, ge=0)


class ContentItem(BaseModel):
    """
    One rankable piece of content.

    Optional fields (project_type, style) contribute nothing to a score when
    missing. Accepts the content source's camelCase keys (``projectType``,
    ``createdAt``) and a nested ``author.verified`` flag.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    tags: FrozenSet[str] = Field(default_factory=frozenset)
    project_type: Optional[str] = Field(None, alias="projectType")
    style: Optional[str] = None
    engagement: Engagement = Field(default_factory=Engagement)
    verified: bool = False
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    # Display
    title: Optional[str] = None
    kind: Optional[ContentKind] = Field(None, alias="type")

    @model_validator(mode="before")
    @classmethod
    def lift_author_verified(cls, data: Any) -> Any:
        """Read ``verified`` from a nested author record when present."""
        if isinstance(data, dict) and "verified" not in data:
            author = data.get("author")
            if isinstance(author, dict) and "verified" in author:
                data = dict(data)
                data["verified"] = bool(author["verified"])
        return data

    @property
    def lowered_tags(self) -> FrozenSet[str]:
        return frozenset(t.lower() for t in self.tags)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentItem":
        return cls.model_validate(data)


# =============================================================================
# Preference Profile
# =============================================================================

class UserPreferenceProfile(BaseModel):
    """
    Durable summary of a user's style preferences.

    ``archetype_name`` and ``primary_style_tag`` stay None until the quiz is
    completed. The persisted record schema is exactly these four fields.
    """
    model_config = ConfigDict(frozen=True)

    archetype_name: Optional[str] = None
    primary_style_tag: Optional[str] = None
    declared_project_types: FrozenSet[str] = Field(default_factory=frozenset)
    onboarding_complete: bool = False

    @classmethod
    def empty(cls) -> "UserPreferenceProfile":
        return cls()

    @property
    def has_completed_quiz(self) -> bool:
        return self.archetype_name is not None

    def with_project_types(self, project_types: Iterable[str]) -> "UserPreferenceProfile":
        """Copy of this profile with the declared project types replaced."""
        return self.model_copy(update={"declared_project_types": frozenset(project_types)})

    def with_onboarding_complete(self, complete: bool = True) -> "UserPreferenceProfile":
        return self.model_copy(update={"onboarding_complete": complete})

    def to_record(self) -> Dict[str, Any]:
        """Serialize for a key-value store (project types sorted for stable output)."""
        return {
            "archetype_name": self.archetype_name,
            "primary_style_tag": self.primary_style_tag,
            "declared_project_types": sorted(self.declared_project_types),
            "onboarding_complete": self.onboarding_complete,
        }

    @classmethod
    def from_record(cls, data: Dict[str, Any]) -> "UserPreferenceProfile":
        return cls.model_validate(data)
