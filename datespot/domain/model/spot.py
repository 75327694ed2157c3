"""Spot aggregate root.

A spot is a recommended date location. Its ``rating``/``total_votes`` pair is
owned by the rating aggregator and its ``upvotes``/``downvotes`` counters by
the vote ledger; nothing else writes them.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from datespot.domain.model.common import DomainModel
from datespot.domain.value import DEFAULT_TAG, Category, GeoPoint, SpotId, UserId


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Spot(DomainModel):
    """Spot aggregate root."""

    id: SpotId
    name: str = Field(min_length=1, max_length=200)
    location: str = Field(min_length=1, max_length=300)
    category: Category
    price_level: int = Field(default=2, ge=1, le=4)
    description: str = Field(default="", max_length=5000)
    rating: float = Field(default=0.0, ge=0, le=5)
    total_votes: int = Field(default=0, ge=0)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    tags: list[str] = Field(default_factory=lambda: [DEFAULT_TAG])
    image_url: Optional[str] = None
    coordinates: Optional[GeoPoint] = None
    pet_friendly: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    created_by: Optional[UserId] = None
    created_by_display_name: Optional[str] = None
    created_by_photo_url: Optional[str] = None

    @field_validator("tags")
    @classmethod
    def default_tags(cls, v: list[str]) -> list[str]:
        """Fall back to the default tag when no tags are given."""
        return v or [DEFAULT_TAG]

    @property
    def score(self) -> int:
        """Net community score (upvotes minus downvotes)."""
        return self.upvotes - self.downvotes
