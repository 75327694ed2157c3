"""Spot response items shared by the spot use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from datespot.domain.model import Spot
from datespot.domain.service.spot_view import distance_to
from datespot.domain.value import Category, GeoPoint, VoteType


class SpotItem(BaseModel):
    """Spot in API responses."""

    id: str
    name: str
    location: str
    category: Category
    price_level: int
    description: str
    rating: float
    total_votes: int
    upvotes: int
    downvotes: int
    score: int
    tags: list[str]
    image_url: Optional[str]
    coordinates: Optional[GeoPoint]
    pet_friendly: bool
    created_at: datetime
    created_by: Optional[str]
    created_by_display_name: Optional[str]
    created_by_photo_url: Optional[str]
    distance_km: Optional[float] = None
    user_vote: Optional[VoteType] = None

    @classmethod
    def from_spot(
        cls,
        spot: Spot,
        user_location: Optional[GeoPoint] = None,
        user_vote: Optional[VoteType] = None,
    ) -> "SpotItem":
        distance = distance_to(spot, user_location)
        return cls(
            **spot.model_dump(),
            score=spot.score,
            distance_km=round(distance, 3) if distance is not None else None,
            user_vote=user_vote,
        )
