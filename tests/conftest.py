"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone
from typing import Optional

from datespot.domain.model import Session, SessionUser, Spot
from datespot.domain.value import Category, GeoPoint, SpotId, UserId

# Keep tests off the network and the real database seeding path
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SENTIMENT__API_KEY", "test-key")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")


def make_spot(
    spot_id: str = "spot-1",
    name: str = "Test Spot",
    location: str = "Test Street 1, Göteborg",
    category: Category = Category.OUTDOOR,
    rating: float = 4.0,
    total_votes: int = 1,
    upvotes: int = 0,
    downvotes: int = 0,
    coordinates: Optional[GeoPoint] = None,
    created_at: Optional[datetime] = None,
    **overrides,
) -> Spot:
    """Helper function to build spots for tests.

    Args:
        spot_id: Spot ID
        name: Spot name
        location: Spot location
        category: Spot category
        rating: Average rating
        total_votes: Number of ratings folded into the average
        upvotes: Upvote counter
        downvotes: Downvote counter
        coordinates: Optional map position
        created_at: Creation time (defaults to a fixed date)
        **overrides: Any other Spot field

    Returns:
        Spot domain model
    """
    return Spot(
        id=SpotId(spot_id),
        name=name,
        location=location,
        category=category,
        description=overrides.pop("description", "A lovely place for a date."),
        rating=rating,
        total_votes=total_votes,
        upvotes=upvotes,
        downvotes=downvotes,
        coordinates=coordinates,
        created_at=created_at or datetime(2024, 1, 15, tzinfo=timezone.utc),
        **overrides,
    )


def make_session(user_id: str = "user-1") -> Session:
    """Helper function to build a signed-in session."""
    return Session(user=SessionUser(user_id=UserId(user_id), display_name="Tester"))
