"""Mappers between stored records and domain models.

Stored records may be incomplete: legacy rows have NULL counters, and
document-style records (seed data, imports) may omit fields entirely.
Every mapper fills the same defaults so the rest of the system only ever
sees fully populated models.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional
from uuid import UUID

from datespot.domain.model import Spot, Vote
from datespot.domain.value import (
    DEFAULT_TAG,
    Category,
    GeoPoint,
    SpotId,
    UserId,
    VoteId,
    VoteType,
)

DEFAULT_PRICE_LEVEL = 2


def coerce_timestamp(value: Any) -> datetime:
    """Convert a stored timestamp to an aware UTC datetime.

    Accepts datetimes (naive ones are taken as UTC), ISO 8601 strings,
    epoch seconds or milliseconds, and ``{"seconds", "nanoseconds"}`` dicts.
    Missing values become the current time.

    Args:
        value: Stored timestamp in any supported form

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the value can't be interpreted
    """
    if value is None:
        return datetime.now(timezone.utc)

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        # Values beyond year ~5000 in seconds are treated as milliseconds
        seconds = value / 1000 if abs(value) > 1e11 else value
        dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    elif isinstance(value, Mapping) and "seconds" in value:
        seconds = value["seconds"] + value.get("nanoseconds", 0) / 1e9
        dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    else:
        raise ValueError(f"Unsupported timestamp: {value!r}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _coordinates(lat: Any, lng: Any) -> Optional[GeoPoint]:
    if lat is None or lng is None:
        return None
    return GeoPoint(lat=float(lat), lng=float(lng))


def _or_default(value: Any, default: Any) -> Any:
    # Falsy stored values (0, "", [], None) fall back to the default
    return value if value else default


def row_to_spot(row: Dict[str, Any]) -> Spot:
    """Convert database row to Spot domain model.

    Args:
        row: Database row as dict

    Returns:
        Spot domain model
    """
    return Spot(
        id=SpotId(str(row["id"])),
        name=row["name"],
        location=row["location"],
        category=Category(row["category"]),
        price_level=_or_default(row.get("price_level"), DEFAULT_PRICE_LEVEL),
        description=row.get("description") or "",
        rating=_or_default(row.get("rating"), 0.0),
        total_votes=_or_default(row.get("total_votes"), 0),
        upvotes=_or_default(row.get("upvotes"), 0),
        downvotes=_or_default(row.get("downvotes"), 0),
        tags=list(_or_default(row.get("tags"), [DEFAULT_TAG])),
        image_url=row.get("image_url") or None,
        coordinates=_coordinates(row.get("latitude"), row.get("longitude")),
        pet_friendly=bool(row.get("pet_friendly")),
        created_at=coerce_timestamp(row.get("created_at")),
        created_by=UserId(row["created_by"]) if row.get("created_by") else None,
        created_by_display_name=row.get("created_by_display_name"),
        created_by_photo_url=row.get("created_by_photo_url"),
    )


def spot_to_dict(spot: Spot) -> Dict[str, Any]:
    """Convert Spot domain model to database dict.

    Args:
        spot: Spot domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = spot.model_dump(exclude={"coordinates"})
    data["latitude"] = spot.coordinates.lat if spot.coordinates else None
    data["longitude"] = spot.coordinates.lng if spot.coordinates else None
    data["category"] = spot.category.value
    return data


def document_to_spot(doc_id: str, data: Mapping[str, Any]) -> Spot:
    """Convert a document-style record (camelCase keys) to a Spot.

    Used for seed data and imports from the document store layout, where
    coordinates are ``{"lat", "lng"}`` (or ``latitude``/``longitude``) maps.

    Args:
        doc_id: Document ID
        data: Document fields

    Returns:
        Spot domain model
    """
    coordinates = data.get("coordinates") or {}
    return row_to_spot(
        {
            "id": doc_id,
            "name": data["name"],
            "location": data["location"],
            "category": data["category"],
            "price_level": data.get("priceLevel"),
            "description": data.get("description"),
            "rating": data.get("rating"),
            "total_votes": data.get("totalVotes"),
            "upvotes": data.get("upvotes"),
            "downvotes": data.get("downvotes"),
            "tags": data.get("tags"),
            "image_url": data.get("imageUrl"),
            "latitude": coordinates.get("lat", coordinates.get("latitude")),
            "longitude": coordinates.get("lng", coordinates.get("longitude")),
            "pet_friendly": data.get("petFriendly"),
            "created_at": data.get("createdAt"),
            "created_by": data.get("createdBy"),
            "created_by_display_name": data.get("createdByDisplayName"),
            "created_by_photo_url": data.get("createdByPhotoURL"),
        }
    )


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        user_id=UserId(row["user_id"]),
        spot_id=SpotId(str(row["spot_id"])),
        vote_type=VoteType(row["vote_type"]),
        created_at=coerce_timestamp(row.get("created_at")),
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = vote.model_dump()
    data["vote_type"] = vote.vote_type.value
    return data
