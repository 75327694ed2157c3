"""Derived spot view: search, filter and sort over the in-memory spot list.

The view is a pure projection. It is recomputed from the full list whenever
the list or any criterion changes and is never written back anywhere.
"""

import math
import unicodedata
from typing import Optional, Sequence

from pydantic import Field

from datespot.domain.model.spot import Spot
from datespot.domain.value import Category, GeoPoint, SortKey
from datespot.domain.value.common import ValueObject

EARTH_RADIUS_KM = 6371.0


class SpotViewCriteria(ValueObject):
    """Inputs of the derived view."""

    search_term: str = ""
    category: Optional[Category] = None
    min_rating: float = Field(default=0, ge=0, le=5)
    sort_by: SortKey = SortKey.RATING
    user_location: Optional[GeoPoint] = None


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat))
        * math.cos(math.radians(b.lat))
        * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def distance_to(spot: Spot, user_location: Optional[GeoPoint]) -> Optional[float]:
    """Distance from the user to a spot, or None when either point is unknown."""
    if user_location is None or spot.coordinates is None:
        return None
    return haversine_km(user_location, spot.coordinates)


def _collation_key(text: str) -> str:
    # Accent-insensitive, case-insensitive ordering close to localeCompare
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


def _matches(spot: Spot, term: str) -> bool:
    return (
        term in spot.name.lower()
        or term in spot.location.lower()
        or term in spot.description.lower()
        or any(term in tag.lower() for tag in spot.tags)
    )


def derive_spots(spots: Sequence[Spot], criteria: SpotViewCriteria) -> list[Spot]:
    """Filter and sort spots for display.

    Stages run in order: text search, category, rating floor, stable sort.
    Distance sort puts spots without coordinates last in their original
    relative order; without a user location it keeps the input order.

    Args:
        spots: Full spot list
        criteria: Search, filter and sort inputs

    Returns:
        New list with the derived view
    """
    result = list(spots)

    if criteria.search_term:
        term = criteria.search_term.lower()
        result = [s for s in result if _matches(s, term)]

    if criteria.category is not None:
        result = [s for s in result if s.category == criteria.category]

    if criteria.min_rating > 0:
        result = [s for s in result if s.rating >= criteria.min_rating]

    if criteria.sort_by == SortKey.RATING:
        result.sort(key=lambda s: s.rating, reverse=True)
    elif criteria.sort_by == SortKey.NAME:
        result.sort(key=lambda s: _collation_key(s.name))
    elif criteria.sort_by == SortKey.CREATED_AT:
        result.sort(key=lambda s: s.created_at, reverse=True)
    elif criteria.sort_by == SortKey.DISTANCE and criteria.user_location is not None:
        location = criteria.user_location

        def distance_key(spot: Spot) -> tuple[bool, float]:
            distance = distance_to(spot, location)
            return (distance is None, distance or 0.0)

        result.sort(key=distance_key)

    return result
