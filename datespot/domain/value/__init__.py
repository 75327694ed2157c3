"""Domain value objects for date spots."""

from datespot.domain.value.identifiers import SpotId, UserId, VoteId
from datespot.domain.value.types import (
    DEFAULT_TAG,
    Category,
    GeoPoint,
    SortKey,
    VoteAction,
    VoteType,
)

__all__ = [
    # Identifiers
    "SpotId",
    "UserId",
    "VoteId",
    # Types
    "Category",
    "DEFAULT_TAG",
    "GeoPoint",
    "SortKey",
    "VoteAction",
    "VoteType",
]
