"""Domain value objects for date spots."""

from enum import Enum

from pydantic import Field

from datespot.domain.value.common import ValueObject


class Category(str, Enum):
    """Fixed set of spot categories."""

    OUTDOOR = "outdoor"
    INDOOR = "indoor"
    FOOD = "food"
    CULTURE = "culture"
    ADVENTURE = "adventure"
    ROMANTIC = "romantic"
    WATER = "water"
    VIEW = "view"
    ENTERTAINMENT = "entertainment"


class VoteType(str, Enum):
    """Stored vote direction."""

    UP = "up"
    DOWN = "down"


class VoteAction(str, Enum):
    """Requested vote operation.

    ``REMOVE`` retracts whatever vote the user currently holds.
    """

    UP = "up"
    DOWN = "down"
    REMOVE = "remove"


class SortKey(str, Enum):
    """Sort orders for the derived spot view."""

    RATING = "rating"
    NAME = "name"
    CREATED_AT = "createdAt"
    DISTANCE = "distance"


class GeoPoint(ValueObject):
    """Latitude/longitude pair in decimal degrees."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


DEFAULT_TAG = "date spot"
