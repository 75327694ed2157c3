"""Spot routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from datespot.application.usecase.spot import (
    CreateSpotRequest,
    CreateSpotUseCase,
    GetSpotRequest,
    GetSpotUseCase,
    ListSpotsRequest,
    ListSpotsResponse,
    ListSpotsUseCase,
    SpotItem,
)
from datespot.domain.error import ValidationError
from datespot.domain.value import Category, GeoPoint, SortKey

router = APIRouter(prefix="/spots", tags=["spots"], route_class=DishkaRoute)


def user_location(lat: Optional[float], lng: Optional[float]) -> Optional[GeoPoint]:
    """Build the caller's location from optional query parameters.

    Raises:
        ValidationError: If only one coordinate is given or it's out of range
    """
    if lat is None and lng is None:
        return None
    if lat is None or lng is None:
        raise ValidationError("Both lat and lng are required for a location")
    if not (-90 <= lat <= 90 and -180 <= lng <= 180):
        raise ValidationError("Coordinates out of range")
    return GeoPoint(lat=lat, lng=lng)


class CreateSpotAPIRequest(BaseModel):
    """API request for creating a spot."""

    name: str = Field(max_length=200)
    location: str = Field(default="", max_length=300)
    category: Category = Category.ROMANTIC
    price_level: int = Field(default=2, ge=1, le=4)
    description: str = Field(max_length=5000)
    tags: str | list[str] = ""
    image_url: Optional[str] = None  # Direct URL or one from /uploads/images
    coordinates: Optional[GeoPoint] = None
    pet_friendly: bool = False
    initial_rating: int = Field(default=4, ge=1, le=5)


@router.get("", response_model=ListSpotsResponse)
async def list_spots(
    list_spots_use_case: FromDishka[ListSpotsUseCase],
    search: str = "",
    category: Optional[Category] = None,
    min_rating: float = Query(default=0, ge=0, le=5),
    sort_by: SortKey = SortKey.RATING,
    lat: Optional[float] = None,
    lng: Optional[float] = None,
    auth_token: str | None = Cookie(default=None),
) -> ListSpotsResponse:
    """List spots with search, category and rating filters and a sort order.

    Distance sort needs ``lat`` and ``lng``; without them the store order
    (newest first) is kept. Signed-in callers also get their vote index.
    """
    return await list_spots_use_case.execute(
        ListSpotsRequest(
            search=search,
            category=category,
            min_rating=min_rating,
            sort_by=sort_by,
            user_location=user_location(lat, lng),
            token=auth_token,
        )
    )


@router.get("/{spot_id}", response_model=SpotItem)
async def get_spot(
    spot_id: str,
    get_spot_use_case: FromDishka[GetSpotUseCase],
    lat: Optional[float] = None,
    lng: Optional[float] = None,
    auth_token: str | None = Cookie(default=None),
) -> SpotItem:
    """Get a single spot."""
    return await get_spot_use_case.execute(
        GetSpotRequest(
            spot_id=spot_id, user_location=user_location(lat, lng), token=auth_token
        )
    )


@router.post("", response_model=SpotItem, status_code=status.HTTP_201_CREATED)
async def create_spot(
    request: CreateSpotAPIRequest,
    create_spot_use_case: FromDishka[CreateSpotUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SpotItem:
    """Add a new spot.

    Requires authentication. The spot must pass the gate: required fields,
    no duplicate name and location, and an enthusiastic description.
    """
    return await create_spot_use_case.execute(
        CreateSpotRequest(**request.model_dump(), token=auth_token)
    )
