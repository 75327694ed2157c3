"""Geocoding routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from datespot.application.usecase.geocode import (
    ReverseGeocodeRequest,
    ReverseGeocodeResponse,
    ReverseGeocodeUseCase,
)
from datespot.domain.value import GeoPoint

router = APIRouter(prefix="/geocode", tags=["geocode"], route_class=DishkaRoute)


@router.get("/reverse", response_model=ReverseGeocodeResponse)
async def reverse_geocode(
    reverse_geocode_use_case: FromDishka[ReverseGeocodeUseCase],
    lat: float = Query(ge=-90, le=90),
    lng: float = Query(ge=-180, le=180),
) -> ReverseGeocodeResponse:
    """Resolve coordinates to a place name (empty when unknown)."""
    return await reverse_geocode_use_case.execute(
        ReverseGeocodeRequest(point=GeoPoint(lat=lat, lng=lng))
    )
