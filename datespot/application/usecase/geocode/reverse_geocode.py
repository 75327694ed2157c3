"""Reverse geocode use case."""

from pydantic import BaseModel

from datespot.domain.service import LocationService
from datespot.domain.value import GeoPoint


class ReverseGeocodeRequest(BaseModel):
    """Reverse geocode request."""

    point: GeoPoint


class ReverseGeocodeResponse(BaseModel):
    """Reverse geocode response; location is empty when unknown."""

    lat: float
    lng: float
    location: str


class ReverseGeocodeUseCase:
    """Use case resolving coordinates to a place name."""

    def __init__(self, location_service: LocationService) -> None:
        self.location_service = location_service

    async def execute(self, request: ReverseGeocodeRequest) -> ReverseGeocodeResponse:
        location = await self.location_service.describe(request.point)
        return ReverseGeocodeResponse(
            lat=request.point.lat, lng=request.point.lng, location=location
        )
