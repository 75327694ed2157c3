"""Location domain service (reverse geocoding)."""

import logfire

from datespot.domain.error import ExternalServiceError
from datespot.domain.value import GeoPoint

from .base import Service


class ReverseGeocoder:
    """Reverse geocoding service interface."""

    async def reverse(self, point: GeoPoint) -> str:
        """Look up a human-readable place name.

        Args:
            point: Coordinates to resolve

        Returns:
            Place name, or an empty string when nothing is known

        Raises:
            ExternalServiceError: If the service call fails
        """
        raise NotImplementedError


class LocationService(Service):
    """Domain service for coordinate lookups."""

    def __init__(self, reverse_geocoder: ReverseGeocoder) -> None:
        """Initialize location service.

        Args:
            reverse_geocoder: External reverse geocoder
        """
        self.reverse_geocoder = reverse_geocoder

    async def describe(self, point: GeoPoint) -> str:
        """Resolve coordinates to a place name, empty on failure.

        Geocoding only pre-fills the location field, so a failed lookup
        degrades to an empty name instead of failing the caller.
        """
        with logfire.span("location_service.describe", lat=point.lat, lng=point.lng):
            try:
                name = await self.reverse_geocoder.reverse(point)
            except ExternalServiceError as e:
                logfire.warn("Reverse geocoding failed", error=str(e))
                return ""
            return name.strip()
