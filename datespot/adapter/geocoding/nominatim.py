"""Reverse geocoding through Nominatim."""

import httpx
import logfire

from datespot.adapter.error import ProviderError
from datespot.domain.service.location_service import ReverseGeocoder
from datespot.domain.value import GeoPoint


class NominatimGeocoder(ReverseGeocoder):
    """Base class for Nominatim geocoders.

    Provides type distinction for dependency injection.
    """

    pass


class RealNominatimGeocoder(NominatimGeocoder):
    """Nominatim ``/reverse`` client."""

    def __init__(
        self, base_url: str, user_agent: str, language: str = "en", timeout: float = 5.0
    ) -> None:
        self.url = f"{base_url.rstrip('/')}/reverse"
        self.user_agent = user_agent
        self.language = language
        self.timeout = timeout

    async def reverse(self, point: GeoPoint) -> str:
        """Resolve coordinates to Nominatim's display name.

        Returns:
            Display name, or an empty string when Nominatim knows nothing

        Raises:
            ProviderError: If the request fails
        """
        params = {
            "format": "jsonv2",
            "lat": point.lat,
            "lon": point.lng,
            "accept-language": self.language,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    self.url, params=params, headers={"User-Agent": self.user_agent}
                )
        except httpx.HTTPError as e:
            logfire.error("Reverse geocoding HTTP error", error=str(e))
            raise ProviderError("geocoding", f"HTTP error: {e}")

        if response.status_code != 200:
            logfire.error(
                "Reverse geocoding failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError("geocoding", f"status {response.status_code}")

        data = response.json()
        # Unknown locations come back as {"error": "Unable to geocode"}
        return data.get("display_name", "") if isinstance(data, dict) else ""


class MockNominatimGeocoder(NominatimGeocoder):
    """Mock geocoder returning a fixed name for every point."""

    def __init__(self, name: str = "Mock Place, Gothenburg", fail: bool = False) -> None:
        self.name = name
        self.fail = fail

    async def reverse(self, point: GeoPoint) -> str:
        if self.fail:
            raise ProviderError("geocoding", "mock failure")
        return self.name
