"""Reverse geocoding infrastructure providers."""

from dishka import Scope, provide

from datespot.adapter.geocoding.nominatim import RealNominatimGeocoder
from datespot.config import Settings
from datespot.domain.service import ReverseGeocoder
from datespot.util.di.base import ProviderBase


class GeocodingProvider(ProviderBase):
    """Geocoding component base."""

    __mock_component__ = "geocoding"


class ProdGeocodingProvider(GeocodingProvider):
    """Production geocoding provider (Nominatim)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_reverse_geocoder(self, settings: Settings) -> ReverseGeocoder:
        """Provide Nominatim reverse geocoder."""
        return RealNominatimGeocoder(
            base_url=settings.geocoding.base_url,
            user_agent=settings.geocoding.user_agent,
            language=settings.geocoding.language,
            timeout=settings.geocoding.timeout_seconds,
        )
