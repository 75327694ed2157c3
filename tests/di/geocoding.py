"""Mock geocoding providers for testing."""

from dishka import Scope, provide

from datespot.adapter.geocoding.nominatim import MockNominatimGeocoder
from datespot.domain.service import ReverseGeocoder
from datespot.util.di.infrastructure.geocoding import GeocodingProvider


class MockGeocodingProvider(GeocodingProvider):
    """Mock geocoding provider returning a fixed place name."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_reverse_geocoder(self) -> ReverseGeocoder:
        """Provide mock reverse geocoder."""
        return MockNominatimGeocoder()
