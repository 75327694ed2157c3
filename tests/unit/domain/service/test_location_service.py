"""Unit tests for LocationService."""

import pytest

from datespot.adapter.geocoding.nominatim import MockNominatimGeocoder
from datespot.domain.service import LocationService
from datespot.domain.value import GeoPoint

POINT = GeoPoint(lat=57.7, lng=11.97)


@pytest.mark.asyncio
async def test_describe_returns_trimmed_name():
    service = LocationService(MockNominatimGeocoder(name="  Haga, Göteborg "))

    assert await service.describe(POINT) == "Haga, Göteborg"


@pytest.mark.asyncio
async def test_describe_degrades_to_empty_on_failure():
    service = LocationService(MockNominatimGeocoder(fail=True))

    assert await service.describe(POINT) == ""
