"""Unit tests for the Nominatim reverse geocoder."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from datespot.adapter.error import ProviderError
from datespot.adapter.geocoding.nominatim import RealNominatimGeocoder
from datespot.domain.value import GeoPoint

POINT = GeoPoint(lat=57.6985, lng=11.9519)


def geocoder() -> RealNominatimGeocoder:
    return RealNominatimGeocoder(
        base_url="https://nominatim.example.com", user_agent="datespot-tests"
    )


def reply(status_code: int = 200, body=None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = "body"
    response.json.return_value = body
    return response


class TestRealNominatimGeocoder:
    """Tests for RealNominatimGeocoder.reverse."""

    @pytest.mark.asyncio
    async def test_returns_display_name(self):
        with patch("httpx.AsyncClient") as mock_client:
            get = AsyncMock(
                return_value=reply(body={"display_name": "Haga Nygata, Göteborg"})
            )
            mock_client.return_value.__aenter__.return_value.get = get

            name = await geocoder().reverse(POINT)

        assert name == "Haga Nygata, Göteborg"
        args, kwargs = get.call_args
        assert args[0] == "https://nominatim.example.com/reverse"
        assert kwargs["params"]["lat"] == 57.6985
        assert kwargs["params"]["lon"] == 11.9519
        assert kwargs["headers"] == {"User-Agent": "datespot-tests"}

    @pytest.mark.asyncio
    async def test_unknown_location_is_empty(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=reply(body={"error": "Unable to geocode"})
            )

            assert await geocoder().reverse(POINT) == ""

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=reply(status_code=503)
            )

            with pytest.raises(ProviderError):
                await geocoder().reverse(POINT)
