"""Unit tests for auth, geocoding, upload and live feed use cases."""

import pytest

from datespot.application.live import SnapshotBroker, SpotsSnapshot, UserVotesSnapshot
from datespot.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    SignInRequest,
    SignInUseCase,
)
from datespot.application.usecase.geocode import (
    ReverseGeocodeRequest,
    ReverseGeocodeUseCase,
)
from datespot.application.usecase.live import OpenLiveFeedRequest, OpenLiveFeedUseCase
from datespot.application.usecase.upload import UploadImageRequest, UploadImageUseCase
from datespot.domain.error import AuthRequiredError
from datespot.domain.repository import SpotRepository
from datespot.domain.value import GeoPoint
from tests.conftest import make_spot
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAuthUseCases:
    @pytest.mark.asyncio
    async def test_sign_in_then_current_user(self, unit_env):
        sign_in = await unit_env.get(SignInUseCase)
        current_user = await unit_env.get(GetCurrentUserUseCase)

        signed_in = await sign_in.execute(SignInRequest(id_token="valid:u1"))
        me = await current_user.execute(GetCurrentUserRequest(token=signed_in.token))

        assert signed_in.user_id == "u1"
        assert me.authenticated is True
        assert me.user_id == "u1"
        assert me.avatar_url == "https://example.com/u1.png"

    @pytest.mark.asyncio
    async def test_current_user_without_token(self, unit_env):
        current_user = await unit_env.get(GetCurrentUserUseCase)

        me = await current_user.execute(GetCurrentUserRequest())

        assert me.authenticated is False
        assert me.votes == {}


class TestReverseGeocodeUseCase:
    @pytest.mark.asyncio
    async def test_returns_place_name(self, unit_env):
        use_case = await unit_env.get(ReverseGeocodeUseCase)

        result = await use_case.execute(
            ReverseGeocodeRequest(point=GeoPoint(lat=57.7, lng=11.97))
        )

        assert result.location == "Mock Place, Gothenburg"
        assert (result.lat, result.lng) == (57.7, 11.97)


class TestUploadImageUseCase:
    @pytest.mark.asyncio
    async def test_upload_requires_sign_in(self, unit_env):
        use_case = await unit_env.get(UploadImageUseCase)

        with pytest.raises(AuthRequiredError):
            await use_case.execute(
                UploadImageRequest(
                    data=b"png", filename="a.png", content_type="image/png"
                )
            )

    @pytest.mark.asyncio
    async def test_upload_returns_url(self, unit_env):
        sign_in = await unit_env.get(SignInUseCase)
        signed_in = await sign_in.execute(SignInRequest(id_token="valid:u1"))
        use_case = await unit_env.get(UploadImageUseCase)

        result = await use_case.execute(
            UploadImageRequest(
                data=b"png",
                filename="a.png",
                content_type="image/png",
                token=signed_in.token,
            )
        )

        assert result.url.startswith("http://test/media/spots/")
        assert result.size == 3
        assert result.progress == 1.0


class TestOpenLiveFeedUseCase:
    @pytest.mark.asyncio
    async def test_subscription_starts_with_current_state(self, unit_env):
        """The first queued events should be the current spots and votes."""
        spot_repo = await unit_env.get(SpotRepository)
        await spot_repo.save(make_spot("s1"))
        sign_in = await unit_env.get(SignInUseCase)
        signed_in = await sign_in.execute(SignInRequest(id_token="valid:u1"))
        broker = await unit_env.get(SnapshotBroker)
        use_case = await unit_env.get(OpenLiveFeedUseCase)

        subscription = await use_case.execute(
            OpenLiveFeedRequest(token=signed_in.token)
        )

        assert broker.subscriber_count == 1
        assert subscription.user_id == "u1"
        spots_event, votes_event = subscription.pending()
        assert isinstance(spots_event, SpotsSnapshot)
        assert isinstance(votes_event, UserVotesSnapshot)
        subscription.close()
        assert broker.subscriber_count == 0
