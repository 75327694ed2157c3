"""Unit tests for the spot use cases."""

import pytest

from datespot.application.live import SnapshotBroker, SpotsSnapshot
from datespot.application.usecase.spot import (
    CreateSpotRequest,
    CreateSpotUseCase,
    GetSpotRequest,
    GetSpotUseCase,
    ListSpotsRequest,
    ListSpotsUseCase,
    SeedSpotsRequest,
    SeedSpotsUseCase,
)
from datespot.domain.error import AuthRequiredError, UnenthusiasticContentError
from datespot.domain.repository import SpotRepository, UnitOfWork
from datespot.domain.service import (
    AssetStore,
    ImageUpload,
    SentimentAnalyzer,
    SessionService,
)
from datespot.domain.value import Category, GeoPoint, SortKey, VoteType
from datespot.persistence.seed import INITIAL_SPOT_RECORDS
from tests.conftest import make_spot
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def sign_in(unit_env, user_id: str = "u1") -> str:
    session_service = await unit_env.get(SessionService)
    _, token = await session_service.sign_in(f"valid:{user_id}")
    return token


class TestListSpotsUseCase:
    """Tests for ListSpotsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_filtered_view_with_total(self, unit_env):
        # Arrange
        spot_repo = await unit_env.get(SpotRepository)
        await spot_repo.save(make_spot("a", category=Category.FOOD, rating=3.0))
        await spot_repo.save(make_spot("b", name="Park", rating=4.5))
        await spot_repo.save(make_spot("c", name="Lake", rating=4.0))
        use_case = await unit_env.get(ListSpotsUseCase)

        # Act
        result = await use_case.execute(
            ListSpotsRequest(category=Category.OUTDOOR, sort_by=SortKey.RATING)
        )

        # Assert
        assert [s.id for s in result.spots] == ["b", "c"]
        assert result.total == 3
        assert result.votes == {}

    @pytest.mark.asyncio
    async def test_includes_distance_when_location_given(self, unit_env):
        spot_repo = await unit_env.get(SpotRepository)
        await spot_repo.save(make_spot("a", coordinates=GeoPoint(lat=57.7, lng=11.97)))
        use_case = await unit_env.get(ListSpotsUseCase)

        result = await use_case.execute(
            ListSpotsRequest(user_location=GeoPoint(lat=57.7, lng=11.97))
        )

        assert result.spots[0].distance_km == 0.0


class TestGetSpotUseCase:
    @pytest.mark.asyncio
    async def test_returns_spot_with_score(self, unit_env):
        spot_repo = await unit_env.get(SpotRepository)
        await spot_repo.save(make_spot("a", upvotes=5, downvotes=2))
        use_case = await unit_env.get(GetSpotUseCase)

        item = await use_case.execute(GetSpotRequest(spot_id="a"))

        assert item.score == 3
        assert item.user_vote is None


class TestCreateSpotUseCase:
    """Tests for CreateSpotUseCase."""

    @pytest.mark.asyncio
    async def test_create_commits_then_publishes(self, unit_env):
        """A created spot should be committed and published to live clients."""
        # Arrange
        token = await sign_in(unit_env)
        broker = await unit_env.get(SnapshotBroker)
        subscription = broker.subscribe()
        use_case = await unit_env.get(CreateSpotUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        # Act
        item = await use_case.execute(
            CreateSpotRequest(
                name="Skansen Kronan",
                location="Skansberget, Göteborg",
                category=Category.VIEW,
                description="Stunning sunset views!",
                tags="Fortress, Views",
                initial_rating=5,
                token=token,
            )
        )

        # Assert
        assert item.rating == 5.0
        assert item.created_by == "u1"
        assert unit_of_work.commits == 1
        [event] = subscription.pending()
        assert isinstance(event, SpotsSnapshot)
        assert [s.id for s in event.spots] == [item.id]

    @pytest.mark.asyncio
    async def test_create_with_image_stores_it_and_links_it(self, unit_env):
        """An image sent with the spot should be uploaded and used as its image."""
        # Arrange
        token = await sign_in(unit_env)
        asset_store = await unit_env.get(AssetStore)
        use_case = await unit_env.get(CreateSpotUseCase)

        # Act
        item = await use_case.execute(
            CreateSpotRequest(
                name="Skansen Kronan",
                location="Skansberget, Göteborg",
                description="Stunning sunset views!",
                image=ImageUpload(
                    data=b"\xff\xd8jpeg", filename="fort.jpg", content_type="image/jpeg"
                ),
                token=token,
            )
        )

        # Assert
        assert item.image_url is not None
        assert item.image_url.startswith("http://test/media/spots/")
        assert asset_store.assets[item.image_url] == b"\xff\xd8jpeg"

    @pytest.mark.asyncio
    async def test_rejected_spot_is_not_committed(self, unit_env):
        token = await sign_in(unit_env)
        analyzer = await unit_env.get(SentimentAnalyzer)
        analyzer.fixed_score = -0.4
        broker = await unit_env.get(SnapshotBroker)
        subscription = broker.subscribe()
        use_case = await unit_env.get(CreateSpotUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        with pytest.raises(UnenthusiasticContentError):
            await use_case.execute(
                CreateSpotRequest(
                    name="Bus stop",
                    location="Somewhere",
                    description="Boring and cold.",
                    token=token,
                )
            )

        assert unit_of_work.commits == 0
        assert subscription.pending() == []

    @pytest.mark.asyncio
    async def test_anonymous_create_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateSpotUseCase)

        with pytest.raises(AuthRequiredError):
            await use_case.execute(
                CreateSpotRequest(name="X", location="Y", description="Great!")
            )


class TestSeedSpotsUseCase:
    @pytest.mark.asyncio
    async def test_seeds_once(self, unit_env):
        use_case = await unit_env.get(SeedSpotsUseCase)

        first = await use_case.execute(SeedSpotsRequest())
        second = await use_case.execute(SeedSpotsRequest())

        assert first.seeded == len(INITIAL_SPOT_RECORDS)
        assert second.seeded == 0
