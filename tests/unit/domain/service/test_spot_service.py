"""Unit tests for SpotService."""

import pytest

from datespot.domain.error import (
    AuthRequiredError,
    DuplicateSpotError,
    MissingFieldError,
    NotFoundError,
    UploadError,
)
from datespot.domain.model import Session
from datespot.domain.repository import SpotRepository
from datespot.domain.service import (
    AssetStore,
    ImageUpload,
    ReverseGeocoder,
    SpotDraft,
    SpotService,
    UploadProgress,
    parse_tags,
)
from datespot.domain.value import DEFAULT_TAG, Category, GeoPoint, SpotId
from tests.conftest import make_session, make_spot
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def draft(**overrides) -> SpotDraft:
    fields = {
        "name": "Skansen Kronan",
        "location": "Skansberget, Göteborg",
        "category": Category.VIEW,
        "description": "Stunning sunset views over the whole city!",
        "tags": "Fortress, Views, ",
    }
    fields.update(overrides)
    return SpotDraft(**fields)


class TestParseTags:
    """Tests for tag parsing."""

    def test_comma_separated_tags_are_trimmed(self):
        assert parse_tags(" Park ,Zoo,, Nature ") == ["Park", "Zoo", "Nature"]

    def test_empty_input_falls_back_to_default(self):
        assert parse_tags("") == [DEFAULT_TAG]
        assert parse_tags(" , ") == [DEFAULT_TAG]
        assert parse_tags([]) == [DEFAULT_TAG]

    def test_list_input_is_cleaned(self):
        assert parse_tags(["Cafe", " "]) == ["Cafe"]


class TestGetSpot:
    """Tests for get_spot."""

    @pytest.mark.asyncio
    async def test_missing_spot_raises_not_found(self, unit_env):
        spot_service = await unit_env.get(SpotService)

        with pytest.raises(NotFoundError, match="Spot not found: nope"):
            await spot_service.get_spot(SpotId("nope"))


class TestCreateSpot:
    """Tests for create_spot."""

    @pytest.mark.asyncio
    async def test_creates_spot_with_initial_rating_as_first_vote(self, unit_env):
        """New spot should count the author's rating as its first vote."""
        # Arrange
        spot_service = await unit_env.get(SpotService)
        spot_repo = await unit_env.get(SpotRepository)
        session = make_session("author-1")

        # Act
        spot = await spot_service.create_spot(draft(initial_rating=5), session)

        # Assert
        assert spot.rating == 5.0
        assert spot.total_votes == 1
        assert (spot.upvotes, spot.downvotes) == (0, 0)
        assert spot.tags == ["Fortress", "Views"]
        assert spot.created_by == "author-1"
        assert spot.created_by_display_name == "Tester"
        assert await spot_repo.find_by_id(spot.id) == spot

    @pytest.mark.asyncio
    async def test_blank_location_is_filled_from_coordinates(self, unit_env):
        spot_service = await unit_env.get(SpotService)

        spot = await spot_service.create_spot(
            draft(location="", coordinates=GeoPoint(lat=57.69, lng=11.95)),
            make_session(),
        )

        assert spot.location == "Mock Place, Gothenburg"

    @pytest.mark.asyncio
    async def test_failed_geocoding_leaves_location_missing(self, unit_env):
        """Geocoding failure should fall through to the required field check."""
        spot_service = await unit_env.get(SpotService)
        geocoder = await unit_env.get(ReverseGeocoder)
        geocoder.fail = True

        with pytest.raises(MissingFieldError) as exc_info:
            await spot_service.create_spot(
                draft(location="", coordinates=GeoPoint(lat=57.69, lng=11.95)),
                make_session(),
            )

        assert exc_info.value.fields == ["location"]

    @pytest.mark.asyncio
    async def test_duplicate_is_rejected_and_nothing_saved(self, unit_env):
        spot_service = await unit_env.get(SpotService)
        spot_repo = await unit_env.get(SpotRepository)
        await spot_repo.save(
            make_spot("1", name="Skansen Kronan", location="Skansberget, Göteborg")
        )

        with pytest.raises(DuplicateSpotError):
            await spot_service.create_spot(draft(), make_session())

        assert await spot_repo.count() == 1

    @pytest.mark.asyncio
    async def test_anonymous_session_is_rejected(self, unit_env):
        spot_service = await unit_env.get(SpotService)

        with pytest.raises(AuthRequiredError, match="add a new date spot"):
            await spot_service.create_spot(draft(), Session.anonymous())

    @pytest.mark.asyncio
    async def test_attached_image_is_uploaded(self, unit_env):
        """An attached image should be stored and its URL used."""
        spot_service = await unit_env.get(SpotService)
        asset_store = await unit_env.get(AssetStore)
        progress = UploadProgress()
        image = ImageUpload(data=b"\x89PNG", filename="view.png", content_type="image/png")

        spot = await spot_service.create_spot(
            draft(), make_session(), image=image, progress=progress
        )

        assert spot.image_url in asset_store.assets
        assert spot.image_url.endswith(".png")
        assert progress.fraction == 1.0

    @pytest.mark.asyncio
    async def test_failed_upload_saves_nothing(self, unit_env):
        spot_service = await unit_env.get(SpotService)
        spot_repo = await unit_env.get(SpotRepository)
        asset_store = await unit_env.get(AssetStore)
        asset_store.fail = True
        progress = UploadProgress()
        image = ImageUpload(data=b"\x89PNG", filename="view.png", content_type="image/png")

        with pytest.raises(UploadError):
            await spot_service.create_spot(
                draft(), make_session(), image=image, progress=progress
            )

        assert await spot_repo.count() == 0
        assert progress.fraction is None


class TestSeedIfEmpty:
    """Tests for seed_if_empty."""

    @pytest.mark.asyncio
    async def test_seeds_only_empty_store(self, unit_env):
        spot_service = await unit_env.get(SpotService)

        first = await spot_service.seed_if_empty([make_spot("1"), make_spot("2")])
        second = await spot_service.seed_if_empty([make_spot("3")])

        assert first == 2
        assert second == 0
        assert len(await spot_service.list_spots()) == 2
