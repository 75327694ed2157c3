"""Integration tests for the PostgreSQL repositories.

Assumes PostgreSQL is running and migrated (``python scripts/run_migrations.py``).
Run with ``pytest -m integration``.
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from datespot.domain.model import Vote
from datespot.domain.repository import SpotRepository, UnitOfWork, VoteRepository
from datespot.domain.value import GeoPoint, SpotId, UserId, VoteId, VoteType
from tests.conftest import make_spot
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


def unique_id() -> str:
    return f"it-{uuid4().hex[:12]}"


class TestPostgresSpotRepository:
    """Integration tests for PostgresSpotRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_round_trip(self, integration_env):
        spot_repo = await integration_env.get(SpotRepository)
        spot = make_spot(
            unique_id(),
            name=f"Spot {uuid4().hex[:6]}",
            tags=["Park", "Zoo"],
            coordinates=GeoPoint(lat=57.68, lng=11.94),
        )

        await spot_repo.save(spot)
        found = await spot_repo.find_by_id(spot.id)

        assert found is not None
        assert found.tags == ["Park", "Zoo"]
        assert found.coordinates == spot.coordinates

    @pytest.mark.asyncio
    async def test_vote_delta_is_floored_in_sql(self, integration_env):
        spot_repo = await integration_env.get(SpotRepository)
        spot = make_spot(unique_id(), name=f"Spot {uuid4().hex[:6]}", upvotes=1)
        await spot_repo.save(spot)

        updated = await spot_repo.apply_vote_delta(spot.id, upvotes=-2, downvotes=1)

        assert (updated.upvotes, updated.downvotes) == (0, 1)

    @pytest.mark.asyncio
    async def test_rating_is_a_running_mean(self, integration_env):
        spot_repo = await integration_env.get(SpotRepository)
        spot = make_spot(
            unique_id(), name=f"Spot {uuid4().hex[:6]}", rating=4.0, total_votes=1
        )
        await spot_repo.save(spot)

        updated = await spot_repo.apply_rating(spot.id, 2)

        assert updated.rating == pytest.approx(3.0)
        assert updated.total_votes == 2

    @pytest.mark.asyncio
    async def test_missing_spot_returns_none(self, integration_env):
        spot_repo = await integration_env.get(SpotRepository)

        assert await spot_repo.apply_rating(SpotId(unique_id()), 3) is None


class TestPostgresVoteRepository:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_second_vote_for_same_pair_violates_constraint(self, integration_env):
        spot_repo = await integration_env.get(SpotRepository)
        vote_repo = await integration_env.get(VoteRepository)
        spot = make_spot(unique_id(), name=f"Spot {uuid4().hex[:6]}")
        await spot_repo.save(spot)
        user_id = UserId(unique_id())

        def vote() -> Vote:
            return Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                spot_id=spot.id,
                vote_type=VoteType.UP,
            )

        await vote_repo.save(vote())
        with pytest.raises(IntegrityError):
            await vote_repo.save(vote())

        # Failed transaction must be rolled back before the request closes
        await (await integration_env.get(UnitOfWork)).rollback()

    @pytest.mark.asyncio
    async def test_guarded_writes_match_stored_direction(self, integration_env):
        spot_repo = await integration_env.get(SpotRepository)
        vote_repo = await integration_env.get(VoteRepository)
        spot = make_spot(unique_id(), name=f"Spot {uuid4().hex[:6]}")
        await spot_repo.save(spot)
        user_id = UserId(unique_id())
        await vote_repo.save(
            Vote(id=VoteId(uuid4()), user_id=user_id, spot_id=spot.id, vote_type=VoteType.UP)
        )

        stale = await vote_repo.update_type(
            user_id, spot.id, VoteType.UP, expected=VoteType.DOWN
        )
        switched = await vote_repo.update_type(
            user_id, spot.id, VoteType.DOWN, expected=VoteType.UP
        )
        stale_delete = await vote_repo.delete_by_user_and_spot(
            user_id, spot.id, expected=VoteType.UP
        )
        deleted = await vote_repo.delete_by_user_and_spot(
            user_id, spot.id, expected=VoteType.DOWN
        )

        assert stale is None
        assert switched.vote_type == VoteType.DOWN
        assert stale_delete is False
        assert deleted is True
