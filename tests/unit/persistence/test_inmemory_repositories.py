"""Unit tests for the in-memory repositories."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from datespot.domain.model import Vote
from datespot.domain.value import SpotId, UserId, VoteId, VoteType
from datespot.persistence.repository.inmemory import (
    InMemorySpotRepository,
    InMemoryStore,
    InMemoryVoteRepository,
)
from tests.conftest import make_spot


def make_vote(user_id: str = "u1", spot_id: str = "s1") -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=UserId(user_id),
        spot_id=SpotId(spot_id),
        vote_type=VoteType.UP,
    )


class TestInMemorySpotRepository:
    @pytest.mark.asyncio
    async def test_vote_delta_is_floored_at_zero(self):
        repo = InMemorySpotRepository()
        await repo.save(make_spot("s1", upvotes=1))

        updated = await repo.apply_vote_delta(SpotId("s1"), upvotes=-3, downvotes=2)

        assert (updated.upvotes, updated.downvotes) == (0, 2)

    @pytest.mark.asyncio
    async def test_missing_spot_returns_none(self):
        repo = InMemorySpotRepository()

        assert await repo.apply_vote_delta(SpotId("nope"), upvotes=1) is None
        assert await repo.apply_rating(SpotId("nope"), 3) is None

    @pytest.mark.asyncio
    async def test_repositories_share_a_store(self):
        store = InMemoryStore()
        await InMemorySpotRepository(store).save(make_spot("s1"))

        assert await InMemorySpotRepository(store).count() == 1


class TestInMemoryVoteRepository:
    @pytest.mark.asyncio
    async def test_duplicate_vote_raises_integrity_error(self):
        repo = InMemoryVoteRepository()
        await repo.save(make_vote())

        with pytest.raises(IntegrityError):
            await repo.save(make_vote())

    @pytest.mark.asyncio
    async def test_update_and_delete(self):
        repo = InMemoryVoteRepository()
        await repo.save(make_vote())

        updated = await repo.update_type(UserId("u1"), SpotId("s1"), VoteType.DOWN)
        deleted = await repo.delete_by_user_and_spot(UserId("u1"), SpotId("s1"))

        assert updated.vote_type == VoteType.DOWN
        assert deleted is True
        assert await repo.find_by_user(UserId("u1")) == []

    @pytest.mark.asyncio
    async def test_writes_skip_a_vote_whose_direction_changed(self):
        repo = InMemoryVoteRepository()
        await repo.save(make_vote())

        updated = await repo.update_type(
            UserId("u1"), SpotId("s1"), VoteType.UP, expected=VoteType.DOWN
        )
        deleted = await repo.delete_by_user_and_spot(
            UserId("u1"), SpotId("s1"), expected=VoteType.DOWN
        )

        assert updated is None
        assert deleted is False
        votes = await repo.find_by_user(UserId("u1"))
        assert [v.vote_type for v in votes] == [VoteType.UP]
