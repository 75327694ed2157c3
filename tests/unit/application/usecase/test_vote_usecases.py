"""Unit tests for the vote and rating use cases."""

import pytest

from datespot.application.live import SnapshotBroker, SpotsSnapshot, UserVotesSnapshot
from datespot.application.usecase.rating import SubmitRatingRequest, SubmitRatingUseCase
from datespot.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetUserVotesRequest,
    GetUserVotesUseCase,
)
from datespot.domain.error import AuthRequiredError
from datespot.domain.repository import SpotRepository, UnitOfWork
from datespot.domain.service import SessionService, VoteChange
from datespot.domain.value import UserId, VoteAction, VoteType
from tests.conftest import make_spot
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def sign_in(unit_env, user_id: str = "u1") -> str:
    session_service = await unit_env.get(SessionService)
    _, token = await session_service.sign_in(f"valid:{user_id}")
    return token


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_commits_and_publishes_spots_and_votes(self, unit_env):
        # Arrange
        spot_repo = await unit_env.get(SpotRepository)
        await spot_repo.save(make_spot("s1"))
        token = await sign_in(unit_env)
        broker = await unit_env.get(SnapshotBroker)
        own = broker.subscribe(UserId("u1"))
        use_case = await unit_env.get(CastVoteUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        # Act
        result = await use_case.execute(
            CastVoteRequest(spot_id="s1", action=VoteAction.UP, token=token)
        )

        # Assert
        assert result.action_taken == VoteChange.CREATED
        assert result.upvotes == 1
        assert result.votes == {"s1": VoteType.UP}
        assert unit_of_work.commits == 1
        spots_event, votes_event = own.pending()
        assert isinstance(spots_event, SpotsSnapshot)
        assert spots_event.spots[0].upvotes == 1
        assert isinstance(votes_event, UserVotesSnapshot)
        assert votes_event.votes == {"s1": VoteType.UP}

    @pytest.mark.asyncio
    async def test_noop_remove_skips_commit_and_publish(self, unit_env):
        spot_repo = await unit_env.get(SpotRepository)
        await spot_repo.save(make_spot("s1"))
        token = await sign_in(unit_env)
        broker = await unit_env.get(SnapshotBroker)
        subscription = broker.subscribe()
        use_case = await unit_env.get(CastVoteUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        result = await use_case.execute(
            CastVoteRequest(spot_id="s1", action=VoteAction.REMOVE, token=token)
        )

        assert result.action_taken == VoteChange.NOOP
        assert unit_of_work.commits == 0
        assert subscription.pending() == []

    @pytest.mark.asyncio
    async def test_anonymous_vote_is_rejected(self, unit_env):
        spot_repo = await unit_env.get(SpotRepository)
        await spot_repo.save(make_spot("s1"))
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(AuthRequiredError):
            await use_case.execute(CastVoteRequest(spot_id="s1", action=VoteAction.UP))


class TestGetUserVotesUseCase:
    @pytest.mark.asyncio
    async def test_returns_vote_index(self, unit_env):
        spot_repo = await unit_env.get(SpotRepository)
        await spot_repo.save(make_spot("s1"))
        token = await sign_in(unit_env)
        cast_vote = await unit_env.get(CastVoteUseCase)
        await cast_vote.execute(
            CastVoteRequest(spot_id="s1", action=VoteAction.DOWN, token=token)
        )
        use_case = await unit_env.get(GetUserVotesUseCase)

        result = await use_case.execute(GetUserVotesRequest(token=token))

        assert result.votes == {"s1": VoteType.DOWN}

    @pytest.mark.asyncio
    async def test_anonymous_is_rejected(self, unit_env):
        use_case = await unit_env.get(GetUserVotesUseCase)

        with pytest.raises(AuthRequiredError, match="see your votes"):
            await use_case.execute(GetUserVotesRequest())


class TestSubmitRatingUseCase:
    @pytest.mark.asyncio
    async def test_rating_commits_and_returns_new_mean(self, unit_env):
        spot_repo = await unit_env.get(SpotRepository)
        await spot_repo.save(make_spot("s1", rating=4.0, total_votes=1))
        token = await sign_in(unit_env)
        use_case = await unit_env.get(SubmitRatingUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        item = await use_case.execute(
            SubmitRatingRequest(spot_id="s1", value=2, token=token)
        )

        assert item.rating == 3.0
        assert item.total_votes == 2
        assert unit_of_work.commits == 1
