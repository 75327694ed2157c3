"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from datespot.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetUserVotesRequest,
    GetUserVotesResponse,
    GetUserVotesUseCase,
)
from datespot.domain.value import VoteAction

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a spot."""

    vote_type: VoteAction


@router.post("/spots/{spot_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    spot_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a spot.

    Requires authentication. Repeating the current vote removes it, the
    opposite vote switches it, and ``remove`` retracts it.

    Example:
        POST /spots/3/vote
        {"vote_type": "up"}
    """
    return await cast_vote_use_case.execute(
        CastVoteRequest(spot_id=spot_id, action=request.vote_type, token=auth_token)
    )


@router.get("/votes/me", response_model=GetUserVotesResponse)
async def get_my_votes(
    get_user_votes_use_case: FromDishka[GetUserVotesUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetUserVotesResponse:
    """The signed-in user's vote per spot."""
    return await get_user_votes_use_case.execute(GetUserVotesRequest(token=auth_token))
