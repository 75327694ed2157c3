"""Get user votes use case."""

from typing import Optional

from pydantic import BaseModel

from datespot.domain.error import AuthRequiredError
from datespot.domain.service import SessionService
from datespot.domain.value import VoteType


class GetUserVotesRequest(BaseModel):
    """Get user votes request."""

    token: Optional[str] = None


class GetUserVotesResponse(BaseModel):
    """The caller's vote index."""

    user_id: str
    votes: dict[str, VoteType]


class GetUserVotesUseCase:
    """Use case returning the signed-in user's vote per spot."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(self, request: GetUserVotesRequest) -> GetUserVotesResponse:
        """Execute get user votes flow.

        Raises:
            AuthRequiredError: If not signed in
        """
        session = await self.session_service.open_session(request.token)
        if session.user_id is None:
            raise AuthRequiredError("see your votes")

        return GetUserVotesResponse(
            user_id=session.user_id,
            votes={str(k): v for k, v in session.votes.items()},
        )
