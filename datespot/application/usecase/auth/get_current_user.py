"""Get current user use case."""

from typing import Optional

from pydantic import BaseModel

from datespot.domain.service import SessionService
from datespot.domain.value import VoteType


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: Optional[str] = None  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Current session; ``authenticated`` is False for anonymous callers."""

    authenticated: bool
    user_id: Optional[str] = None
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    votes: dict[str, VoteType] = {}


class GetCurrentUserUseCase:
    """Use case for describing the caller's session."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        session = await self.session_service.open_session(request.token)
        if session.user is None:
            return GetCurrentUserResponse(authenticated=False)

        return GetCurrentUserResponse(
            authenticated=True,
            user_id=session.user.user_id,
            display_name=session.user.display_name,
            avatar_url=session.user.avatar_url,
            votes={str(k): v for k, v in session.votes.items()},
        )
