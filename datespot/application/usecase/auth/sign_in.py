"""Sign-in use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from datespot.domain.service import SessionService
from datespot.domain.value import VoteType


class SignInRequest(BaseModel):
    """Sign-in request."""

    id_token: str  # Identity provider ID token


class SignInResponse(BaseModel):
    """Sign-in response."""

    user_id: str
    display_name: Optional[str]
    avatar_url: Optional[str]
    token: str  # Session token, set as a cookie by the API
    votes: dict[str, VoteType]


class SignInUseCase:
    """Use case exchanging a provider token for a session."""

    def __init__(self, session_service: SessionService) -> None:
        """Initialize sign-in use case.

        Args:
            session_service: Session domain service
        """
        self.session_service = session_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Execute sign-in flow.

        Steps:
        1. Verify the provider token and issue a session token
        2. Rebuild the user's vote index for the new session

        Raises:
            AuthRequiredError: If the provider rejects the token
        """
        with logfire.span("sign_in.execute"):
            user, token = await self.session_service.sign_in(request.id_token)
            session = await self.session_service.open_session(token)

            return SignInResponse(
                user_id=user.user_id,
                display_name=user.display_name,
                avatar_url=user.avatar_url,
                token=token,
                votes={str(k): v for k, v in session.votes.items()},
            )
