"""Session domain service.

Sign-in trades an identity provider token for a session token; every request
then rebuilds its ``Session`` (user plus vote index) from that token.
"""

import logfire

from datespot.domain.error import AuthRequiredError, ExternalServiceError
from datespot.domain.model import Session, SessionUser

from .base import Service
from .jwt_service import JWTService
from .vote_service import VoteService


class IdentityVerifier:
    """External identity provider interface."""

    async def verify(self, id_token: str) -> SessionUser:
        """Verify an identity token issued by the provider.

        Args:
            id_token: Provider-issued ID token

        Returns:
            The user the token belongs to

        Raises:
            ExternalServiceError: If the token is rejected or the provider fails
        """
        raise NotImplementedError


class SessionService(Service):
    """Domain service for signing in and opening sessions."""

    def __init__(
        self,
        identity_verifier: IdentityVerifier,
        jwt_service: JWTService,
        vote_service: VoteService,
    ) -> None:
        """Initialize session service.

        Args:
            identity_verifier: External identity provider
            jwt_service: Session token service
            vote_service: Vote service, for the user's vote index
        """
        self.identity_verifier = identity_verifier
        self.jwt_service = jwt_service
        self.vote_service = vote_service

    async def sign_in(self, id_token: str) -> tuple[SessionUser, str]:
        """Verify a provider token and issue a session token.

        Returns:
            The signed-in user and their session token

        Raises:
            AuthRequiredError: If the provider rejects the token
        """
        with logfire.span("session_service.sign_in"):
            try:
                user = await self.identity_verifier.verify(id_token)
            except ExternalServiceError as e:
                logfire.warn("Identity verification failed", error=str(e))
                raise AuthRequiredError("sign in with a valid account")

            token = self.jwt_service.create_token(user)
            logfire.info("User signed in", user_id=user.user_id)
            return user, token

    async def open_session(self, token: str | None) -> Session:
        """Build the session for a request.

        Anonymous when the token is missing or invalid; otherwise the user's
        vote index is loaded fresh from the store.
        """
        user = self.jwt_service.get_user_from_token(token)
        if user is None:
            return Session.anonymous()

        votes = await self.vote_service.get_user_vote_index(user.user_id)
        return Session(user=user, votes=votes)
