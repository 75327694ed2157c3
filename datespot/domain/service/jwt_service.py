"""JWT token domain service."""

import logfire

from datespot.config import AuthSettings
from datespot.domain.model import SessionUser
from datespot.domain.value import UserId
from datespot.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: SessionUser) -> str:
        """Create a session token for a user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user.user_id):
            return create_token(
                user.user_id, user.display_name, user.avatar_url, self.auth_settings
            )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        return verify_token(token, self.auth_settings)

    def get_user_from_token(self, token: str | None) -> SessionUser | None:
        """Extract the user from a token without raising exceptions.

        Args:
            token: JWT token string (optional)

        Returns:
            User if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

        return SessionUser(
            user_id=UserId(payload.user_id),
            display_name=payload.display_name,
            avatar_url=payload.avatar_url,
        )
