"""Google ID token verification through the tokeninfo endpoint."""

from typing import Optional

import httpx
import logfire

from datespot.adapter.error import ProviderError
from datespot.domain.model import SessionUser
from datespot.domain.service.session_service import IdentityVerifier
from datespot.domain.value import UserId


class GoogleIdentityVerifier(IdentityVerifier):
    """Base class for Google identity verifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleIdentityVerifier(GoogleIdentityVerifier):
    """Verifies ID tokens with Google's tokeninfo endpoint."""

    def __init__(
        self, tokeninfo_url: str, client_id: Optional[str] = None, timeout: float = 5.0
    ) -> None:
        """Initialize verifier.

        Args:
            tokeninfo_url: Tokeninfo endpoint
            client_id: Expected token audience; None skips the audience check
            timeout: Request timeout in seconds
        """
        self.tokeninfo_url = tokeninfo_url
        self.client_id = client_id
        self.timeout = timeout

    async def verify(self, id_token: str) -> SessionUser:
        """Verify the token and return its user.

        Raises:
            ProviderError: If Google rejects the token or the audience is wrong
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    self.tokeninfo_url, params={"id_token": id_token}
                )
        except httpx.HTTPError as e:
            logfire.error("Tokeninfo HTTP error", error=str(e))
            raise ProviderError("google", f"HTTP error: {e}")

        if response.status_code != 200:
            logfire.warn("ID token rejected", status_code=response.status_code)
            raise ProviderError("google", f"token rejected: {response.status_code}")

        claims = response.json()
        if self.client_id and claims.get("aud") != self.client_id:
            logfire.warn("ID token audience mismatch", aud=claims.get("aud"))
            raise ProviderError("google", "token audience mismatch")

        if not claims.get("sub"):
            raise ProviderError("google", "token has no subject")

        logfire.info("ID token verified", sub=claims["sub"])
        return SessionUser(
            user_id=UserId(claims["sub"]),
            display_name=claims.get("name"),
            avatar_url=claims.get("picture"),
        )


class MockGoogleIdentityVerifier(GoogleIdentityVerifier):
    """Mock verifier for testing.

    Accepts tokens of the form ``valid:<user_id>`` and rejects anything else.
    """

    async def verify(self, id_token: str) -> SessionUser:
        prefix, _, user_id = id_token.partition(":")
        if prefix != "valid" or not user_id:
            raise ProviderError("google", "mock token rejected")
        return SessionUser(
            user_id=UserId(user_id),
            display_name=f"Mock {user_id}",
            avatar_url=f"https://example.com/{user_id}.png",
        )
