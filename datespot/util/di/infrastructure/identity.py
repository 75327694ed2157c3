"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from datespot.adapter.identity.google import RealGoogleIdentityVerifier
from datespot.config import Settings
from datespot.domain.service import IdentityVerifier
from datespot.util.di.base import ProviderBase


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider (Google ID tokens)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_verifier(self, settings: Settings) -> IdentityVerifier:
        """Provide Google ID token verifier."""
        return RealGoogleIdentityVerifier(
            tokeninfo_url=settings.identity.tokeninfo_url,
            client_id=settings.identity.client_id,
            timeout=settings.identity.timeout_seconds,
        )
