"""Domain layer DI providers."""

from dishka import Scope, provide

from datespot.config import AuthSettings, Settings
from datespot.domain.repository import SpotRepository, VoteRepository
from datespot.domain.service import (
    AssetStore,
    IdentityVerifier,
    JWTService,
    LocationService,
    RatingService,
    ReverseGeocoder,
    SentimentAnalyzer,
    SessionService,
    SpotGate,
    SpotService,
    UploadService,
    VoteService,
)
from datespot.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, spot_repository: SpotRepository
    ) -> VoteService:
        """Provide vote ledger domain service."""
        return VoteService(
            vote_repository=vote_repository, spot_repository=spot_repository
        )

    @provide
    def get_rating_service(self, spot_repository: SpotRepository) -> RatingService:
        """Provide rating aggregator domain service."""
        return RatingService(spot_repository=spot_repository)

    @provide
    def get_spot_gate(
        self, sentiment_analyzer: SentimentAnalyzer, settings: Settings
    ) -> SpotGate:
        """Provide new-spot gate configured from settings."""
        return SpotGate(
            sentiment_analyzer=sentiment_analyzer,
            threshold=settings.sentiment.threshold,
            require_coordinates=settings.features.require_coordinates,
        )

    @provide
    def get_location_service(self, reverse_geocoder: ReverseGeocoder) -> LocationService:
        """Provide location domain service."""
        return LocationService(reverse_geocoder=reverse_geocoder)

    @provide
    def get_upload_service(
        self, asset_store: AssetStore, settings: Settings
    ) -> UploadService:
        """Provide upload domain service."""
        return UploadService(
            asset_store=asset_store,
            max_bytes=settings.storage.max_upload_bytes,
            allowed_content_types=settings.storage.allowed_content_types,
        )

    @provide
    def get_session_service(
        self,
        identity_verifier: IdentityVerifier,
        jwt_service: JWTService,
        vote_service: VoteService,
    ) -> SessionService:
        """Provide session domain service."""
        return SessionService(
            identity_verifier=identity_verifier,
            jwt_service=jwt_service,
            vote_service=vote_service,
        )

    @provide
    def get_spot_service(
        self,
        spot_repository: SpotRepository,
        gate: SpotGate,
        location_service: LocationService,
        upload_service: UploadService,
    ) -> SpotService:
        """Provide spot domain service."""
        return SpotService(
            spot_repository=spot_repository,
            gate=gate,
            location_service=location_service,
            upload_service=upload_service,
        )
