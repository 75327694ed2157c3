"""Application layer DI providers."""

from dishka import Scope, provide

from datespot.application.live import SnapshotBroker
from datespot.application.usecase.auth import GetCurrentUserUseCase, SignInUseCase
from datespot.application.usecase.geocode import ReverseGeocodeUseCase
from datespot.application.usecase.live import OpenLiveFeedUseCase
from datespot.application.usecase.rating import SubmitRatingUseCase
from datespot.application.usecase.spot import (
    CreateSpotUseCase,
    GetSpotUseCase,
    ListSpotsUseCase,
    SeedSpotsUseCase,
)
from datespot.application.usecase.upload import UploadImageUseCase
from datespot.application.usecase.vote import CastVoteUseCase, GetUserVotesUseCase
from datespot.domain.repository import UnitOfWork
from datespot.domain.service import (
    LocationService,
    RatingService,
    SessionService,
    SpotService,
    UploadService,
    VoteService,
)
from datespot.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Live feed broker, shared by every request and connection
    @provide(scope=Scope.APP)
    def get_snapshot_broker(self) -> SnapshotBroker:
        """Provide live snapshot broker."""
        return SnapshotBroker()

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_sign_in_use_case(self, session_service: SessionService) -> SignInUseCase:
        """Provide sign-in use case."""
        return SignInUseCase(session_service=session_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, session_service: SessionService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(session_service=session_service)

    # Spot use cases
    @provide(scope=Scope.REQUEST)
    def get_list_spots_use_case(
        self, spot_service: SpotService, session_service: SessionService
    ) -> ListSpotsUseCase:
        """Provide list spots use case."""
        return ListSpotsUseCase(
            spot_service=spot_service, session_service=session_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_spot_use_case(
        self, spot_service: SpotService, session_service: SessionService
    ) -> GetSpotUseCase:
        """Provide get spot use case."""
        return GetSpotUseCase(spot_service=spot_service, session_service=session_service)

    @provide(scope=Scope.REQUEST)
    def get_create_spot_use_case(
        self,
        spot_service: SpotService,
        session_service: SessionService,
        unit_of_work: UnitOfWork,
        broker: SnapshotBroker,
    ) -> CreateSpotUseCase:
        """Provide create spot use case."""
        return CreateSpotUseCase(
            spot_service=spot_service,
            session_service=session_service,
            unit_of_work=unit_of_work,
            broker=broker,
        )

    @provide(scope=Scope.REQUEST)
    def get_seed_spots_use_case(
        self,
        spot_service: SpotService,
        unit_of_work: UnitOfWork,
        broker: SnapshotBroker,
    ) -> SeedSpotsUseCase:
        """Provide seed spots use case."""
        return SeedSpotsUseCase(
            spot_service=spot_service, unit_of_work=unit_of_work, broker=broker
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        session_service: SessionService,
        spot_service: SpotService,
        unit_of_work: UnitOfWork,
        broker: SnapshotBroker,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            session_service=session_service,
            spot_service=spot_service,
            unit_of_work=unit_of_work,
            broker=broker,
        )

    @provide(scope=Scope.REQUEST)
    def get_user_votes_use_case(
        self, session_service: SessionService
    ) -> GetUserVotesUseCase:
        """Provide get user votes use case."""
        return GetUserVotesUseCase(session_service=session_service)

    # Rating use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_rating_use_case(
        self,
        rating_service: RatingService,
        session_service: SessionService,
        spot_service: SpotService,
        unit_of_work: UnitOfWork,
        broker: SnapshotBroker,
    ) -> SubmitRatingUseCase:
        """Provide submit rating use case."""
        return SubmitRatingUseCase(
            rating_service=rating_service,
            session_service=session_service,
            spot_service=spot_service,
            unit_of_work=unit_of_work,
            broker=broker,
        )

    # Geocoding and upload use cases
    @provide(scope=Scope.REQUEST)
    def get_reverse_geocode_use_case(
        self, location_service: LocationService
    ) -> ReverseGeocodeUseCase:
        """Provide reverse geocode use case."""
        return ReverseGeocodeUseCase(location_service=location_service)

    @provide(scope=Scope.REQUEST)
    def get_upload_image_use_case(
        self, upload_service: UploadService, session_service: SessionService
    ) -> UploadImageUseCase:
        """Provide upload image use case."""
        return UploadImageUseCase(
            upload_service=upload_service, session_service=session_service
        )

    # Live feed use cases
    @provide(scope=Scope.REQUEST)
    def get_open_live_feed_use_case(
        self,
        spot_service: SpotService,
        session_service: SessionService,
        broker: SnapshotBroker,
    ) -> OpenLiveFeedUseCase:
        """Provide open live feed use case."""
        return OpenLiveFeedUseCase(
            spot_service=spot_service, session_service=session_service, broker=broker
        )
