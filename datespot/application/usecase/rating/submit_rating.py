"""Submit rating use case."""

from typing import Optional

from pydantic import BaseModel

from datespot.application.live import SnapshotBroker
from datespot.application.usecase.base import commit_and_publish
from datespot.application.usecase.spot.common import SpotItem
from datespot.domain.repository import UnitOfWork
from datespot.domain.service import RatingService, SessionService, SpotService
from datespot.domain.value import SpotId


class SubmitRatingRequest(BaseModel):
    """Submit rating request."""

    spot_id: str
    value: int
    token: Optional[str] = None


class SubmitRatingUseCase:
    """Use case folding one rating into a spot's average."""

    def __init__(
        self,
        rating_service: RatingService,
        session_service: SessionService,
        spot_service: SpotService,
        unit_of_work: UnitOfWork,
        broker: SnapshotBroker,
    ) -> None:
        self.rating_service = rating_service
        self.session_service = session_service
        self.spot_service = spot_service
        self.unit_of_work = unit_of_work
        self.broker = broker

    async def execute(self, request: SubmitRatingRequest) -> SpotItem:
        """Execute submit rating flow.

        Raises:
            AuthRequiredError: If not signed in
            ValidationError: If the value is outside 1..5
            NotFoundError: If the spot doesn't exist
            RemoteStoreError: If the store fails
        """
        session = await self.session_service.open_session(request.token)
        spot = await self.rating_service.submit_rating(
            SpotId(request.spot_id), session, request.value
        )
        await commit_and_publish(self.unit_of_work, self.spot_service, self.broker)
        return SpotItem.from_spot(spot, user_vote=session.vote_for(spot.id))
