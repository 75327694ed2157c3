"""Open live feed use case."""

from typing import Optional

from pydantic import BaseModel

from datespot.application.live import (
    SnapshotBroker,
    SpotsSnapshot,
    Subscription,
    UserVotesSnapshot,
)
from datespot.domain.service import SessionService, SpotService


class OpenLiveFeedRequest(BaseModel):
    """Open live feed request."""

    token: Optional[str] = None


class OpenLiveFeedUseCase:
    """Use case subscribing a live client and queueing its initial state."""

    def __init__(
        self,
        spot_service: SpotService,
        session_service: SessionService,
        broker: SnapshotBroker,
    ) -> None:
        self.spot_service = spot_service
        self.session_service = session_service
        self.broker = broker

    async def execute(self, request: OpenLiveFeedRequest) -> Subscription:
        """Subscribe, then queue the current spots and vote index.

        The subscription is registered before the initial load so that no
        change committed in between is missed. If such a change already queued
        a snapshot, the initial load is older than it and is not queued. The
        caller owns the returned subscription and must close it.
        """
        session = await self.session_service.open_session(request.token)
        subscription = self.broker.subscribe(session.user_id)
        try:
            spots = await self.spot_service.list_spots()
        except Exception:
            subscription.close()
            raise

        if subscription.pushed > 0:
            return subscription

        subscription.push(SpotsSnapshot(spots=spots))
        if session.user_id is not None:
            subscription.push(
                UserVotesSnapshot(user_id=session.user_id, votes=dict(session.votes))
            )
        return subscription
