"""Cast vote use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from datespot.application.live import SnapshotBroker
from datespot.application.usecase.base import commit_and_publish
from datespot.domain.repository import UnitOfWork
from datespot.domain.service import SessionService, SpotService, VoteChange, VoteService
from datespot.domain.value import SpotId, VoteAction, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    spot_id: str
    action: VoteAction
    token: Optional[str] = None


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    spot_id: str
    action_taken: VoteChange
    vote_type: Optional[VoteType]
    upvotes: int
    downvotes: int
    votes: dict[str, VoteType]  # Caller's vote index after the change


class CastVoteUseCase:
    """Use case for up, down and remove votes."""

    def __init__(
        self,
        vote_service: VoteService,
        session_service: SessionService,
        spot_service: SpotService,
        unit_of_work: UnitOfWork,
        broker: SnapshotBroker,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            session_service: Session domain service
            spot_service: Spot domain service, for the published list
            unit_of_work: Commit boundary of the request
            broker: Live snapshot broker
        """
        self.vote_service = vote_service
        self.session_service = session_service
        self.spot_service = spot_service
        self.unit_of_work = unit_of_work
        self.broker = broker

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        The vote record and counters are committed together before the new
        state is published.

        Raises:
            AuthRequiredError: If not signed in
            NotFoundError: If the spot doesn't exist
            RemoteStoreError: If the store fails
        """
        session = await self.session_service.open_session(request.token)

        with logfire.span(
            "cast_vote.execute", spot_id=request.spot_id, action=request.action.value
        ):
            outcome = await self.vote_service.cast_vote(
                SpotId(request.spot_id), session, request.action
            )
            if outcome.action_taken != VoteChange.NOOP:
                await commit_and_publish(
                    self.unit_of_work, self.spot_service, self.broker, session
                )

        return CastVoteResponse(
            spot_id=outcome.spot_id,
            action_taken=outcome.action_taken,
            vote_type=outcome.vote_type,
            upvotes=outcome.upvotes,
            downvotes=outcome.downvotes,
            votes={str(k): v for k, v in session.votes.items()},
        )
