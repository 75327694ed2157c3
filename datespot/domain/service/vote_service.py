"""Vote domain service (vote ledger)."""

from enum import Enum
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from datespot.domain.error import AuthRequiredError, NotFoundError, RemoteStoreError
from datespot.domain.model import Session, Vote
from datespot.domain.repository import SpotRepository, VoteRepository
from datespot.domain.value import SpotId, UserId, VoteAction, VoteId, VoteType

from .base import Service


class VoteChange(str, Enum):
    """What a vote call ended up doing."""

    CREATED = "created"
    REMOVED = "removed"
    SWITCHED = "switched"
    NOOP = "noop"


class VoteOutcome(BaseModel):
    """Result of a vote call."""

    spot_id: SpotId
    action_taken: VoteChange
    vote_type: Optional[VoteType]
    upvotes: int
    downvotes: int


def _counter_delta(vote_type: VoteType, amount: int) -> dict[str, int]:
    if vote_type == VoteType.UP:
        return {"upvotes": amount}
    return {"downvotes": amount}


class VoteService(Service):
    """Domain service maintaining at most one vote per (user, spot).

    The vote record and the spot counters are written in the same unit of
    work, so they commit or roll back together. Counter changes are relative
    and floored at zero by the repository. A counter only moves when the
    vote write it belongs to matched the direction that was read.
    """

    def __init__(
        self, vote_repository: VoteRepository, spot_repository: SpotRepository
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            spot_repository: Spot repository
        """
        self.vote_repository = vote_repository
        self.spot_repository = spot_repository

    async def cast_vote(
        self, spot_id: SpotId, session: Session, action: VoteAction
    ) -> VoteOutcome:
        """Apply an up, down or remove request for the session's user.

        - remove: delete the existing vote (no-op if none)
        - same direction as existing: toggle off, same as remove
        - other direction than existing: switch in place
        - no existing vote: create

        Args:
            spot_id: Spot being voted on
            session: Caller's session; its vote index is updated on success
            action: Requested operation

        Returns:
            Outcome with the resulting counters

        Raises:
            AuthRequiredError: If the session is anonymous
            NotFoundError: If the spot doesn't exist
            RemoteStoreError: If the store fails; safe to retry
        """
        user_id = session.user_id
        if not session.is_authenticated or user_id is None:
            raise AuthRequiredError("vote on date spots")

        with logfire.span(
            "cast_vote", spot_id=spot_id, user_id=user_id, action=action.value
        ):
            try:
                outcome = await self._apply(spot_id, user_id, action)
            except IntegrityError as e:
                # Another request created this user's vote concurrently
                logfire.warn(
                    "Concurrent vote conflict", spot_id=spot_id, user_id=user_id
                )
                raise RemoteStoreError("cast_vote", str(e.orig), retryable=True)
            except SQLAlchemyError as e:
                logfire.error(
                    "Vote write failed",
                    spot_id=spot_id,
                    user_id=user_id,
                    error=str(e),
                )
                raise RemoteStoreError("cast_vote", str(e), retryable=True)

            session.record_vote(spot_id, outcome.vote_type)
            logfire.info(
                "Vote applied",
                spot_id=spot_id,
                user_id=user_id,
                action_taken=outcome.action_taken.value,
                upvotes=outcome.upvotes,
                downvotes=outcome.downvotes,
            )
            return outcome

    async def _apply(
        self, spot_id: SpotId, user_id: UserId, action: VoteAction
    ) -> VoteOutcome:
        spot = await self.spot_repository.find_by_id(spot_id)
        if not spot:
            logfire.warn("Vote on non-existent spot", spot_id=spot_id)
            raise NotFoundError("Spot", spot_id)

        existing = await self.vote_repository.find_by_user_and_spot(user_id, spot_id)
        current = existing.vote_type if existing else None

        if action == VoteAction.REMOVE or (current and current.value == action.value):
            if current is None:
                return VoteOutcome(
                    spot_id=spot_id,
                    action_taken=VoteChange.NOOP,
                    vote_type=None,
                    upvotes=spot.upvotes,
                    downvotes=spot.downvotes,
                )

            if not await self.vote_repository.delete_by_user_and_spot(
                user_id, spot_id, expected=current
            ):
                return await self._lost_race(spot_id, user_id)
            updated = await self.spot_repository.apply_vote_delta(
                spot_id, **_counter_delta(current, -1)
            )
            change, new_type = VoteChange.REMOVED, None

        elif current is not None:
            new_type = VoteType(action.value)
            if not await self.vote_repository.update_type(
                user_id, spot_id, new_type, expected=current
            ):
                return await self._lost_race(spot_id, user_id)
            updated = await self.spot_repository.apply_vote_delta(
                spot_id, **_counter_delta(current, -1), **_counter_delta(new_type, 1)
            )
            change = VoteChange.SWITCHED

        else:
            new_type = VoteType(action.value)
            await self.vote_repository.save(
                Vote(
                    id=VoteId(uuid4()),
                    user_id=user_id,
                    spot_id=spot_id,
                    vote_type=new_type,
                )
            )
            updated = await self.spot_repository.apply_vote_delta(
                spot_id, **_counter_delta(new_type, 1)
            )
            change = VoteChange.CREATED

        if updated is None:
            raise NotFoundError("Spot", spot_id)

        return VoteOutcome(
            spot_id=spot_id,
            action_taken=change,
            vote_type=new_type,
            upvotes=updated.upvotes,
            downvotes=updated.downvotes,
        )

    async def _lost_race(self, spot_id: SpotId, user_id: UserId) -> VoteOutcome:
        """Report the state left by a concurrent request that changed the vote first.

        No counter is touched, so the counters keep matching the stored votes.
        """
        logfire.info("Vote changed concurrently", spot_id=spot_id, user_id=user_id)
        spot = await self.spot_repository.find_by_id(spot_id)
        if not spot:
            raise NotFoundError("Spot", spot_id)
        existing = await self.vote_repository.find_by_user_and_spot(user_id, spot_id)
        return VoteOutcome(
            spot_id=spot_id,
            action_taken=VoteChange.NOOP,
            vote_type=existing.vote_type if existing else None,
            upvotes=spot.upvotes,
            downvotes=spot.downvotes,
        )

    async def get_user_vote_index(self, user_id: UserId) -> dict[SpotId, VoteType]:
        """Build the spot -> vote direction index for a user.

        Args:
            user_id: User ID

        Returns:
            Mapping of spot ID to the user's vote direction
        """
        try:
            votes = await self.vote_repository.find_by_user(user_id)
        except SQLAlchemyError as e:
            raise RemoteStoreError("find_votes", str(e), retryable=True)
        return {vote.spot_id: vote.vote_type for vote in votes}
