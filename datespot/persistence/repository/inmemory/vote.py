"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from datespot.domain.model.vote import Vote
from datespot.domain.repository.vote import VoteRepository
from datespot.domain.value import SpotId, UserId, VoteType

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_user_and_spot(
        self, user_id: UserId, spot_id: SpotId
    ) -> Optional[Vote]:
        """Find a vote by user and spot."""
        for vote in self._store.votes:
            if vote.user_id == user_id and vote.spot_id == spot_id:
                return vote
        return None

    async def find_by_user(self, user_id: UserId) -> list[Vote]:
        """Find all votes by a user."""
        return [v for v in self._store.votes if v.user_id == user_id]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        if await self.find_by_user_and_spot(vote.user_id, vote.spot_id):
            raise IntegrityError("Duplicate vote", None, Exception())

        self._store.votes.append(vote)
        return vote

    def _index_of(
        self, user_id: UserId, spot_id: SpotId, expected: Optional[VoteType]
    ) -> Optional[int]:
        for i, vote in enumerate(self._store.votes):
            if vote.user_id == user_id and vote.spot_id == spot_id:
                if expected is not None and vote.vote_type != expected:
                    return None
                return i
        return None

    async def update_type(
        self,
        user_id: UserId,
        spot_id: SpotId,
        vote_type: VoteType,
        expected: Optional[VoteType] = None,
    ) -> Optional[Vote]:
        """Change the direction of an existing vote."""
        i = self._index_of(user_id, spot_id, expected)
        if i is None:
            return None
        updated = self._store.votes[i].model_copy(update={"vote_type": vote_type})
        self._store.votes[i] = updated
        return updated

    async def delete_by_user_and_spot(
        self,
        user_id: UserId,
        spot_id: SpotId,
        expected: Optional[VoteType] = None,
    ) -> bool:
        """Delete a vote by user and spot."""
        i = self._index_of(user_id, spot_id, expected)
        if i is None:
            return False
        self._store.votes.pop(i)
        return True
