"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from datespot.domain.model.vote import Vote
from datespot.domain.value import SpotId, UserId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    At most one vote exists per (user, spot) pair.
    """

    @abstractmethod
    async def find_by_user_and_spot(
        self, user_id: UserId, spot_id: SpotId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific spot.

        Args:
            user_id: The user's ID
            spot_id: The spot's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes by a user.

        Args:
            user_id: The user's ID

        Returns:
            List of votes by the user
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already voted on this spot
        """
        pass

    @abstractmethod
    async def update_type(
        self,
        user_id: UserId,
        spot_id: SpotId,
        vote_type: VoteType,
        expected: Optional[VoteType] = None,
    ) -> Optional[Vote]:
        """Change the direction of an existing vote in place.

        Args:
            user_id: The user's ID
            spot_id: The spot's ID
            vote_type: New vote direction
            expected: Only update if the stored direction is still this one

        Returns:
            Updated vote, or None if no matching vote existed
        """
        pass

    @abstractmethod
    async def delete_by_user_and_spot(
        self,
        user_id: UserId,
        spot_id: SpotId,
        expected: Optional[VoteType] = None,
    ) -> bool:
        """Delete a user's vote on a spot.

        Args:
            user_id: The user's ID
            spot_id: The spot's ID
            expected: Only delete if the stored direction is still this one

        Returns:
            True if a vote was deleted, False if no matching vote existed
        """
        pass
