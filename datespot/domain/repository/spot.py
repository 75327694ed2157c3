"""Spot repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from datespot.domain.model.spot import Spot
from datespot.domain.value import SpotId


class SpotRepository(ABC):
    """Repository for Spot aggregate.

    Counter and rating mutations are expressed as relative updates so that
    implementations can apply them atomically in the store.
    """

    @abstractmethod
    async def find_by_id(self, spot_id: SpotId) -> Optional[Spot]:
        """Find a spot by ID.

        Args:
            spot_id: The spot's unique identifier

        Returns:
            The spot if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Spot]:
        """Find all spots, newest first.

        Returns:
            Every spot ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all spots."""
        pass

    @abstractmethod
    async def save(self, spot: Spot) -> Spot:
        """Save a spot (create or replace).

        Args:
            spot: The spot to save

        Returns:
            The saved spot
        """
        pass

    @abstractmethod
    async def apply_vote_delta(
        self, spot_id: SpotId, upvotes: int = 0, downvotes: int = 0
    ) -> Optional[Spot]:
        """Add deltas to the vote counters in a single update.

        Each counter is floored at 0 after the delta is applied.

        Args:
            spot_id: The spot ID
            upvotes: Change to apply to upvotes
            downvotes: Change to apply to downvotes

        Returns:
            Updated spot, or None if the spot doesn't exist
        """
        pass

    @abstractmethod
    async def apply_rating(self, spot_id: SpotId, value: int) -> Optional[Spot]:
        """Fold one rating into the running mean in a single update.

        new_rating = (rating * total_votes + value) / (total_votes + 1)

        Args:
            spot_id: The spot ID
            value: Rating value (1-5)

        Returns:
            Updated spot, or None if the spot doesn't exist
        """
        pass
