"""In-memory spot repository for testing."""

from typing import Optional

from datespot.domain.model.spot import Spot
from datespot.domain.repository.spot import SpotRepository
from datespot.domain.value import SpotId

from .store import InMemoryStore


class InMemorySpotRepository(SpotRepository):
    """In-memory implementation of SpotRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, spot_id: SpotId) -> Optional[Spot]:
        """Find a spot by ID."""
        return self._store.spots.get(spot_id)

    async def find_all(self) -> list[Spot]:
        """Find all spots, newest first."""
        return sorted(
            self._store.spots.values(), key=lambda s: s.created_at, reverse=True
        )

    async def count(self) -> int:
        """Count all spots."""
        return len(self._store.spots)

    async def save(self, spot: Spot) -> Spot:
        """Save a spot."""
        self._store.spots[spot.id] = spot
        return spot

    async def apply_vote_delta(
        self, spot_id: SpotId, upvotes: int = 0, downvotes: int = 0
    ) -> Optional[Spot]:
        """Apply counter deltas, flooring each counter at zero."""
        spot = self._store.spots.get(spot_id)
        if spot is None:
            return None

        updated = spot.model_copy(
            update={
                "upvotes": max(spot.upvotes + upvotes, 0),
                "downvotes": max(spot.downvotes + downvotes, 0),
            }
        )
        self._store.spots[spot_id] = updated
        return updated

    async def apply_rating(self, spot_id: SpotId, value: int) -> Optional[Spot]:
        """Fold a rating into the running mean."""
        spot = self._store.spots.get(spot_id)
        if spot is None:
            return None

        total = spot.total_votes
        updated = spot.model_copy(
            update={
                "rating": (spot.rating * total + value) / (total + 1),
                "total_votes": total + 1,
            }
        )
        self._store.spots[spot_id] = updated
        return updated
