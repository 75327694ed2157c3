"""Rating domain service (running-mean aggregator)."""

import logfire
from sqlalchemy.exc import SQLAlchemyError

from datespot.domain.error import (
    AuthRequiredError,
    NotFoundError,
    RemoteStoreError,
    ValidationError,
)
from datespot.domain.model import Session, Spot
from datespot.domain.repository import SpotRepository
from datespot.domain.value import SpotId

from .base import Service

MIN_RATING = 1
MAX_RATING = 5


class RatingService(Service):
    """Domain service folding individual ratings into a spot's average.

    Individual ratings are not stored, so a rating can't be edited or
    retracted, and nothing stops a user from rating the same spot again.
    """

    def __init__(self, spot_repository: SpotRepository) -> None:
        """Initialize rating service.

        Args:
            spot_repository: Spot repository
        """
        self.spot_repository = spot_repository

    async def submit_rating(self, spot_id: SpotId, session: Session, value: int) -> Spot:
        """Add one rating to a spot.

        Args:
            spot_id: Spot ID
            session: Caller's session
            value: Rating from 1 to 5

        Returns:
            Spot with updated rating and total_votes

        Raises:
            AuthRequiredError: If the session is anonymous
            ValidationError: If value is outside 1..5
            NotFoundError: If the spot doesn't exist
            RemoteStoreError: If the store fails
        """
        if not session.is_authenticated:
            raise AuthRequiredError("rate date spots")

        if isinstance(value, bool) or not MIN_RATING <= value <= MAX_RATING:
            raise ValidationError(
                f"Rating must be an integer from {MIN_RATING} to {MAX_RATING}"
            )

        with logfire.span("submit_rating", spot_id=spot_id, value=value):
            try:
                updated = await self.spot_repository.apply_rating(spot_id, value)
            except SQLAlchemyError as e:
                logfire.error("Rating write failed", spot_id=spot_id, error=str(e))
                raise RemoteStoreError("submit_rating", str(e), retryable=True)

            if updated is None:
                logfire.warn("Rating on non-existent spot", spot_id=spot_id)
                raise NotFoundError("Spot", spot_id)

            logfire.info(
                "Rating applied",
                spot_id=spot_id,
                rating=updated.rating,
                total_votes=updated.total_votes,
            )
            return updated


def running_mean(rating: float, total_votes: int, value: int) -> float:
    """Mean after adding one value to an average over total_votes values."""
    return (rating * total_votes + value) / (total_votes + 1)
