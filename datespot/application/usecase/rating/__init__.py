"""Rating use cases."""

from .submit_rating import SubmitRatingRequest, SubmitRatingUseCase

__all__ = ["SubmitRatingRequest", "SubmitRatingUseCase"]
