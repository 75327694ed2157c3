"""Pre-submission gate for new spots.

Checks run in a fixed order and stop at the first failure:
required fields, duplicate name+location, description sentiment.
The gate is advisory: it guards the create flow, not the store.
"""

import math
from typing import Optional, Sequence

import logfire

from datespot.domain.error import (
    DuplicateSpotError,
    ExternalServiceError,
    MissingFieldError,
    SentimentUnavailableError,
    UnenthusiasticContentError,
)
from datespot.domain.model import Spot
from datespot.domain.value import GeoPoint
from datespot.domain.value.common import ValueObject

from .base import Service


class SentimentAnalyzer:
    """Sentiment scoring service interface."""

    async def score(self, text: str) -> float:
        """Score the sentiment of a text.

        Args:
            text: Free text to score

        Returns:
            Score from -1 (very negative) to 1 (very positive)

        Raises:
            ExternalServiceError: If the service fails or replies with garbage
        """
        raise NotImplementedError


class SpotCandidate(ValueObject):
    """Fields of a spot that the gate inspects."""

    name: str
    location: str
    description: str
    coordinates: Optional[GeoPoint] = None


class SpotGate(Service):
    """Domain service running the new-spot checks."""

    def __init__(
        self,
        sentiment_analyzer: SentimentAnalyzer,
        threshold: float = 0.0,
        require_coordinates: bool = False,
    ) -> None:
        """Initialize the gate.

        Args:
            sentiment_analyzer: External sentiment scorer
            threshold: Scores at or below this are rejected
            require_coordinates: Whether a map location is mandatory
        """
        self.sentiment_analyzer = sentiment_analyzer
        self.threshold = threshold
        self.require_coordinates = require_coordinates

    async def validate_new_spot(
        self, candidate: SpotCandidate, existing_spots: Sequence[Spot]
    ) -> None:
        """Run all checks against a candidate spot.

        Args:
            candidate: Spot about to be created
            existing_spots: Current spot list for the duplicate check

        Raises:
            MissingFieldError: If a required field is blank
            DuplicateSpotError: If name and location match an existing spot
            SentimentUnavailableError: If the description couldn't be scored
            UnenthusiasticContentError: If the description isn't positive enough
        """
        with logfire.span("validate_new_spot", name=candidate.name):
            self.check_required_fields(candidate)
            self.check_duplicate(candidate, existing_spots)
            await self.check_sentiment(candidate.description)

    def check_required_fields(self, candidate: SpotCandidate) -> None:
        missing = [
            field
            for field in ("name", "location", "description")
            if not getattr(candidate, field).strip()
        ]
        if self.require_coordinates and candidate.coordinates is None:
            missing.append("coordinates")

        if missing:
            logfire.info("Spot rejected: missing fields", fields=missing)
            raise MissingFieldError(missing)

    def check_duplicate(
        self, candidate: SpotCandidate, existing_spots: Sequence[Spot]
    ) -> None:
        name = candidate.name.strip().lower()
        location = candidate.location.strip().lower()

        for spot in existing_spots:
            if spot.name.strip().lower() == name and spot.location.strip().lower() == location:
                logfire.info(
                    "Spot rejected: duplicate", name=candidate.name, existing_id=spot.id
                )
                raise DuplicateSpotError(candidate.name, candidate.location)

    async def check_sentiment(self, description: str) -> float:
        """Score the description and enforce the threshold.

        Returns:
            The accepted score
        """
        try:
            score = await self.sentiment_analyzer.score(description)
        except ExternalServiceError as e:
            logfire.warn("Sentiment service failed", error=str(e))
            raise SentimentUnavailableError(str(e))

        if not isinstance(score, (int, float)) or math.isnan(score) or not -1 <= score <= 1:
            logfire.warn("Invalid sentiment score received", score=repr(score))
            raise SentimentUnavailableError(f"score out of range: {score!r}")

        if score <= self.threshold:
            logfire.info(
                "Spot rejected: unenthusiastic", score=score, threshold=self.threshold
            )
            raise UnenthusiasticContentError(score, self.threshold)

        return score
