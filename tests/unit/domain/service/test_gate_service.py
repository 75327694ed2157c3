"""Unit tests for SpotGate."""

import pytest

from datespot.adapter.sentiment.openai import MockChatSentimentAnalyzer
from datespot.domain.error import (
    DuplicateSpotError,
    MissingFieldError,
    SentimentUnavailableError,
    UnenthusiasticContentError,
)
from datespot.domain.service import SpotCandidate, SpotGate
from datespot.domain.value import GeoPoint
from tests.conftest import make_spot


def candidate(**overrides) -> SpotCandidate:
    fields = {
        "name": "New Spot",
        "location": "Somewhere 2, Göteborg",
        "description": "Absolutely wonderful evening by the water!",
    }
    fields.update(overrides)
    return SpotCandidate(**fields)


class TestRequiredFields:
    """Tests for the required field check."""

    @pytest.mark.asyncio
    async def test_blank_fields_are_reported(self):
        """Blank or whitespace-only fields should all be listed."""
        gate = SpotGate(MockChatSentimentAnalyzer())

        with pytest.raises(MissingFieldError) as exc_info:
            await gate.validate_new_spot(candidate(name="  ", description=""), [])

        assert exc_info.value.fields == ["name", "description"]
        assert exc_info.value.code == "missing_field"

    @pytest.mark.asyncio
    async def test_coordinates_required_when_enabled(self):
        gate = SpotGate(MockChatSentimentAnalyzer(), require_coordinates=True)

        with pytest.raises(MissingFieldError) as exc_info:
            await gate.validate_new_spot(candidate(), [])

        assert exc_info.value.fields == ["coordinates"]

    @pytest.mark.asyncio
    async def test_coordinates_satisfy_requirement(self):
        gate = SpotGate(MockChatSentimentAnalyzer(), require_coordinates=True)

        await gate.validate_new_spot(
            candidate(coordinates=GeoPoint(lat=57.7, lng=11.97)), []
        )


class TestDuplicateCheck:
    """Tests for the duplicate name and location check."""

    @pytest.mark.asyncio
    async def test_match_ignores_case_and_whitespace(self):
        """Name and location should match case- and whitespace-insensitively."""
        gate = SpotGate(MockChatSentimentAnalyzer())
        existing = [make_spot(name="Liseberg", location="Örgrytevägen 5, Göteborg")]

        with pytest.raises(DuplicateSpotError):
            await gate.validate_new_spot(
                candidate(name=" liseberg ", location="ÖRGRYTEVÄGEN 5, GÖTEBORG"),
                existing,
            )

    @pytest.mark.asyncio
    async def test_same_name_elsewhere_is_allowed(self):
        gate = SpotGate(MockChatSentimentAnalyzer())
        existing = [make_spot(name="New Spot", location="Another Street 9")]

        await gate.validate_new_spot(candidate(), existing)


class TestSentimentCheck:
    """Tests for the description sentiment check."""

    @pytest.mark.asyncio
    async def test_score_at_threshold_is_rejected(self):
        """A score equal to the threshold should fail."""
        gate = SpotGate(MockChatSentimentAnalyzer(score=0.0), threshold=0.0)

        with pytest.raises(UnenthusiasticContentError) as exc_info:
            await gate.validate_new_spot(candidate(), [])

        assert exc_info.value.score == 0.0

    @pytest.mark.asyncio
    async def test_score_above_threshold_passes(self):
        analyzer = MockChatSentimentAnalyzer(score=0.3)
        gate = SpotGate(analyzer, threshold=0.2)

        await gate.validate_new_spot(candidate(), [])

        assert analyzer.calls == ["Absolutely wonderful evening by the water!"]

    @pytest.mark.asyncio
    async def test_service_failure_is_unavailable_not_rejection(self):
        """A failed scoring call should be distinguishable from a low score."""
        gate = SpotGate(MockChatSentimentAnalyzer(fail=True))

        with pytest.raises(SentimentUnavailableError) as exc_info:
            await gate.validate_new_spot(candidate(), [])

        assert exc_info.value.code == "sentiment_unavailable"

    @pytest.mark.asyncio
    async def test_out_of_range_score_is_unavailable(self):
        gate = SpotGate(MockChatSentimentAnalyzer(score=7.5))

        with pytest.raises(SentimentUnavailableError):
            await gate.validate_new_spot(candidate(), [])


class TestCheckOrder:
    """Tests for the order in which checks run."""

    @pytest.mark.asyncio
    async def test_missing_fields_win_over_duplicate(self):
        analyzer = MockChatSentimentAnalyzer()
        gate = SpotGate(analyzer)
        existing = [make_spot(name="New Spot", location="Somewhere 2, Göteborg")]

        with pytest.raises(MissingFieldError):
            await gate.validate_new_spot(candidate(description=""), existing)

    @pytest.mark.asyncio
    async def test_duplicate_skips_sentiment_call(self):
        """A duplicate should be rejected before the sentiment service is called."""
        analyzer = MockChatSentimentAnalyzer(score=-1.0)
        gate = SpotGate(analyzer)
        existing = [make_spot(name="New Spot", location="Somewhere 2, Göteborg")]

        with pytest.raises(DuplicateSpotError):
            await gate.validate_new_spot(candidate(), existing)

        assert analyzer.calls == []
