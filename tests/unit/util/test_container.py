"""Unit tests for the DI container wiring."""

import pytest

from datespot.adapter.identity.google import MockGoogleIdentityVerifier
from datespot.adapter.sentiment.openai import RealChatSentimentAnalyzer
from datespot.application.live import SnapshotBroker
from datespot.domain.service import IdentityVerifier, SentimentAnalyzer
from tests.di import build_test_container


def test_unknown_component_is_rejected():
    with pytest.raises(ValueError, match="Unknown components"):
        build_test_container(unmock={"bluetooth"})


@pytest.mark.asyncio
async def test_unmocked_component_uses_production_provider():
    """Only the unmocked component should switch to its real implementation."""
    container = build_test_container(unmock={"sentiment"})
    try:
        assert isinstance(await container.get(SentimentAnalyzer), RealChatSentimentAnalyzer)
        assert isinstance(await container.get(IdentityVerifier), MockGoogleIdentityVerifier)
    finally:
        await container.close()


@pytest.mark.asyncio
async def test_broker_is_shared_across_requests():
    container = build_test_container()
    try:
        async with container() as first, container() as second:
            assert await first.get(SnapshotBroker) is await second.get(SnapshotBroker)
    finally:
        await container.close()
