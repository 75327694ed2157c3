"""Sentiment scoring infrastructure providers."""

from dishka import Scope, provide

from datespot.adapter.sentiment.openai import RealChatSentimentAnalyzer
from datespot.config import Settings
from datespot.domain.service import SentimentAnalyzer
from datespot.util.di.base import ProviderBase
from datespot.util.error import ConfigurationError


class SentimentProvider(ProviderBase):
    """Sentiment component base."""

    __mock_component__ = "sentiment"


class ProdSentimentProvider(SentimentProvider):
    """Production sentiment provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_sentiment_analyzer(self, settings: Settings) -> SentimentAnalyzer:
        """Provide chat-model sentiment analyzer.

        Raises:
            ConfigurationError: If the API key is not configured
        """
        if not settings.sentiment.api_key:
            raise ConfigurationError("Sentiment API key must be configured")

        return RealChatSentimentAnalyzer(
            base_url=settings.sentiment.base_url,
            api_key=settings.sentiment.api_key,
            model=settings.sentiment.model,
            timeout=settings.sentiment.timeout_seconds,
        )
