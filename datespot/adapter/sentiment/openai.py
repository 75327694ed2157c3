"""Sentiment scoring through an OpenAI-compatible chat completions API."""

import httpx
import logfire

from datespot.adapter.error import ProviderError
from datespot.domain.service.gate_service import SentimentAnalyzer

SYSTEM_PROMPT = (
    "You are a sentiment analysis bot. Analyze the sentiment of the following "
    "text and respond with a single number from -1 (very negative) to 1 "
    "(very positive). Do not include any other text."
)


class ChatSentimentAnalyzer(SentimentAnalyzer):
    """Base class for chat-model sentiment analyzers.

    Provides type distinction for dependency injection.
    """

    pass


class RealChatSentimentAnalyzer(ChatSentimentAnalyzer):
    """Scores text by asking a chat model for a single number."""

    def __init__(
        self, base_url: str, api_key: str, model: str, timeout: float = 10.0
    ) -> None:
        """Initialize analyzer.

        Args:
            base_url: API base URL, e.g. https://api.openai.com/v1
            api_key: Bearer token
            model: Chat model name
            timeout: Request timeout in seconds
        """
        self.url = f"{base_url.rstrip('/')}/chat/completions"
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    async def score(self, text: str) -> float:
        """Score text from -1 to 1.

        Raises:
            ProviderError: If the request fails or the reply isn't a number
        """
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ],
            "max_tokens": 5,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
        except httpx.HTTPError as e:
            logfire.error("Sentiment request HTTP error", error=str(e))
            raise ProviderError("sentiment", f"HTTP error: {e}")

        if response.status_code != 200:
            logfire.error(
                "Sentiment request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError("sentiment", f"status {response.status_code}")

        try:
            content = response.json()["choices"][0]["message"]["content"]
            return float((content or "").strip())
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logfire.warn("Unparseable sentiment reply", body=response.text)
            raise ProviderError("sentiment", f"unparseable reply: {e}")


class MockChatSentimentAnalyzer(ChatSentimentAnalyzer):
    """Mock analyzer for testing.

    Returns a fixed score, or raises a provider error when ``fail`` is set.
    Scored texts are recorded in ``calls``.
    """

    def __init__(self, score: float = 0.8, fail: bool = False) -> None:
        self.fixed_score = score
        self.fail = fail
        self.calls: list[str] = []

    async def score(self, text: str) -> float:
        self.calls.append(text)
        if self.fail:
            raise ProviderError("sentiment", "mock failure")
        return self.fixed_score
