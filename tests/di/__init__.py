"""Mock providers for testing."""

from .geocoding import MockGeocodingProvider
from .identity import MockIdentityProvider
from .persistence import MockPersistenceProvider
from .sentiment import MockSentimentProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockGeocodingProvider",
    "MockIdentityProvider",
    "MockPersistenceProvider",
    "MockSentimentProvider",
    "MockStorageProvider",
    "build_test_container",
]
