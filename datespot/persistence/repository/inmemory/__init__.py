"""In-memory repository implementations for testing."""

from .spot import InMemorySpotRepository
from .store import InMemoryStore
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemorySpotRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "InMemoryVoteRepository",
]
