"""Mock persistence providers for testing."""

from dishka import Scope, provide

from datespot.domain.repository import SpotRepository, UnitOfWork, VoteRepository
from datespot.persistence.repository.inmemory import (
    InMemorySpotRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from datespot.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so data survives between requests of one
    container; each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork()

    @provide(scope=Scope.REQUEST)
    def get_spot_repository(self, store: InMemoryStore) -> SpotRepository:
        """Provide in-memory spot repository."""
        return InMemorySpotRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, store: InMemoryStore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store)
