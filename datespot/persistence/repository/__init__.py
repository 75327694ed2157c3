"""PostgreSQL repository implementations."""

from datespot.persistence.repository.spot import PostgresSpotRepository
from datespot.persistence.repository.unit_of_work import PostgresUnitOfWork
from datespot.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresSpotRepository",
    "PostgresUnitOfWork",
    "PostgresVoteRepository",
]
