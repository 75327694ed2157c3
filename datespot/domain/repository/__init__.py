"""Repository interfaces for the date spot domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from datespot.domain.repository.spot import SpotRepository
from datespot.domain.repository.unit_of_work import UnitOfWork
from datespot.domain.repository.vote import VoteRepository

__all__ = [
    "SpotRepository",
    "UnitOfWork",
    "VoteRepository",
]
