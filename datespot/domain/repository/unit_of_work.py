"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Commit boundary shared by the repositories of one request.

    Use cases commit explicitly before publishing side effects (live
    snapshots) so subscribers never observe uncommitted state.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit all pending repository writes."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all pending repository writes."""
        pass
