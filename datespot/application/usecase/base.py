"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from datespot.application.live import SnapshotBroker
from datespot.domain.model import Session
from datespot.domain.repository import UnitOfWork
from datespot.domain.service import SpotService


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


async def commit_and_publish(
    unit_of_work: UnitOfWork,
    spot_service: SpotService,
    broker: SnapshotBroker,
    session: Optional[Session] = None,
) -> None:
    """Commit the request's writes, then push fresh snapshots to live clients.

    Publishing happens strictly after the commit, so live clients only ever
    see committed state. The session's vote index is published to that
    user's own connections when a session is given.
    """
    await unit_of_work.commit()
    broker.publish_spots(await spot_service.list_spots())

    if session is not None and session.user_id is not None:
        broker.publish_user_votes(session.user_id, dict(session.votes))
