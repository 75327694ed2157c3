"""Seed spots use case."""

from pydantic import BaseModel

from datespot.application.live import SnapshotBroker
from datespot.application.usecase.base import commit_and_publish
from datespot.domain.repository import UnitOfWork
from datespot.domain.service import SpotService
from datespot.persistence.seed import initial_spots


class SeedSpotsRequest(BaseModel):
    """Seed spots request."""

    pass


class SeedSpotsResponse(BaseModel):
    """Seed spots response."""

    seeded: int


class SeedSpotsUseCase:
    """Use case loading the initial spots into an empty store."""

    def __init__(
        self,
        spot_service: SpotService,
        unit_of_work: UnitOfWork,
        broker: SnapshotBroker,
    ) -> None:
        self.spot_service = spot_service
        self.unit_of_work = unit_of_work
        self.broker = broker

    async def execute(self, request: SeedSpotsRequest) -> SeedSpotsResponse:
        seeded = await self.spot_service.seed_if_empty(initial_spots())
        if seeded:
            await commit_and_publish(self.unit_of_work, self.spot_service, self.broker)
        return SeedSpotsResponse(seeded=seeded)
