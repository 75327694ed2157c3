"""Create spot use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from datespot.application.live import SnapshotBroker
from datespot.application.usecase.base import commit_and_publish
from datespot.domain.repository import UnitOfWork
from datespot.domain.service import (
    ImageUpload,
    SessionService,
    SpotDraft,
    SpotService,
)
from datespot.domain.value import Category, GeoPoint

from .common import SpotItem


class CreateSpotRequest(BaseModel):
    """Create spot request."""

    name: str
    location: str = ""
    category: Category = Category.ROMANTIC
    price_level: int = Field(default=2, ge=1, le=4)
    description: str
    tags: str | list[str] = ""
    image_url: Optional[str] = None
    image: Optional[ImageUpload] = None
    coordinates: Optional[GeoPoint] = None
    pet_friendly: bool = False
    initial_rating: int = Field(default=4, ge=1, le=5)
    token: Optional[str] = None


class CreateSpotUseCase:
    """Use case for adding a new spot."""

    def __init__(
        self,
        spot_service: SpotService,
        session_service: SessionService,
        unit_of_work: UnitOfWork,
        broker: SnapshotBroker,
    ) -> None:
        """Initialize create spot use case.

        Args:
            spot_service: Spot domain service
            session_service: Session domain service
            unit_of_work: Commit boundary of the request
            broker: Live snapshot broker
        """
        self.spot_service = spot_service
        self.session_service = session_service
        self.unit_of_work = unit_of_work
        self.broker = broker

    async def execute(self, request: CreateSpotRequest) -> SpotItem:
        """Execute create spot flow.

        Steps:
        1. Open the caller's session
        2. Gate, upload and save through the spot service
        3. Commit and publish the new spot list

        Raises:
            AuthRequiredError: If not signed in
            GateError: If the spot is rejected by the gate
            UploadError: If the image upload fails
            RemoteStoreError: If the store fails
        """
        session = await self.session_service.open_session(request.token)
        draft = SpotDraft(
            **request.model_dump(exclude={"image", "token"}),
        )

        with logfire.span("create_spot.execute", name=draft.name):
            spot = await self.spot_service.create_spot(
                draft, session, image=request.image
            )
            await commit_and_publish(self.unit_of_work, self.spot_service, self.broker)

        return SpotItem.from_spot(spot)
