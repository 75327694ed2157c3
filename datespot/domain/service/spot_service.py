"""Spot domain service."""

from typing import Optional, Sequence
from uuid import uuid4

import logfire
from pydantic import Field
from sqlalchemy.exc import SQLAlchemyError

from datespot.domain.error import AuthRequiredError, NotFoundError, RemoteStoreError
from datespot.domain.model import Session, Spot
from datespot.domain.repository import SpotRepository
from datespot.domain.value import DEFAULT_TAG, Category, GeoPoint, SpotId
from datespot.domain.value.common import ValueObject

from .base import Service
from .gate_service import SpotCandidate, SpotGate
from .location_service import LocationService
from .upload_service import UploadProgress, UploadService


class ImageUpload(ValueObject):
    """Image file submitted together with a new spot."""

    data: bytes
    filename: str
    content_type: str


class SpotDraft(ValueObject):
    """User input for a new spot."""

    name: str
    location: str = ""
    category: Category = Category.ROMANTIC
    price_level: int = Field(default=2, ge=1, le=4)
    description: str
    tags: str | list[str] = ""
    image_url: Optional[str] = None
    coordinates: Optional[GeoPoint] = None
    pet_friendly: bool = False
    initial_rating: int = Field(default=4, ge=1, le=5)


def parse_tags(tags: str | Sequence[str]) -> list[str]:
    """Split comma-separated tags, trim them and drop empties.

    Falls back to the default tag when nothing is left.
    """
    parts = tags.split(",") if isinstance(tags, str) else list(tags)
    cleaned = [tag.strip() for tag in parts if tag.strip()]
    return cleaned or [DEFAULT_TAG]


class SpotService(Service):
    """Domain service for spot operations."""

    def __init__(
        self,
        spot_repository: SpotRepository,
        gate: SpotGate,
        location_service: LocationService,
        upload_service: UploadService,
    ) -> None:
        """Initialize spot service.

        Args:
            spot_repository: Spot repository
            gate: New-spot gate
            location_service: Reverse geocoding for blank locations
            upload_service: Image uploads
        """
        self.spot_repository = spot_repository
        self.gate = gate
        self.location_service = location_service
        self.upload_service = upload_service

    async def get_spot(self, spot_id: SpotId) -> Spot:
        """Get a spot by ID.

        Raises:
            NotFoundError: If the spot doesn't exist
        """
        with logfire.span("spot_service.get_spot", spot_id=spot_id):
            try:
                spot = await self.spot_repository.find_by_id(spot_id)
            except SQLAlchemyError as e:
                raise RemoteStoreError("get_spot", str(e))

            if not spot:
                logfire.warn("Spot not found", spot_id=spot_id)
                raise NotFoundError("Spot", spot_id)
            return spot

    async def list_spots(self) -> list[Spot]:
        """List every spot, newest first."""
        try:
            return await self.spot_repository.find_all()
        except SQLAlchemyError as e:
            raise RemoteStoreError("list_spots", str(e))

    async def create_spot(
        self,
        draft: SpotDraft,
        session: Session,
        image: Optional[ImageUpload] = None,
        progress: Optional[UploadProgress] = None,
    ) -> Spot:
        """Gate and persist a new spot.

        Steps:
        1. Require a signed-in user
        2. Fill a blank location from the coordinates, if any
        3. Run the gate (required fields, duplicate, sentiment)
        4. Upload the image, if one was attached
        5. Save, counting the author's initial rating as the first vote

        Args:
            draft: User input
            session: Caller's session
            image: Optional image file to upload
            progress: Optional upload progress tracker

        Returns:
            Created spot

        Raises:
            AuthRequiredError: If the session is anonymous
            GateError: If a gate check fails
            UploadError: If the image upload fails
            RemoteStoreError: If the store fails
        """
        if not session.is_authenticated or session.user is None:
            raise AuthRequiredError("add a new date spot")

        with logfire.span(
            "spot_service.create_spot", name=draft.name, user_id=session.user_id
        ):
            location = draft.location.strip()
            if not location and draft.coordinates is not None:
                location = await self.location_service.describe(draft.coordinates)
                logfire.info("Location filled from coordinates", location=location)

            candidate = SpotCandidate(
                name=draft.name.strip(),
                location=location,
                description=draft.description.strip(),
                coordinates=draft.coordinates,
            )
            existing = await self.list_spots()
            await self.gate.validate_new_spot(candidate, existing)

            image_url = draft.image_url or None
            if image is not None:
                image_url = await self.upload_service.upload_image(
                    image.data, image.filename, image.content_type, progress
                )

            spot = Spot(
                id=SpotId(str(uuid4())),
                name=candidate.name,
                location=candidate.location,
                category=draft.category,
                price_level=draft.price_level,
                description=candidate.description,
                rating=float(draft.initial_rating),
                total_votes=1,
                upvotes=0,
                downvotes=0,
                tags=parse_tags(draft.tags),
                image_url=image_url,
                coordinates=draft.coordinates,
                pet_friendly=draft.pet_friendly,
                created_by=session.user.user_id,
                created_by_display_name=session.user.display_name or "Anonymous",
                created_by_photo_url=session.user.avatar_url,
            )

            try:
                saved = await self.spot_repository.save(spot)
            except SQLAlchemyError as e:
                logfire.error("Spot save failed", name=spot.name, error=str(e))
                raise RemoteStoreError("create_spot", str(e))

            logfire.info("Spot created", spot_id=saved.id, name=saved.name)
            return saved

    async def seed_if_empty(self, spots: Sequence[Spot]) -> int:
        """Load the given spots when the store holds none.

        Returns:
            Number of spots written
        """
        with logfire.span("spot_service.seed_if_empty"):
            try:
                if await self.spot_repository.count() > 0:
                    return 0
                for spot in spots:
                    await self.spot_repository.save(spot)
            except SQLAlchemyError as e:
                raise RemoteStoreError("seed_spots", str(e))

            logfire.info("Initialized with sample data", count=len(spots))
            return len(spots)
