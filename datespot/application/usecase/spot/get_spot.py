"""Get spot use case."""

from typing import Optional

from pydantic import BaseModel

from datespot.domain.service import SessionService, SpotService
from datespot.domain.value import GeoPoint, SpotId

from .common import SpotItem


class GetSpotRequest(BaseModel):
    """Get spot request."""

    spot_id: str
    user_location: Optional[GeoPoint] = None
    token: Optional[str] = None


class GetSpotUseCase:
    """Use case for fetching a single spot."""

    def __init__(
        self, spot_service: SpotService, session_service: SessionService
    ) -> None:
        self.spot_service = spot_service
        self.session_service = session_service

    async def execute(self, request: GetSpotRequest) -> SpotItem:
        """Execute get spot flow.

        Raises:
            NotFoundError: If the spot doesn't exist
        """
        spot = await self.spot_service.get_spot(SpotId(request.spot_id))
        session = await self.session_service.open_session(request.token)
        return SpotItem.from_spot(spot, request.user_location, session.vote_for(spot.id))
