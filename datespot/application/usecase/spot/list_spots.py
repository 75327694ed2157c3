"""List spots use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from datespot.domain.service import SessionService, SpotService
from datespot.domain.service.spot_view import SpotViewCriteria, derive_spots
from datespot.domain.value import Category, GeoPoint, SortKey, VoteType

from .common import SpotItem


class ListSpotsRequest(BaseModel):
    """List spots request."""

    search: str = ""
    category: Optional[Category] = None
    min_rating: float = Field(default=0, ge=0, le=5)
    sort_by: SortKey = SortKey.RATING
    user_location: Optional[GeoPoint] = None
    token: Optional[str] = None  # Session token (if signed in)


class ListSpotsResponse(BaseModel):
    """List spots response."""

    spots: list[SpotItem]
    total: int  # Size of the unfiltered list
    votes: dict[str, VoteType]  # Caller's vote index, empty when signed out


class ListSpotsUseCase:
    """Use case for the searched, filtered and sorted spot list."""

    def __init__(
        self, spot_service: SpotService, session_service: SessionService
    ) -> None:
        """Initialize list spots use case.

        Args:
            spot_service: Spot domain service
            session_service: Session domain service
        """
        self.spot_service = spot_service
        self.session_service = session_service

    async def execute(self, request: ListSpotsRequest) -> ListSpotsResponse:
        """Execute list spots flow.

        Args:
            request: Criteria and optional session token

        Returns:
            Derived spot list with the caller's votes
        """
        criteria = SpotViewCriteria(
            search_term=request.search,
            category=request.category,
            min_rating=request.min_rating,
            sort_by=request.sort_by,
            user_location=request.user_location,
        )

        with logfire.span(
            "list_spots.execute",
            search=criteria.search_term,
            category=criteria.category,
            sort_by=criteria.sort_by.value,
        ):
            session = await self.session_service.open_session(request.token)
            spots = await self.spot_service.list_spots()
            derived = derive_spots(spots, criteria)

            logfire.info("Spots listed", count=len(derived), total=len(spots))

            return ListSpotsResponse(
                spots=[
                    SpotItem.from_spot(
                        spot, criteria.user_location, session.vote_for(spot.id)
                    )
                    for spot in derived
                ],
                total=len(spots),
                votes={str(k): v for k, v in session.votes.items()},
            )
