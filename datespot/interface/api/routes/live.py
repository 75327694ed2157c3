"""Live spot feed over a websocket.

Each connection gets its own subscription and one consumer task that turns
broker snapshots into derived views. Messages from the client replace the
view criteria:

    {"search": "park", "category": "outdoor", "min_rating": 3,
     "sort_by": "distance", "lat": 57.7, "lng": 11.97}
"""

import asyncio
import json
from typing import Optional

import logfire
from dishka import AsyncContainer
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from datespot.application.live import CriteriaChanged, LiveFrame, LiveSpotView
from datespot.application.usecase.live import OpenLiveFeedRequest, OpenLiveFeedUseCase
from datespot.application.usecase.spot import SpotItem
from datespot.domain.service.spot_view import SpotViewCriteria
from datespot.domain.value import Category, GeoPoint, SortKey, VoteType

router = APIRouter(tags=["live"])


class LiveCriteriaMessage(BaseModel):
    """Criteria sent by a live client."""

    search: str = ""
    category: Optional[Category] = None
    min_rating: float = Field(default=0, ge=0, le=5)
    sort_by: SortKey = SortKey.RATING
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lng: Optional[float] = Field(default=None, ge=-180, le=180)

    def to_criteria(self) -> SpotViewCriteria:
        location = (
            GeoPoint(lat=self.lat, lng=self.lng)
            if self.lat is not None and self.lng is not None
            else None
        )
        return SpotViewCriteria(
            search_term=self.search,
            category=self.category,
            min_rating=self.min_rating,
            sort_by=self.sort_by,
            user_location=location,
        )


class LiveSnapshotMessage(BaseModel):
    """Derived view sent to a live client."""

    type: str = "snapshot"
    spots: list[SpotItem]
    votes: dict[str, VoteType]


def to_message(frame: LiveFrame) -> LiveSnapshotMessage:
    location = frame.criteria.user_location
    return LiveSnapshotMessage(
        spots=[
            SpotItem.from_spot(spot, location, frame.votes.get(spot.id))
            for spot in frame.spots
        ],
        votes={str(k): v for k, v in frame.votes.items()},
    )


@router.websocket("/spots/live")
async def live_spots(websocket: WebSocket) -> None:
    """Stream the derived spot view, re-sent after every committed change."""
    await websocket.accept()

    container: AsyncContainer = websocket.app.state.dishka_container
    token = websocket.cookies.get("auth_token")

    async with container() as request_container:
        open_feed = await request_container.get(OpenLiveFeedUseCase)
        subscription = await open_feed.execute(OpenLiveFeedRequest(token=token))

    async def emit(frame: LiveFrame) -> None:
        await websocket.send_text(to_message(frame).model_dump_json())

    view = LiveSpotView()
    consumer = asyncio.create_task(view.run(subscription, emit))
    logfire.info("Live client connected", user_id=subscription.user_id)

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = LiveCriteriaMessage.model_validate(json.loads(raw))
            except (json.JSONDecodeError, PydanticValidationError) as e:
                logfire.warn("Ignoring invalid live criteria", error=str(e))
                continue
            subscription.push(CriteriaChanged(criteria=message.to_criteria()))
    except WebSocketDisconnect:
        logfire.info("Live client disconnected", user_id=subscription.user_id)
    finally:
        consumer.cancel()
        # Send failures after a disconnect end the consumer too
        await asyncio.gather(consumer, return_exceptions=True)
        subscription.close()
