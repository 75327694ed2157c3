"""Rating routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from datespot.application.usecase.rating import SubmitRatingRequest, SubmitRatingUseCase
from datespot.application.usecase.spot import SpotItem

router = APIRouter(tags=["ratings"], route_class=DishkaRoute)


class SubmitRatingAPIRequest(BaseModel):
    """API request for rating a spot."""

    value: int  # Range is checked by the rating service


@router.post("/spots/{spot_id}/rating", response_model=SpotItem)
async def submit_rating(
    spot_id: str,
    request: SubmitRatingAPIRequest,
    submit_rating_use_case: FromDishka[SubmitRatingUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SpotItem:
    """Rate a spot from 1 to 5. Requires authentication."""
    return await submit_rating_use_case.execute(
        SubmitRatingRequest(spot_id=spot_id, value=request.value, token=auth_token)
    )
