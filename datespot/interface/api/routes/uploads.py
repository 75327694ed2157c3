"""Upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, File, UploadFile, status

from datespot.application.usecase.upload import (
    UploadImageRequest,
    UploadImageResponse,
    UploadImageUseCase,
)

router = APIRouter(prefix="/uploads", tags=["uploads"], route_class=DishkaRoute)


@router.post(
    "/images", response_model=UploadImageResponse, status_code=status.HTTP_201_CREATED
)
async def upload_image(
    upload_image_use_case: FromDishka[UploadImageUseCase],
    file: UploadFile = File(...),
    auth_token: str | None = Cookie(default=None),
) -> UploadImageResponse:
    """Upload a spot image and get back its public URL.

    Requires authentication. Pass the returned URL as ``image_url`` when
    creating the spot.
    """
    data = await file.read()
    return await upload_image_use_case.execute(
        UploadImageRequest(
            data=data,
            filename=file.filename or "upload",
            content_type=file.content_type or "application/octet-stream",
            token=auth_token,
        )
    )
