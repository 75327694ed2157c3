"""Upload image use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from datespot.domain.error import AuthRequiredError
from datespot.domain.service import SessionService, UploadProgress, UploadService


class UploadImageRequest(BaseModel):
    """Upload image request."""

    data: bytes
    filename: str
    content_type: str
    token: Optional[str] = None


class UploadImageResponse(BaseModel):
    """Upload image response."""

    url: str
    size: int
    progress: float


class UploadImageUseCase:
    """Use case storing a spot image ahead of spot creation."""

    def __init__(
        self, upload_service: UploadService, session_service: SessionService
    ) -> None:
        self.upload_service = upload_service
        self.session_service = session_service

    async def execute(self, request: UploadImageRequest) -> UploadImageResponse:
        """Execute upload image flow.

        Raises:
            AuthRequiredError: If not signed in
            UploadError: If the file is rejected or storing fails
        """
        session = await self.session_service.open_session(request.token)
        if not session.is_authenticated:
            raise AuthRequiredError("upload images")

        progress = UploadProgress()
        url = await self.upload_service.upload_image(
            request.data, request.filename, request.content_type, progress
        )
        logfire.info("Image upload finished", user_id=session.user_id, url=url)

        return UploadImageResponse(
            url=url, size=len(request.data), progress=progress.fraction or 0.0
        )
