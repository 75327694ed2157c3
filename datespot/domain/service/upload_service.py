"""Upload domain service for spot images."""

from typing import Callable, Optional

import logfire

from datespot.domain.error import ExternalServiceError, UploadError

from .base import Service

ProgressCallback = Callable[[float], None]


class AssetStore:
    """Binary asset storage interface."""

    async def upload(
        self,
        data: bytes,
        filename: str,
        content_type: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> str:
        """Store a blob and return a retrievable URL.

        Args:
            data: File contents
            filename: Original file name
            content_type: MIME type
            on_progress: Called with the uploaded fraction in [0, 1]

        Returns:
            Public URL of the stored asset

        Raises:
            ExternalServiceError: If storing fails
        """
        raise NotImplementedError


class UploadProgress:
    """Tracks the progress of one upload; reset to None when it aborts."""

    def __init__(self) -> None:
        self.fraction: Optional[float] = None

    def __call__(self, fraction: float) -> None:
        self.fraction = min(max(fraction, 0.0), 1.0)

    def reset(self) -> None:
        self.fraction = None


class UploadService(Service):
    """Domain service validating and storing uploaded images."""

    def __init__(
        self,
        asset_store: AssetStore,
        max_bytes: int,
        allowed_content_types: list[str],
    ) -> None:
        """Initialize upload service.

        Args:
            asset_store: Storage backend
            max_bytes: Largest accepted upload
            allowed_content_types: Accepted MIME types
        """
        self.asset_store = asset_store
        self.max_bytes = max_bytes
        self.allowed_content_types = allowed_content_types

    async def upload_image(
        self,
        data: bytes,
        filename: str,
        content_type: str,
        progress: Optional[UploadProgress] = None,
    ) -> str:
        """Validate and store an image.

        Args:
            data: File contents
            filename: Original file name
            content_type: MIME type
            progress: Optional progress tracker

        Returns:
            Public URL of the stored image

        Raises:
            UploadError: If the file is rejected or storing fails
        """
        progress = progress or UploadProgress()

        with logfire.span(
            "upload_image", filename=filename, content_type=content_type, size=len(data)
        ):
            if not data:
                raise UploadError("Uploaded file is empty")
            if len(data) > self.max_bytes:
                raise UploadError(
                    f"File is too large ({len(data)} bytes, limit {self.max_bytes})"
                )
            if content_type not in self.allowed_content_types:
                raise UploadError(f"Unsupported file type: {content_type}")

            progress(0.0)
            try:
                url = await self.asset_store.upload(
                    data, filename, content_type, on_progress=progress
                )
            except ExternalServiceError as e:
                progress.reset()
                logfire.error("Image upload failed", filename=filename, error=str(e))
                raise UploadError(f"Image upload failed: {e}")

            logfire.info("Image uploaded", filename=filename, url=url)
            return url
