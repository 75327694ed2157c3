"""Asset storage on the local filesystem, served under a public URL."""

import asyncio
import mimetypes
from pathlib import Path, PurePath
from typing import Optional
from uuid import uuid4

import logfire

from datespot.adapter.error import ProviderError
from datespot.domain.service.upload_service import AssetStore, ProgressCallback


def _stored_name(filename: str, content_type: str) -> str:
    suffix = PurePath(filename).suffix.lower() or (
        mimetypes.guess_extension(content_type) or ""
    )
    return f"{uuid4().hex}{suffix}"


class LocalAssetStore(AssetStore):
    """Base class for local asset stores.

    Provides type distinction for dependency injection.
    """

    pass


class RealLocalAssetStore(LocalAssetStore):
    """Writes uploads under ``media_root/spots`` in fixed-size chunks."""

    def __init__(
        self, media_root: Path, public_base_url: str, chunk_size: int = 64 * 1024
    ) -> None:
        self.directory = media_root / "spots"
        self.public_base_url = public_base_url.rstrip("/")
        self.chunk_size = chunk_size

    async def upload(
        self,
        data: bytes,
        filename: str,
        content_type: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> str:
        """Store the file and return its public URL.

        Raises:
            ProviderError: If the file can't be written
        """
        name = _stored_name(filename, content_type)
        path = self.directory / name
        total = len(data)

        try:
            await asyncio.to_thread(self.directory.mkdir, parents=True, exist_ok=True)
            with path.open("wb") as fh:
                for offset in range(0, total, self.chunk_size):
                    chunk = data[offset : offset + self.chunk_size]
                    await asyncio.to_thread(fh.write, chunk)
                    if on_progress:
                        on_progress((offset + len(chunk)) / total)
        except OSError as e:
            logfire.error("Asset write failed", path=str(path), error=str(e))
            path.unlink(missing_ok=True)
            raise ProviderError("storage", f"write failed: {e}")

        logfire.info("Asset stored", path=str(path), size=total)
        return f"{self.public_base_url}/spots/{name}"


class MockLocalAssetStore(LocalAssetStore):
    """Mock store keeping uploads in memory."""

    def __init__(
        self, public_base_url: str = "http://test/media", fail: bool = False
    ) -> None:
        self.public_base_url = public_base_url
        self.fail = fail
        self.assets: dict[str, bytes] = {}

    async def upload(
        self,
        data: bytes,
        filename: str,
        content_type: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> str:
        if on_progress:
            on_progress(0.5)
        if self.fail:
            raise ProviderError("storage", "mock failure")

        url = f"{self.public_base_url}/spots/{_stored_name(filename, content_type)}"
        self.assets[url] = data
        if on_progress:
            on_progress(1.0)
        return url
