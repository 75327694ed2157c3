"""Asset storage infrastructure providers."""

from dishka import Scope, provide

from datespot.adapter.storage.local import RealLocalAssetStore
from datespot.config import Settings
from datespot.domain.service import AssetStore
from datespot.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider (local media directory)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_asset_store(self, settings: Settings) -> AssetStore:
        """Provide local filesystem asset store."""
        return RealLocalAssetStore(
            media_root=settings.storage.media_root,
            public_base_url=settings.storage.public_base_url,
            chunk_size=settings.storage.chunk_size,
        )
