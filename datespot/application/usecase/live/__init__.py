"""Live feed use cases."""

from .open_feed import OpenLiveFeedRequest, OpenLiveFeedUseCase

__all__ = ["OpenLiveFeedRequest", "OpenLiveFeedUseCase"]
