"""Spot use cases."""

from .common import SpotItem
from .create_spot import CreateSpotRequest, CreateSpotUseCase
from .get_spot import GetSpotRequest, GetSpotUseCase
from .list_spots import ListSpotsRequest, ListSpotsResponse, ListSpotsUseCase
from .seed_spots import SeedSpotsRequest, SeedSpotsResponse, SeedSpotsUseCase

__all__ = [
    "CreateSpotRequest",
    "CreateSpotUseCase",
    "GetSpotRequest",
    "GetSpotUseCase",
    "ListSpotsRequest",
    "ListSpotsResponse",
    "ListSpotsUseCase",
    "SeedSpotsRequest",
    "SeedSpotsResponse",
    "SeedSpotsUseCase",
    "SpotItem",
]
