"""Geocoding use cases."""

from .reverse_geocode import (
    ReverseGeocodeRequest,
    ReverseGeocodeResponse,
    ReverseGeocodeUseCase,
)

__all__ = ["ReverseGeocodeRequest", "ReverseGeocodeResponse", "ReverseGeocodeUseCase"]
