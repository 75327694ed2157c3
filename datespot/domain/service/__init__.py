"""Domain services."""

from .base import Service
from .gate_service import SentimentAnalyzer, SpotCandidate, SpotGate
from .jwt_service import JWTService
from .location_service import LocationService, ReverseGeocoder
from .rating_service import RatingService
from .session_service import IdentityVerifier, SessionService
from .spot_service import ImageUpload, SpotDraft, SpotService, parse_tags
from .spot_view import SpotViewCriteria, derive_spots, haversine_km
from .upload_service import AssetStore, UploadProgress, UploadService
from .vote_service import VoteChange, VoteOutcome, VoteService

__all__ = [
    "AssetStore",
    "IdentityVerifier",
    "ImageUpload",
    "JWTService",
    "LocationService",
    "RatingService",
    "ReverseGeocoder",
    "SentimentAnalyzer",
    "Service",
    "SessionService",
    "SpotCandidate",
    "SpotDraft",
    "SpotGate",
    "SpotService",
    "SpotViewCriteria",
    "UploadProgress",
    "UploadService",
    "VoteChange",
    "VoteOutcome",
    "VoteService",
    "derive_spots",
    "haversine_km",
    "parse_tags",
]
