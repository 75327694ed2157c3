"""Infrastructure providers."""

# Import bases
from .geocoding import GeocodingProvider
from .identity import IdentityProvider
from .persistence import PersistenceProvider
from .sentiment import SentimentProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .geocoding import ProdGeocodingProvider  # noqa: F401
from .identity import ProdIdentityProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .sentiment import ProdSentimentProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "GeocodingProvider",
    "IdentityProvider",
    "PersistenceProvider",
    "ProdGeocodingProvider",
    "ProdIdentityProvider",
    "ProdPersistenceProvider",
    "ProdSentimentProvider",
    "ProdStorageProvider",
    "SentimentProvider",
    "StorageProvider",
]
