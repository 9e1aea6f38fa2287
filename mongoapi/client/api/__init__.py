"""Public client API."""

from .client import MongoApiClient
from .endpoints import ENDPOINTS

__all__ = [
    "MongoApiClient",
    "ENDPOINTS",
]
