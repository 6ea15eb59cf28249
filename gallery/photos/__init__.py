"""Photo API access: models, client and failure kinds."""

from __future__ import annotations

from .client import UnsplashClient
from .errors import DecodeFailed, NetworkError, PhotoFetchError, RequestFailed
from .models import Photo, PhotoLinks, PhotoList, PhotoUrls

__all__ = [
    "DecodeFailed",
    "NetworkError",
    "Photo",
    "PhotoFetchError",
    "PhotoLinks",
    "PhotoList",
    "PhotoUrls",
    "RequestFailed",
    "UnsplashClient",
]
