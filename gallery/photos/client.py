"""Unsplash random-photo client."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from .errors import DecodeFailed, NetworkError, RequestFailed
from .models import Photo, PhotoList

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.unsplash.com"


class UnsplashClient:
    """Fetches batches of random photos for a search term.

    The HTTP client is owned by the caller so one connection pool can be
    shared by every gallery session.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        access_key: str,
        api_url: str = DEFAULT_API_URL,
    ) -> None:
        self._http = http
        self._access_key = access_key
        self._endpoint = f"{api_url.rstrip('/')}/photos/random/"

    async def random_photos(self, count: int = 10, query: str = "beach") -> list[Photo]:
        """Return *count* random photos matching *query*, in response order.

        Raises :class:`RequestFailed`, :class:`DecodeFailed` or
        :class:`NetworkError`.
        """
        params = {"client_id": self._access_key, "count": count, "query": query}
        logger.debug("requesting photos", extra={"count": count, "query": query})
        try:
            response = await self._http.get(self._endpoint, params=params)
        except httpx.DecodingError as exc:
            raise DecodeFailed(f"undecodable response body: {exc}") from exc
        except httpx.RequestError as exc:
            raise NetworkError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise RequestFailed(response.status_code)

        try:
            photos = PhotoList.validate_json(response.content)
        except ValidationError as exc:
            raise DecodeFailed(f"unexpected response body: {exc.error_count()} validation errors") from exc

        logger.debug("photos received", extra={"photo_count": len(photos), "query": query})
        return photos
