"""One fetch-and-render cycle."""

from __future__ import annotations

import logging
from typing import Protocol

from gallery.photos.errors import PhotoFetchError, RequestFailed
from gallery.photos.models import Photo
from gallery.render.elements import ErrorMessage, PhotoTile
from gallery.render.surface import RenderSurface

logger = logging.getLogger(__name__)


class PhotoSource(Protocol):
    """Protocol for photo sources."""

    async def random_photos(self, count: int = 10, query: str = "beach") -> list[Photo]: ...


class FetchRenderPipeline:
    """Fetches one batch of photos and appends it to the render surface.

    Failures never escape :meth:`run`: they are logged with their kind and
    shown to the user as a single generic error element.
    """

    def __init__(
        self,
        source: PhotoSource,
        surface: RenderSurface,
        count: int = 10,
        query: str = "beach",
    ) -> None:
        self._source = source
        self._surface = surface
        self._count = count
        self._query = query

    async def run(self) -> int:
        """Execute one cycle and return the number of photos appended."""
        self._surface.show_loader()
        try:
            photos = await self._source.random_photos(count=self._count, query=self._query)
            for photo in photos:
                self._surface.append(PhotoTile.from_photo(photo))
            logger.info("photos rendered", extra={"photo_count": len(photos), "query": self._query})
            return len(photos)
        except PhotoFetchError as exc:
            logger.error(
                "error fetching photos",
                extra={
                    "error_kind": exc.kind,
                    "status": exc.status if isinstance(exc, RequestFailed) else None,
                    "query": self._query,
                },
                exc_info=True,
            )
            self._surface.append(ErrorMessage())
            return 0
        finally:
            self._surface.hide_loader()
