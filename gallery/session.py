"""Gallery sessions — one per page view."""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone

import httpx

from gallery.config import Settings, check_access_key
from gallery.pagination import FetchRenderPipeline, PaginationController
from gallery.photos import UnsplashClient
from gallery.render import DocumentSurface

logger = logging.getLogger(__name__)


def _generate_session_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class GallerySession:
    """The surface and controller backing one open gallery page."""

    session_id: str
    surface: DocumentSurface
    controller: PaginationController
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def close(self) -> None:
        self.controller.close()
        self.surface.close()


def build_session(settings: Settings, http: httpx.AsyncClient) -> GallerySession:
    """Wire client, pipeline, controller and surface for a new page view."""
    surface = DocumentSurface()
    client = UnsplashClient(
        http,
        access_key=settings.unsplash_access_key,
        api_url=settings.unsplash_api_url,
    )
    pipeline = FetchRenderPipeline(
        client,
        surface,
        count=settings.photo_count,
        query=settings.photo_query,
    )
    controller = PaginationController(
        pipeline.run,
        threshold_px=settings.scroll_threshold_px,
        debounce_wait=settings.scroll_debounce_seconds,
    )
    return GallerySession(
        session_id=_generate_session_id(),
        surface=surface,
        controller=controller,
    )


class SessionStore:
    """Open sessions by id. The oldest session is closed when full."""

    def __init__(self, settings: Settings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http
        self._sessions: OrderedDict[str, GallerySession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> GallerySession:
        check_access_key(self._settings)
        while len(self._sessions) >= self._settings.max_sessions:
            _, oldest = self._sessions.popitem(last=False)
            logger.info("session evicted", extra={"session_id": oldest.session_id})
            oldest.close()

        session = build_session(self._settings, self._http)
        self._sessions[session.session_id] = session
        logger.info("session opened", extra={"session_id": session.session_id, "open_sessions": len(self._sessions)})
        return session

    def get(self, session_id: str) -> GallerySession | None:
        return self._sessions.get(session_id)

    def close(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.close()
        logger.info("session closed", extra={"session_id": session_id, "open_sessions": len(self._sessions)})
        return True

    def close_all(self) -> None:
        for session_id in list(self._sessions):
            self.close(session_id)
