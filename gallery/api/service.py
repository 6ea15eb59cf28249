"""Service layer — session operations for the API routes."""

from __future__ import annotations

import json
import logging
from typing import AsyncGenerator

from gallery.api.schemas import ScrollRequest, SessionSnapshot
from gallery.session import GallerySession, SessionStore

logger = logging.getLogger(__name__)


def open_session(store: SessionStore) -> GallerySession:
    """Create a session and start its initial load."""
    session = store.create()
    session.controller.on_ready()
    return session


def report_scroll(session: GallerySession, body: ScrollRequest) -> None:
    """Forward a scroll notification to the (debounced) controller."""
    session.controller.on_scroll(body.to_position())


def snapshot(session: GallerySession) -> SessionSnapshot:
    return SessionSnapshot(
        session_id=session.session_id,
        loader_hidden=session.surface.loader_hidden,
        in_flight=session.controller.in_flight,
        elements=session.surface.snapshot(),
    )


def _parse_event_id(last_event_id: str | None) -> int | None:
    try:
        return int(last_event_id) if last_event_id else None
    except ValueError:
        return None


async def stream_surface_events(
    session: GallerySession,
    last_event_id: str | None = None,
) -> AsyncGenerator[dict[str, str], None]:
    """Yield SSE-formatted surface events until the session closes.

    Append events carry the element index as their SSE id. A reconnecting
    EventSource sends it back as ``Last-Event-ID`` and only receives the
    elements after it.
    """
    after = _parse_event_id(last_event_id)
    queue = session.surface.subscribe(after=after)
    logger.debug("event stream opened", extra={"session_id": session.session_id, "after": after})
    try:
        while True:
            item = await queue.get()
            if item is None:
                break
            event, data = item
            message = {"event": event, "data": json.dumps(data)}
            if event == "append":
                message["id"] = str(data["index"])
            yield message
    finally:
        session.surface.unsubscribe(queue)
        logger.debug("event stream closed", extra={"session_id": session.session_id})
