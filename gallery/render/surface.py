"""Render surface: image container plus loader, with change subscribers."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from .elements import Element

logger = logging.getLogger(__name__)

# A queued ``None`` tells a subscriber the surface is gone.
SurfaceEvent = tuple[str, dict[str, Any]]


class RenderSurface(Protocol):
    """What the fetch-and-render pipeline needs from the page."""

    def append(self, element: Element) -> None: ...

    def show_loader(self) -> None: ...

    def hide_loader(self) -> None: ...


@dataclass
class DocumentSurface:
    """In-memory page state for one gallery session.

    Elements are only ever appended. Every mutation is pushed, synchronously,
    to each subscriber queue so the order seen by subscribers matches the
    order of mutations.
    """

    elements: list[Element] = field(default_factory=list)
    loader_hidden: bool = True
    _subscribers: list[asyncio.Queue[SurfaceEvent | None]] = field(default_factory=list, repr=False)
    _closed: bool = field(default=False, repr=False)

    def append(self, element: Element) -> None:
        self.elements.append(element)
        self._publish("append", _append_payload(len(self.elements) - 1, element))

    def show_loader(self) -> None:
        self._set_loader(hidden=False)

    def hide_loader(self) -> None:
        self._set_loader(hidden=True)

    def _set_loader(self, hidden: bool) -> None:
        self.loader_hidden = hidden
        self._publish("loader", {"hidden": hidden})

    def subscribe(self, after: int | None = None) -> asyncio.Queue[SurfaceEvent | None]:
        """Return a queue primed with the current state, then live events.

        Elements up to and including index *after* are not replayed, so a
        reconnecting reader only receives what it has not seen yet.
        """
        start = 0 if after is None else max(after + 1, 0)
        queue: asyncio.Queue[SurfaceEvent | None] = asyncio.Queue()
        queue.put_nowait(("loader", {"hidden": self.loader_hidden}))
        for index in range(start, len(self.elements)):
            queue.put_nowait(("append", _append_payload(index, self.elements[index])))
        if self._closed:
            queue.put_nowait(None)
        else:
            self._subscribers.append(queue)
        logger.debug("surface subscriber added", extra={"replayed": max(len(self.elements) - start, 0)})
        return queue

    def unsubscribe(self, queue: asyncio.Queue[SurfaceEvent | None]) -> None:
        if queue in self._subscribers:
            self._subscribers.remove(queue)

    def close(self) -> None:
        """Signal end-of-stream to every subscriber."""
        self._closed = True
        for queue in self._subscribers:
            queue.put_nowait(None)
        self._subscribers.clear()

    def snapshot(self) -> list[str]:
        return [element.to_html() for element in self.elements]

    def _publish(self, event: str, data: dict[str, Any]) -> None:
        for queue in self._subscribers:
            queue.put_nowait((event, data))


def _append_payload(index: int, element: Element) -> dict[str, Any]:
    return {"index": index, "kind": element.kind, "html": element.to_html()}
