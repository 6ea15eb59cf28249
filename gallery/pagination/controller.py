"""Decides when to fetch the next batch and keeps runs from overlapping."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from .debounce import Debouncer

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD_PX = 1000
DEFAULT_DEBOUNCE_SECONDS = 0.2


@dataclass(frozen=True)
class ScrollPosition:
    """Viewport metrics reported by the page."""

    viewport_height: float
    scroll_offset: float
    document_height: float

    def near_bottom(self, threshold_px: float = DEFAULT_THRESHOLD_PX) -> bool:
        return self.viewport_height + self.scroll_offset >= self.document_height - threshold_px


class PaginationController:
    """Owns the in-flight flag for one gallery session.

    ``run`` is the pipeline entry point. It is only ever started from
    :meth:`_trigger`, which checks and sets the flag before the run task is
    scheduled, so no two runs overlap.
    """

    def __init__(
        self,
        run: Callable[[], Awaitable[Any]],
        threshold_px: float = DEFAULT_THRESHOLD_PX,
        debounce_wait: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self._run = run
        self._threshold_px = threshold_px
        self._in_flight = False
        self._task: asyncio.Task[Any] | None = None
        self.on_scroll = Debouncer(self._handle_scroll, debounce_wait)

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def on_ready(self) -> asyncio.Task[Any] | None:
        """Initial load, once the surface exists."""
        return self._trigger()

    def _handle_scroll(self, position: ScrollPosition) -> asyncio.Task[Any] | None:
        if not position.near_bottom(self._threshold_px):
            return None
        if self._in_flight:
            logger.debug("scroll dropped, fetch already in flight")
            return None
        logger.info("loading more photos")
        return self._trigger()

    def _trigger(self) -> asyncio.Task[Any] | None:
        if self._in_flight:
            return None
        self._in_flight = True
        try:
            task = asyncio.create_task(self._guarded_run())
        except BaseException:
            self._in_flight = False
            raise
        self._task = task
        return task

    async def _guarded_run(self) -> None:
        try:
            await self._run()
        finally:
            if self._task is None or self._task is asyncio.current_task():
                self._in_flight = False
                self._task = None

    async def wait_idle(self) -> None:
        """Wait for the outstanding run, if any."""
        task = self._task
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    def close(self) -> None:
        """Cancel pending scroll handling and any outstanding run."""
        self.on_scroll.cancel()
        if self._task is not None:
            self._task.cancel()
            self._task = None
        # A task cancelled before its first step never reaches its finally.
        self._in_flight = False
