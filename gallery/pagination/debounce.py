"""Trailing-edge debounce on the running event loop."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Run *action* once calls have stopped arriving for *wait* seconds.

    Each call cancels the pending execution and reschedules it, so one quiet
    period yields exactly one execution, with the arguments of the last call.
    Must be called from inside a running event loop.
    """

    def __init__(self, action: Callable[..., Any], wait: float) -> None:
        if wait < 0:
            raise ValueError("wait must be non-negative")
        self._action = action
        self._wait = wait
        self._handle: asyncio.TimerHandle | None = None

    @property
    def wait(self) -> float:
        return self._wait

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._wait, self._fire, args, kwargs)

    def cancel(self) -> None:
        """Drop the pending execution, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self._handle = None
        try:
            self._action(*args, **kwargs)
        except Exception:
            # Nothing awaits a timer callback; log here instead of the loop's
            # generic exception handler.
            logger.exception("debounced action failed")
