# src/todo_engine/connectors/announcer.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class Announcer:
    """
    Short-lived status message ("Added task: ...") that clears itself.

    The pending clear timer is an explicit field: a new announcement cancels
    it before arming a fresh one, and cancel() stops it on shutdown.
    """

    def __init__(
        self,
        seconds: float = 1.2,
        *,
        timer_factory: Callable[[float, Callable[[], None]], threading.Timer] = threading.Timer,
    ) -> None:
        self.seconds = max(0.0, float(seconds))
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._message = ""
        self._timer: threading.Timer | None = None
        self._generation = 0

    @property
    def message(self) -> str:
        with self._lock:
            return self._message

    def announce(self, message: str) -> None:
        with self._lock:
            self._cancel_locked()
            self._message = message
            self._generation += 1
            if not message:
                return
            generation = self._generation
            timer = self._timer_factory(self.seconds, lambda: self._expire(generation))
            timer.daemon = True
            self._timer = timer
            timer.start()
        logger.debug("Announce: %s", message)

    def _expire(self, generation: int) -> None:
        with self._lock:
            # A newer announcement owns the slot now.
            if generation != self._generation:
                return
            self._message = ""
            self._timer = None

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()
            self._message = ""
            self._generation += 1
