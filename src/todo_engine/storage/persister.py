# src/todo_engine/storage/persister.py

from __future__ import annotations

import logging
import threading

from ..core.codec import encode
from ..core.models import AppState
from ..core.ports import KeyValueStore

logger = logging.getLogger(__name__)


class StatePersister:
    """
    Store listener that writes every committed snapshot under one key.

    Writes are fire-and-forget with last-writer-wins semantics:
    - foreground mode writes synchronously inside the listener call
    - background mode keeps only the newest pending snapshot; a single worker
      thread writes it, and older pending snapshots are dropped

    Storage failures never reach the store: wrap flaky media in
    GuardedKeyValueStore, and anything else is logged here.
    """

    def __init__(self, kv: KeyValueStore, key: str, *, background: bool = True) -> None:
        self._kv = kv
        self._key = key
        self._background = bool(background)

        self._cond = threading.Condition()
        self._pending: AppState | None = None
        self._busy = False
        self._stop_requested = False
        self._worker: threading.Thread | None = None
        self.writes = 0

        if self._background:
            self._worker = threading.Thread(
                target=self._run, name="todo-persister", daemon=True
            )
            self._worker.start()

    def __call__(self, state: AppState) -> None:
        if not self._background:
            self._write(state)
            return
        with self._cond:
            if self._stop_requested:
                logger.debug("Persister stopped; dropping snapshot.")
                return
            self._pending = state
            self._cond.notify_all()

    def _write(self, state: AppState) -> None:
        try:
            self._kv.write(self._key, encode(state))
            self.writes += 1
        except Exception:
            logger.exception("Failed to persist state key=%s", self._key)

    def _run(self) -> None:
        logger.debug("Persister worker started.")
        while True:
            with self._cond:
                while self._pending is None and not self._stop_requested:
                    self._cond.wait()
                if self._pending is None:
                    logger.debug("Persister worker received stop signal.")
                    return
                state, self._pending = self._pending, None
                self._busy = True

            try:
                self._write(state)
            finally:
                with self._cond:
                    self._busy = False
                    self._cond.notify_all()

    def flush(self, timeout: float | None = 5.0) -> bool:
        """Block until nothing is pending or in flight. Returns False on timeout."""
        if not self._background:
            return True
        with self._cond:
            return self._cond.wait_for(
                lambda: self._pending is None and not self._busy, timeout=timeout
            )

    def close(self, timeout: float = 5.0) -> None:
        """Write whatever is pending, then stop the worker."""
        if self._worker is None:
            return
        with self._cond:
            if self._stop_requested:
                return
            self._stop_requested = True
            self._cond.notify_all()
        self._worker.join(timeout=timeout)
        logger.debug("Persister stopped after %d writes.", self.writes)
