# src/todo_engine/core/store.py

"""
Single-writer host for the reducer.

Callers submit Action values through dispatch(); the store applies them one at
a time under a lock and publishes each changed snapshot to subscribers
(persistence, rendering, ...). The store never raises out of dispatch():
a failing subscriber is logged and the remaining subscribers still run.

Hydration ordering:
- A store created with hold_until_hydrated=True buffers every action that
  arrives before hydrate() and replays them, in order, right after it.
  Without that, a late hydration could overwrite work done in the meantime.
- hydrate() takes effect at most once.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from .actions import Action, Hydrate
from .ids import generate_id, now_ms
from .models import EMPTY_STATE, AppState
from .ports import Clock, IdFactory, StateListener
from .reducer import reduce

logger = logging.getLogger(__name__)


class TodoStore:
    def __init__(
        self,
        initial: AppState = EMPTY_STATE,
        *,
        new_id: IdFactory = generate_id,
        now: Clock = now_ms,
        hold_until_hydrated: bool = False,
    ) -> None:
        self._state = initial
        self._new_id = new_id
        self._now = now
        self._lock = threading.RLock()
        self._listeners: list[StateListener] = []
        self._hydrated = not hold_until_hydrated
        self._hydrate_used = False
        self._pending: list[Action] = []

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def hydrated(self) -> bool:
        return self._hydrated

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> AppState:
        with self._lock:
            if not self._hydrated:
                self._pending.append(action)
                logger.debug("Buffered %s until hydration", getattr(action, "type", action))
                return self._state
            return self._apply(action)

    def hydrate(self, raw: Any) -> AppState:
        """
        Load persisted data (text or parsed value) once, then release buffered actions.

        Subsequent calls are ignored.
        """
        with self._lock:
            if self._hydrate_used:
                logger.debug("Store already hydrated; ignoring.")
                return self._state
            self._hydrate_used = True

            before = self._state
            if raw is not None:
                self._apply(Hydrate(payload=raw))
            if self._state is before:
                logger.info("No usable stored state; starting empty.")
            else:
                logger.info("Hydrated %d todos (filter=%s).", len(self._state.todos), self._state.filter)

            self._hydrated = True
            pending, self._pending = self._pending, []
            for action in pending:
                self._apply(action)
            return self._state

    def _apply(self, action: Action) -> AppState:
        prev = self._state
        nxt = reduce(prev, action, new_id=self._new_id, now=self._now)
        if nxt is prev:
            return prev

        self._state = nxt
        for listener in list(self._listeners):
            try:
                listener(nxt)
            except Exception:
                logger.exception("State listener %r failed", listener)
        return nxt
