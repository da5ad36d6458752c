# src/todo_engine/storage/memory.py

from __future__ import annotations

import threading


class MemoryKeyValueStore:
    """Process-local key/value storage (tests, throwaway sessions)."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def read(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def write(self, key: str, text: str) -> None:
        with self._lock:
            self._data[key] = text

    def snapshot(self) -> dict[str, str]:
        with self._lock:
            return dict(self._data)
