# src/todo_engine/storage/guarded.py

from __future__ import annotations

import logging

from ..core.ports import KeyValueStore

logger = logging.getLogger(__name__)


class GuardedKeyValueStore:
    """
    Wraps a storage medium that may be missing or failing.

    - inner=None means "no storage here": reads are absent, writes are skipped
    - any exception from the inner store is logged and swallowed
    """

    def __init__(self, inner: KeyValueStore | None) -> None:
        self._inner = inner
        if inner is None:
            logger.info("No storage medium available; state will not persist.")

    @property
    def available(self) -> bool:
        return self._inner is not None

    def read(self, key: str) -> str | None:
        if self._inner is None:
            return None
        try:
            value = self._inner.read(key)
        except Exception:
            logger.warning("Storage read failed key=%s; treating as absent.", key, exc_info=True)
            return None
        return value if isinstance(value, str) else None

    def write(self, key: str, text: str) -> None:
        if self._inner is None:
            return
        try:
            self._inner.write(key, text)
        except Exception:
            logger.warning("Storage write failed key=%s; skipped.", key, exc_info=True)
