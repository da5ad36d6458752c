# src/todo_engine/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the storage medium from settings (guarded: a broken medium degrades
  to "nothing persisted" instead of crashing),
- builds the store, hydrates it from storage before anything else runs,
- attaches the persister and the announcer.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.announcer import Announcer
from ..core.ports import KeyValueStore
from ..core.store import TodoStore
from ..session import Session
from ..storage.guarded import GuardedKeyValueStore
from ..storage.json_file import JsonFileKeyValueStore
from ..storage.memory import MemoryKeyValueStore
from ..storage.persister import StatePersister
from ..storage.sqlite import SQLiteKeyValueStore

logger = logging.getLogger(__name__)


def open_storage(settings) -> GuardedKeyValueStore:
    """Build the configured storage medium; unavailable media become a no-op store."""
    backend = str(getattr(settings, "storage_backend", "json"))
    inner: KeyValueStore | None
    try:
        if backend == "json":
            inner = JsonFileKeyValueStore(settings.storage_path)
        elif backend == "sqlite":
            inner = SQLiteKeyValueStore(settings.storage_path)
        elif backend == "memory":
            inner = MemoryKeyValueStore()
        else:
            inner = None
    except Exception:
        logger.exception("Failed to open %s storage at %s", backend, settings.storage_path)
        inner = None
    return GuardedKeyValueStore(inner)


def create_session(*, settings=None, kv: KeyValueStore | None = None) -> Session:
    """
    Create a ready-to-use Session.

    Keeping settings and storage injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        kv = open_storage(settings)
    elif not isinstance(kv, GuardedKeyValueStore):
        kv = GuardedKeyValueStore(kv)

    store = TodoStore(hold_until_hydrated=True)
    persister = StatePersister(
        kv,
        settings.storage_key,
        background=bool(getattr(settings, "persist_in_background", True)),
    )
    store.subscribe(persister)

    # Read exactly once, before the console accepts input.
    store.hydrate(kv.read(settings.storage_key))

    return Session(
        settings=settings,
        store=store,
        announcer=Announcer(getattr(settings, "announce_seconds", 1.2)),
        persister=persister,
    )
