"""Storage media and the persistence writer."""

from .guarded import GuardedKeyValueStore
from .json_file import JsonFileKeyValueStore
from .memory import MemoryKeyValueStore
from .persister import StatePersister
from .sqlite import SQLiteKeyValueStore

__all__ = [
    "GuardedKeyValueStore",
    "JsonFileKeyValueStore",
    "MemoryKeyValueStore",
    "SQLiteKeyValueStore",
    "StatePersister",
]
