# src/todo_engine/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations:
randomness and storage are injected, so tests can swap in deterministic doubles.
"""

from collections.abc import Callable
from typing import Protocol

from .models import AppState

Clock = Callable[[], int]
# Returns epoch milliseconds.

IdFactory = Callable[[], str]

StateListener = Callable[[AppState], None]
# Receives every newly committed snapshot.


class RandomSource(Protocol):
    """
    Source of random bytes for identifiers.

    Implementations that cannot provide strong randomness raise
    NotImplementedError (or OSError) so callers can fall back.
    """

    def token_bytes(self, n: int) -> bytes: ...


class KeyValueStore(Protocol):
    """Text-valued storage medium (browser-localStorage style)."""

    def read(self, key: str) -> str | None: ...

    def write(self, key: str, text: str) -> None: ...
