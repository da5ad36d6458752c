# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable

from todo_engine.storage.memory import MemoryKeyValueStore


class CountingIds:
    """Deterministic id factory: id-1, id-2, ..."""

    def __init__(self, prefix: str = "id-") -> None:
        self.prefix = prefix
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return f"{self.prefix}{self.calls}"


class StepClock:
    """Epoch-millisecond clock that advances by `step` on every read."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1) -> None:
        self.value = start
        self.step = step

    def __call__(self) -> int:
        current = self.value
        self.value += self.step
        return current


class FixedRandomSource:
    """RandomSource double: a counter encoded as bytes (distinct per call)."""

    def __init__(self) -> None:
        self.calls = 0

    def token_bytes(self, n: int) -> bytes:
        self.calls += 1
        return self.calls.to_bytes(n, "big")


class FailingRandomSource:
    """RandomSource double for hosts without a strong randomness source."""

    def __init__(self) -> None:
        self.calls = 0

    def token_bytes(self, n: int) -> bytes:
        self.calls += 1
        raise NotImplementedError("no entropy source")


class FailingKeyValueStore:
    """Storage medium that is present but broken."""

    def read(self, key: str) -> str | None:
        raise OSError("storage unavailable")

    def write(self, key: str, text: str) -> None:
        raise OSError("storage unavailable")


class RecordingKeyValueStore(MemoryKeyValueStore):
    """In-memory storage that also remembers every write, in order."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []

    def write(self, key: str, text: str) -> None:
        self.writes.append((key, text))
        super().write(key, text)


class FakeTimer:
    """
    threading.Timer stand-in for Announcer tests.

    Nothing runs on its own; call fire() to simulate expiry.
    """

    created: list["FakeTimer"] = []

    def __init__(self, interval: float, function: Callable[[], None]) -> None:
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        self.function()
