# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_engine.cli.bootstrap import create_session
from todo_engine.core.store import TodoStore
from todo_engine.session import Session

from .fakes import CountingIds, RecordingKeyValueStore, StepClock


@pytest.fixture()
def ids() -> CountingIds:
    return CountingIds()


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def store(ids: CountingIds, clock: StepClock) -> TodoStore:
    return TodoStore(new_id=ids, now=clock)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the console.

    We intentionally use a SimpleNamespace rather than reading the real env,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_backend="json",
        storage_path=tmp_path / "storage.json",
        storage_key="test.todo",
        # Synchronous writes: assertions can read storage right away.
        persist_in_background=False,
        # Long enough that announcements never expire mid-test.
        announce_seconds=60.0,
    )


@pytest.fixture()
def kv() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture()
def session(settings: SimpleNamespace, kv: RecordingKeyValueStore) -> Iterator[Session]:
    s = create_session(settings=settings, kv=kv)
    yield s
    s.close()
