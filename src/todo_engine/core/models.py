# src/todo_engine/core/models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TodoFilter(StrEnum):
    """Which slice of the task list is shown."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: Any) -> TodoFilter | None:
        """Return the matching filter, or None for anything outside the three values."""
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None

    @classmethod
    def from_storage(cls, raw: Any) -> TodoFilter:
        return cls.parse(raw) or cls.ALL


@dataclass(frozen=True, slots=True)
class Todo:
    id: str
    title: str
    completed: bool
    created_at: int  # epoch milliseconds


@dataclass(frozen=True, slots=True)
class AppState:
    """
    Immutable snapshot of the task list.

    Invariants:
    - todos are newest-first; no title is empty after trimming
    - filter is always a TodoFilter
    """

    todos: tuple[Todo, ...] = ()
    filter: TodoFilter = TodoFilter.ALL


EMPTY_STATE = AppState()
