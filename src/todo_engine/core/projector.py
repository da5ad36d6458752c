# src/todo_engine/core/projector.py

from __future__ import annotations

import threading
from dataclasses import dataclass

from .models import AppState, Todo, TodoFilter

EMPTY_NO_TASKS = "no_tasks"
EMPTY_FILTERED_OUT = "filtered_out"


@dataclass(frozen=True, slots=True)
class TodoView:
    """Read-only projection of a snapshot for display; never persisted."""

    filter: TodoFilter
    filtered_todos: tuple[Todo, ...]
    active_count: int
    completed_count: int

    @property
    def total(self) -> int:
        return self.active_count + self.completed_count

    @property
    def all_completed(self) -> bool:
        return self.total > 0 and self.active_count == 0

    @property
    def empty_reason(self) -> str | None:
        if self.total == 0:
            return EMPTY_NO_TASKS
        if not self.filtered_todos:
            return EMPTY_FILTERED_OUT
        return None

    @property
    def items_left_label(self) -> str:
        return f"{self.active_count} {pluralize(self.active_count, 'item')} left"


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    if count == 1:
        return singular
    return plural if plural is not None else f"{singular}s"


def filter_todos(todos: tuple[Todo, ...], active_filter: TodoFilter) -> tuple[Todo, ...]:
    if active_filter == TodoFilter.ACTIVE:
        return tuple(t for t in todos if not t.completed)
    if active_filter == TodoFilter.COMPLETED:
        return tuple(t for t in todos if t.completed)
    return todos


def project(state: AppState) -> TodoView:
    completed = sum(1 for t in state.todos if t.completed)
    return TodoView(
        filter=state.filter,
        filtered_todos=filter_todos(state.todos, state.filter),
        active_count=len(state.todos) - completed,
        completed_count=completed,
    )


class ViewProjector:
    """
    Memoizing wrapper around project().

    Recomputes only when the todos tuple or the filter changes identity.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._key: tuple[tuple[Todo, ...], TodoFilter] | None = None
        self._view: TodoView | None = None

    def view(self, state: AppState) -> TodoView:
        with self._lock:
            key = self._key
            if (
                self._view is not None
                and key is not None
                and key[0] is state.todos
                and key[1] is state.filter
            ):
                return self._view
            self._view = project(state)
            self._key = (state.todos, state.filter)
            return self._view
