# src/todo_engine/core/reducer.py

"""
Pure state transitions.

reduce(state, action) never raises and never mutates its input. Any action it
does not recognise, or any payload it finds invalid (blank title, unknown id,
unknown filter), returns the very same `state` object, so callers can test
`next is state` to detect a no-op.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .actions import Add, ClearCompleted, Delete, Edit, Hydrate, SetFilter, Toggle, ToggleAll
from .codec import Invalid, decode, normalize
from .ids import generate_id, now_ms
from .models import AppState, Todo, TodoFilter
from .ports import Clock, IdFactory

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _with_todos(state: AppState, todos: list[Todo]) -> AppState:
    return replace(state, todos=tuple(todos))


def _hydrate(state: AppState, payload: Any, new_id: IdFactory, now: Clock) -> AppState:
    if isinstance(payload, (str, bytes, bytearray)):
        loaded = decode(payload, new_id=new_id, now=now)
        return loaded if loaded is not None else state

    result = normalize(payload, new_id=new_id, now=now)
    if isinstance(result, Invalid):
        logger.debug("hydrate ignored: %s", result.reason)
        return state
    return result.state


def _add(state: AppState, raw_title: Any, new_id: IdFactory, now: Clock) -> AppState:
    title = _text(raw_title).strip()
    if not title:
        return state
    todo = Todo(id=new_id(), title=title, completed=False, created_at=now())
    return _with_todos(state, [todo, *state.todos])


def _toggle(state: AppState, todo_id: str) -> AppState:
    if not any(t.id == todo_id for t in state.todos):
        return state
    return _with_todos(
        state,
        [replace(t, completed=not t.completed) if t.id == todo_id else t for t in state.todos],
    )


def _delete(state: AppState, todo_id: str) -> AppState:
    kept = [t for t in state.todos if t.id != todo_id]
    if len(kept) == len(state.todos):
        return state
    return _with_todos(state, kept)


def _edit(state: AppState, todo_id: str, raw_title: Any) -> AppState:
    title = _text(raw_title).strip()
    if not title:
        # A blank title removes the task rather than leaving an empty entry.
        return _delete(state, todo_id)
    if not any(t.id == todo_id for t in state.todos):
        return state
    return _with_todos(
        state,
        [replace(t, title=title) if t.id == todo_id else t for t in state.todos],
    )


def _clear_completed(state: AppState) -> AppState:
    kept = [t for t in state.todos if not t.completed]
    if len(kept) == len(state.todos):
        return state
    return _with_todos(state, kept)


def _toggle_all(state: AppState) -> AppState:
    if not state.todos:
        return state
    # One decision for the whole list: complete everything unless it already is.
    target = any(not t.completed for t in state.todos)
    return _with_todos(state, [replace(t, completed=target) for t in state.todos])


def _set_filter(state: AppState, raw: Any) -> AppState:
    value = TodoFilter.parse(raw)
    if value is None or value == state.filter:
        return state
    return replace(state, filter=value)


def reduce(
    state: AppState,
    action: Any,
    *,
    new_id: IdFactory = generate_id,
    now: Clock = now_ms,
) -> AppState:
    """Compute the next snapshot for `action`."""
    if isinstance(action, Hydrate):
        return _hydrate(state, action.payload, new_id, now)
    if isinstance(action, Add):
        return _add(state, action.title, new_id, now)
    if isinstance(action, Toggle):
        return _toggle(state, _text(action.id))
    if isinstance(action, Delete):
        return _delete(state, _text(action.id))
    if isinstance(action, Edit):
        return _edit(state, _text(action.id), action.title)
    if isinstance(action, ClearCompleted):
        return _clear_completed(state)
    if isinstance(action, ToggleAll):
        return _toggle_all(state)
    if isinstance(action, SetFilter):
        return _set_filter(state, action.filter)

    logger.debug("Ignoring unknown action %r", action)
    return state
