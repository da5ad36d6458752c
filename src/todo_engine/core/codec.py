# src/todo_engine/core/codec.py

"""
Persistence codec and normalizer.

encode() turns a snapshot into compact JSON text. decode() is the inverse for
untrusted input: it parses, then runs normalize(), which either produces a
snapshot that satisfies every AppState invariant or rejects the record.

Per-field defaults for a candidate todo entry:
- id:        freshly generated when not a string (or already taken)
- title:     "" when not a string; entries with an empty trimmed title are dropped
- completed: truthiness of whatever is stored
- createdAt: current time when not a number (booleans do not count)

A record whose "todos" is missing or not an array is rejected as a whole,
even if its "filter" is valid.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Any

from .ids import generate_id, now_ms
from .models import AppState, Todo, TodoFilter
from .ports import Clock, IdFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Normalized:
    state: AppState
    dropped: int = 0  # entries discarded for an empty title


@dataclass(frozen=True, slots=True)
class Invalid:
    reason: str


NormalizeResult = Normalized | Invalid


def todo_to_dict(todo: Todo) -> dict[str, Any]:
    return {
        "id": todo.id,
        "title": todo.title,
        "completed": todo.completed,
        "createdAt": todo.created_at,
    }


def encode(state: AppState) -> str:
    payload = {
        "todos": [todo_to_dict(t) for t in state.todos],
        "filter": state.filter.value,
    }
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON.
    raise ValueError(f"non-standard JSON constant {name}")


def parse_json(text: Any) -> tuple[bool, Any]:
    """Return (ok, value). Never raises."""
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError:
            return False, None
    if not isinstance(text, str) or not text.strip():
        return False, None
    try:
        return True, json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False, None


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _sanitize_entry(
    raw: Any,
    *,
    seen_ids: set[str],
    new_id: IdFactory,
    now: Clock,
) -> Todo | None:
    entry = raw if isinstance(raw, dict) else {}

    title = entry.get("title")
    title = title.strip() if isinstance(title, str) else ""
    if not title:
        return None

    todo_id = entry.get("id")
    if not isinstance(todo_id, str) or todo_id in seen_ids:
        todo_id = new_id()

    created_at = entry.get("createdAt")
    if not _is_number(created_at):
        created_at = now()

    seen_ids.add(todo_id)
    return Todo(
        id=todo_id,
        title=title,
        completed=bool(entry.get("completed")),
        created_at=created_at,
    )


def normalize(
    value: Any,
    *,
    new_id: IdFactory = generate_id,
    now: Clock = now_ms,
) -> NormalizeResult:
    """Validate an already-parsed record. Total: never raises."""
    if not isinstance(value, dict):
        return Invalid("record is not an object")

    raw_todos = value.get("todos")
    if not isinstance(raw_todos, list):
        return Invalid("todos is missing or not an array")

    seen: set[str] = set()
    todos: list[Todo] = []
    for raw in raw_todos:
        todo = _sanitize_entry(raw, seen_ids=seen, new_id=new_id, now=now)
        if todo is not None:
            todos.append(todo)

    state = AppState(
        todos=tuple(todos),
        filter=TodoFilter.from_storage(value.get("filter")),
    )
    return Normalized(state=state, dropped=len(raw_todos) - len(todos))


def decode(
    text: Any,
    *,
    new_id: IdFactory = generate_id,
    now: Clock = now_ms,
) -> AppState | None:
    ok, value = parse_json(text)
    if not ok:
        logger.debug("Stored state is not valid JSON; ignoring.")
        return None

    result = normalize(value, new_id=new_id, now=now)
    if isinstance(result, Invalid):
        logger.debug("Stored state rejected: %s", result.reason)
        return None

    if result.dropped:
        logger.debug("Dropped %d stored entries with empty titles.", result.dropped)
    return result.state
