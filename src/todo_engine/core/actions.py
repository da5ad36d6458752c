# src/todo_engine/core/actions.py

"""
Action values submitted to the store.

Each action is a small frozen dataclass with a `type` tag matching the
persisted/wire name of the transition. Payload fields accept any value;
the reducer decides what is valid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True, slots=True)
class Hydrate:
    type: ClassVar[str] = "hydrate"
    # Persisted text or an already-parsed value.
    payload: Any = None


@dataclass(frozen=True, slots=True)
class Add:
    type: ClassVar[str] = "add"
    title: Any = ""


@dataclass(frozen=True, slots=True)
class Toggle:
    type: ClassVar[str] = "toggle"
    id: Any = ""


@dataclass(frozen=True, slots=True)
class Delete:
    type: ClassVar[str] = "delete"
    id: Any = ""


@dataclass(frozen=True, slots=True)
class Edit:
    type: ClassVar[str] = "edit"
    id: Any = ""
    title: Any = ""


@dataclass(frozen=True, slots=True)
class ClearCompleted:
    type: ClassVar[str] = "clearCompleted"


@dataclass(frozen=True, slots=True)
class ToggleAll:
    type: ClassVar[str] = "toggleAll"


@dataclass(frozen=True, slots=True)
class SetFilter:
    type: ClassVar[str] = "setFilter"
    filter: Any = None


Action = Hydrate | Add | Toggle | Delete | Edit | ClearCompleted | ToggleAll | SetFilter

ACTION_TYPES: dict[str, type] = {
    cls.type: cls
    for cls in (Hydrate, Add, Toggle, Delete, Edit, ClearCompleted, ToggleAll, SetFilter)
}


_PAYLOAD_FIELDS: dict[type, tuple[str, ...]] = {
    Add: ("title",),
    Toggle: ("id",),
    Delete: ("id",),
    Edit: ("id", "title"),
    SetFilter: ("filter",),
}


def action_from_dict(raw: Any) -> Action | None:
    """
    Build an action from a {"type": ..., "payload": {...}} mapping.

    Returns None for unknown types or non-mapping input.
    """
    if not isinstance(raw, dict):
        return None
    kind = raw.get("type")
    cls = ACTION_TYPES.get(kind) if isinstance(kind, str) else None
    if cls is None:
        return None

    payload = raw.get("payload")
    if cls is Hydrate:
        return Hydrate(payload=payload)
    if not isinstance(payload, dict):
        payload = {}

    kwargs = {f: payload[f] for f in _PAYLOAD_FIELDS.get(cls, ()) if f in payload}
    return cls(**kwargs)


__all__ = [
    "ACTION_TYPES",
    "Action",
    "Add",
    "ClearCompleted",
    "Delete",
    "Edit",
    "Hydrate",
    "SetFilter",
    "Toggle",
    "ToggleAll",
    "action_from_dict",
]
