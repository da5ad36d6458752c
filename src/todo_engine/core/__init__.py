"""State transition engine: models, reducer, codec, projector and store."""

from .actions import (
    Action,
    Add,
    ClearCompleted,
    Delete,
    Edit,
    Hydrate,
    SetFilter,
    Toggle,
    ToggleAll,
    action_from_dict,
)
from .codec import Invalid, Normalized, decode, encode, normalize
from .ids import IdGenerator, SystemRandomSource, generate_id, now_ms
from .models import EMPTY_STATE, AppState, Todo, TodoFilter
from .projector import TodoView, ViewProjector, project
from .reducer import reduce
from .store import TodoStore

__all__ = [
    "EMPTY_STATE",
    "Action",
    "Add",
    "AppState",
    "ClearCompleted",
    "Delete",
    "Edit",
    "Hydrate",
    "IdGenerator",
    "Invalid",
    "Normalized",
    "SetFilter",
    "SystemRandomSource",
    "Todo",
    "TodoFilter",
    "TodoStore",
    "TodoView",
    "Toggle",
    "ToggleAll",
    "ViewProjector",
    "action_from_dict",
    "decode",
    "encode",
    "generate_id",
    "normalize",
    "now_ms",
    "project",
    "reduce",
]
