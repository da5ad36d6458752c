# src/todo_engine/session.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .connectors.announcer import Announcer
from .core.models import AppState, Todo
from .core.projector import TodoView, ViewProjector
from .core.store import TodoStore
from .storage.persister import StatePersister


@dataclass
class Session:
    """
    Everything one running task list needs, wired by cli.bootstrap.

    The canonical task data lives in `store`; the session itself only holds
    presentation state (which task is being edited) and owned resources.
    """

    settings: Any
    store: TodoStore
    announcer: Announcer
    persister: StatePersister | None = None
    projector: ViewProjector = field(default_factory=ViewProjector)

    editing_id: str | None = None

    @property
    def state(self) -> AppState:
        return self.store.state

    def view(self) -> TodoView:
        return self.projector.view(self.store.state)

    def find(self, todo_id: str) -> Todo | None:
        for t in self.store.state.todos:
            if t.id == todo_id:
                return t
        return None

    def close(self) -> None:
        self.announcer.cancel()
        if self.persister is not None:
            self.persister.close()
