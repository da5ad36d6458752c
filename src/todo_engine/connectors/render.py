# src/todo_engine/connectors/render.py

from __future__ import annotations

from ..core.models import TodoFilter
from ..core.projector import EMPTY_FILTERED_OUT, EMPTY_NO_TASKS, TodoView

_FILTER_LABELS = {
    TodoFilter.ALL: "All",
    TodoFilter.ACTIVE: "Active",
    TodoFilter.COMPLETED: "Completed",
}


def render_filters(current: TodoFilter) -> str:
    parts = []
    for value, label in _FILTER_LABELS.items():
        parts.append(f"[{label}]" if value == current else f" {label} ")
    return " ".join(parts)


def render_view(view: TodoView, *, announcement: str = "", editing_id: str | None = None) -> str:
    """Plain-text rendering of a projected view."""
    lines = [
        f"Active: {view.active_count}  Completed: {view.completed_count}",
        f"Filter: {render_filters(view.filter)}",
        "",
    ]

    if view.empty_reason == EMPTY_NO_TASKS:
        lines.append("  No tasks yet")
        lines.append("  Add your first task above to get started.")
    elif view.empty_reason == EMPTY_FILTERED_OUT:
        lines.append("  Nothing here")
        lines.append("  Try a different filter.")
    else:
        for n, todo in enumerate(view.filtered_todos, start=1):
            mark = "x" if todo.completed else " "
            editing = "  (editing)" if todo.id == editing_id else ""
            lines.append(f"  {n:>2}. [{mark}] {todo.title}{editing}")

    lines.append("")
    toggle_hint = "/all: mark all active" if view.all_completed else "/all: mark all complete"
    lines.append(f"{view.items_left_label}  |  {toggle_hint}")
    if announcement:
        lines.append(f"* {announcement}")
    return "\n".join(lines)
