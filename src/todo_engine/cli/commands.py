# src/todo_engine/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..connectors.render import render_view
from ..core.actions import Add, ClearCompleted, Delete, Edit, SetFilter, Toggle, ToggleAll
from ..core.models import Todo, TodoFilter
from ..session import Session

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[Session, list[str]], str]
CommandHandler3 = Callable[[Session, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        session: Session,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(session, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(session, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Plain text adds a task (or saves the title while editing).")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def resolve_ref(session: Session, ref: str) -> Todo | None:
    """
    Find a task by list number (1-based, in the current filtered view),
    by exact id, or by a unique id prefix.
    """
    ref = ref.strip()
    if not ref:
        return None

    if ref.isdigit():
        items = session.view().filtered_todos
        n = int(ref)
        if 1 <= n <= len(items):
            return items[n - 1]
        return None

    exact = session.find(ref)
    if exact is not None:
        return exact

    matches = [t for t in session.state.todos if t.id.startswith(ref)]
    return matches[0] if len(matches) == 1 else None


def render(session: Session) -> str:
    return render_view(
        session.view(),
        announcement=session.announcer.message,
        editing_id=session.editing_id,
    )


def add_title(session: Session, text: str) -> str:
    title = text.strip()
    if not title:
        return "Nothing to add: the title is empty."
    session.store.dispatch(Add(title=title))
    session.announcer.announce(f"Added task: {title}")
    return render(session)


def commit_edit(session: Session, text: str) -> str:
    """Save the edit in progress; an empty title deletes the task."""
    todo_id = session.editing_id
    if todo_id is None:
        return "Not editing anything."

    next_title = text.strip()
    existing = session.find(todo_id)
    session.store.dispatch(Edit(id=todo_id, title=next_title))
    session.editing_id = None

    if existing is not None:
        if not next_title:
            session.announcer.announce(f"Deleted task: {existing.title}")
        elif existing.title != next_title:
            session.announcer.announce(f"Renamed task to: {next_title}")
    return render(session)


# ---- handlers ----


def cmd_help(session: Session, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(session: Session, args: list[str]) -> str:
    return render(session)


def cmd_add(session: Session, args: list[str]) -> str:
    return add_title(session, " ".join(args))


def cmd_toggle(session: Session, args: list[str]) -> str:
    if not args:
        return "Usage: /toggle <n|id>"
    todo = resolve_ref(session, args[0])
    if todo is None:
        return f"No task matches {args[0]!r}."
    session.store.dispatch(Toggle(id=todo.id))
    session.announcer.announce("Marked as active" if todo.completed else "Marked as completed")
    return render(session)


def cmd_delete(session: Session, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <n|id>"
    todo = resolve_ref(session, args[0])
    if todo is None:
        return f"No task matches {args[0]!r}."
    session.store.dispatch(Delete(id=todo.id))
    if session.editing_id == todo.id:
        session.editing_id = None
    session.announcer.announce(f"Deleted task: {todo.title}")
    return render(session)


def cmd_edit(session: Session, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /edit <n>          -> start editing; the next plain line is the new title
    /edit <n> <title>  -> rename in one step
    """
    if not args:
        return "Usage: /edit <n|id> [new title]"
    todo = resolve_ref(session, args[0])
    if todo is None:
        return f"No task matches {args[0]!r}."

    session.editing_id = todo.id
    if len(args) > 1:
        return commit_edit(session, " ".join(args[1:]))

    if emit is not None:
        emit(f"Editing: {todo.title}")
    return "Type the new title and press Enter (empty line deletes). /cancel to stop."


def cmd_cancel(session: Session, args: list[str]) -> str:
    if session.editing_id is None:
        return "Not editing anything."
    session.editing_id = None
    session.announcer.announce("Edit cancelled")
    return render(session)


def cmd_clear(session: Session, args: list[str]) -> str:
    session.store.dispatch(ClearCompleted())
    session.announcer.announce("Cleared completed tasks")
    return render(session)


def cmd_toggle_all(session: Session, args: list[str]) -> str:
    if not session.state.todos:
        return "No tasks yet."
    session.store.dispatch(ToggleAll())
    return render(session)


def cmd_filter(session: Session, args: list[str]) -> str:
    """
    /filter                         -> show current filter
    /filter all|active|completed    -> switch
    """
    if not args:
        return f"Filter is {session.state.filter.value}. Use /filter all|active|completed."
    value = TodoFilter.parse(args[0].lower())
    if value is None:
        return "Usage: /filter all|active|completed"
    session.store.dispatch(SetFilter(filter=value))
    return render(session)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <title>.")
registry.register("toggle", cmd_toggle, help_text="Complete/reopen a task: /toggle <n>.", aliases=["t", "done"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <n>.", aliases=["rm", "del"])
registry.register("edit", cmd_edit, help_text="Rename a task: /edit <n> [title].", aliases=["e"])
registry.register("cancel", cmd_cancel, help_text="Leave edit mode without saving.")
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register("all", cmd_toggle_all, help_text="Mark all complete, or all active if all are done.")
registry.register("filter", cmd_filter, help_text="Filter the list: /filter all|active|completed.", aliases=["f"])
