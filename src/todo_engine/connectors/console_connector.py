# src/todo_engine/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import add_title, commit_edit, render
from ..cli.commands import registry as command_registry
from ..session import Session

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _prompt(session: Session) -> str:
    return "edit> " if session.editing_id is not None else "todo> "


def handle_line(session: Session, line: str, emit: OutputFn | None = None) -> str | None:
    """
    Route one input line: slash commands go to the registry, plain text adds a
    task (or commits the title while editing). Returns the text to show.
    """
    text = line.strip()

    if text.startswith("/"):
        return command_registry.handle(session, text, emit=emit)

    if session.editing_id is not None:
        return commit_edit(session, text)

    if not text:
        return None
    return add_title(session, text)


def run_console_loop(
    session: Session,
    *,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> None:
    app_name = str(getattr(session.settings, "app_name", "todo"))
    logger.info("Console started (%d todos).", len(session.state.todos))

    output_fn(f"{app_name}: type a task to add it. Use /help for commands, /exit to quit.\n")
    output_fn(render(session))

    while True:
        try:
            line = input_fn(_prompt(session))
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output_fn("")
            break

        if line.strip().lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(session, line, emit=output_fn)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            output_fn(reply)

    logger.info("Console finished.")
