# src/todo_engine/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the Session (hydrating from storage first), then
runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_session
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(session) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        session.close()
    except Exception:
        logger.exception("Failed to close session cleanly.")


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(file_level, int):
        file_level = logging.INFO

    # Console stays quiet (WARNING+) so logs do not break up the list.
    setup_logging(log_dir=settings.log_dir, console_level=logging.WARNING, file_level=file_level)

    logger.info("Starting %s (storage=%s key=%s)...", settings.app_name, settings.storage_backend, settings.storage_key)

    session = create_session(settings=settings)
    try:
        run_console_loop(session)
    finally:
        _shutdown(session)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
