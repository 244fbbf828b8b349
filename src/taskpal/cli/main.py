# src/taskpal/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the session (loading the data file), then runs
the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_session
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import CorruptStorageError, StorageError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s (data file: %s)...", settings.app_name, settings.tasks_path)

    try:
        session = create_session(settings=settings)
    except CorruptStorageError as e:
        logger.error("Refusing to start: corrupt data file %s (%s)", settings.tasks_path, e)
        print(
            f"Cannot load tasks from {settings.tasks_path}: {e}\n"
            f"Fix or move the file, or set TASKPAL_STRICT_LOAD=false to start with an empty list.",
            file=sys.stderr,
        )
        raise SystemExit(1) from None
    except StorageError as e:
        logger.error("Cannot initialize storage: %s", e)
        print(f"Cannot initialize storage: {e}", file=sys.stderr)
        raise SystemExit(1) from None

    run_console_loop(session)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
