# src/taskpal/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core.session import Session

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


def _print_block(text: str) -> None:
    print(DIVIDER)
    for line in text.splitlines() or [""]:
        print(" " + line)
    print(DIVIDER)


def _welcome(session: Session) -> str:
    app_name = str(getattr(session.state.settings, "app_name", "taskpal"))
    return f"Hello! I'm {app_name}.\nWhat can I do for you?\n\n{session.help_text()}"


def run_console_loop(session: Session, *, prompt: str = "> ") -> None:
    """
    Read one line at a time and print exactly one reply per line.

    Stops after bye, at end of input (which also says goodbye) or on Ctrl+C.
    """
    logger.info("Console connector started (tasks=%d).", session.state.tasks.size())
    _print_block(_welcome(session))

    while session.running:
        try:
            line = input(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            _print_block(session.close())
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            _print_block(session.close())
            break

        _print_block(session.respond(line))

    logger.info("Console connector finished.")
