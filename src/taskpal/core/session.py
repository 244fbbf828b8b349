# src/taskpal/core/session.py

"""
Session controller.

One Session per run: it owns the state built at startup and answers each
input line with exactly one reply string. Every TaskPalError raised while
parsing or handling a command becomes a reply; none end the session.
"""

from __future__ import annotations

import logging

from ..cli.commands import FAREWELL, CommandRegistry
from ..cli.commands import registry as default_registry
from ..cli.parser import parse
from .errors import StorageIOError, TaskPalError
from .state import SessionState

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, state: SessionState, registry: CommandRegistry | None = None) -> None:
        self.state = state
        self.registry = registry or default_registry

    @property
    def running(self) -> bool:
        return self.state.running

    def respond(self, line: str) -> str:
        try:
            command, args = parse(line)
            reply = self.registry.dispatch(self.state, command, args, line)
        except StorageIOError as e:
            # The in-memory list already holds the change; only the file is behind.
            logger.warning("Storage write failed: %s", e)
            return f"Error: {e}"
        except TaskPalError as e:
            logger.debug("Command rejected (%s): %r", type(e).__name__, line)
            return f"Error: {e}"
        logger.debug("Handled %s (size=%d)", command.value, self.state.tasks.size())
        return reply

    def close(self) -> str:
        """End the session without a bye command (e.g. end of input)."""
        self.state.running = False
        return FAREWELL

    def help_text(self) -> str:
        return self.registry.build_help()
