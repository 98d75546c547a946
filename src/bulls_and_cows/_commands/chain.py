# Area: Commands
"""
bulls_and_cows._commands.chain — Command Chain
==============================================

Wires handlers into a chain of responsibility and validates it once,
at construction time. A chain that does not end with a terminal
handler is rejected before any command is dispatched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from .handler_base import BaseCommandHandler
from .handler_exit import ExitCommandHandler
from .handler_help import HelpCommandHandler
from .handler_invalid import InvalidCommandHandler
from .handler_number import NumberCommandHandler
from .handler_restart import RestartCommandHandler
from .handler_top import TopCommandHandler
from ..counter import BullsAndCowsCounter
from ..errors import MissingTerminalHandlerError

if TYPE_CHECKING:
    from ..game import BullsAndCowsGame

logger = logging.getLogger("bulls_and_cows.commands.chain")


class CommandChain:
    """
    Ordered chain of command handlers.

    Usage:
        chain = CommandChain([NumberCommandHandler(), InvalidCommandHandler()])
        chain.dispatch("1234", game)
    """

    def __init__(self, handlers: Sequence[BaseCommandHandler]):
        """
        Link handlers in order.

        Raises:
            MissingTerminalHandlerError: If handlers is empty or the last
                handler is not terminal
        """
        if not handlers:
            raise MissingTerminalHandlerError(None)
        if not handlers[-1].terminal:
            raise MissingTerminalHandlerError(handlers[-1].name)

        self._handlers: List[BaseCommandHandler] = list(handlers)
        for current, successor in zip(self._handlers, self._handlers[1:]):
            current.set_successor(successor)

        logger.debug(
            f"Command chain: {' -> '.join(h.name for h in self._handlers)}"
        )

    @property
    def handlers(self) -> List[BaseCommandHandler]:
        return list(self._handlers)

    @property
    def head(self) -> BaseCommandHandler:
        return self._handlers[0]

    def dispatch(self, command: Optional[str], game: BullsAndCowsGame) -> bool:
        """Pass one input line through the chain."""
        return self.head.handle(command, game)


def build_default_chain(counter: Optional[BullsAndCowsCounter] = None) -> CommandChain:
    """Build the standard chain: guess, help, restart, top, exit, invalid."""
    return CommandChain([
        NumberCommandHandler(counter),
        HelpCommandHandler(),
        RestartCommandHandler(),
        TopCommandHandler(),
        ExitCommandHandler(),
        InvalidCommandHandler(),
    ])
