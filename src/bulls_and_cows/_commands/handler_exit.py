# Area: Commands
"""
bulls_and_cows._commands.handler_exit — Exit Handler
====================================================

Handles 'exit' / 'quit' and end of input. The session is terminated
without recording a score.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .handler_base import BaseCommandHandler, normalize_keyword
from .._game_config import EXIT_COMMANDS
from ..printer import MessageType

if TYPE_CHECKING:
    from ..game import BullsAndCowsGame

logger = logging.getLogger("bulls_and_cows.commands.exit")


class ExitCommandHandler(BaseCommandHandler):

    def can_handle(self, command: Optional[str]) -> bool:
        return command is None or normalize_keyword(command) in EXIT_COMMANDS

    def process(self, command: Optional[str], game: BullsAndCowsGame) -> None:
        if command is None:
            logger.info("End of input")
        game.session.terminate()
        game.printer.print_message(MessageType.GOODBYE)
