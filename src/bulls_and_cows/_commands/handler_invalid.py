# Area: Commands
"""Terminal handler: reports any command nobody else claimed."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .handler_base import BaseCommandHandler
from ..printer import MessageType

if TYPE_CHECKING:
    from ..game import BullsAndCowsGame

logger = logging.getLogger("bulls_and_cows.commands.invalid")


class InvalidCommandHandler(BaseCommandHandler):
    """Claims every command; leaves the session untouched."""

    terminal = True

    def can_handle(self, command: Optional[str]) -> bool:
        return True

    def process(self, command: Optional[str], game: BullsAndCowsGame) -> None:
        logger.debug(f"Unrecognized command {command!r}")
        game.printer.print_message(MessageType.INVALID_COMMAND)
