# Area: Commands
"""Handler for the 'restart' command."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .handler_base import BaseCommandHandler, normalize_keyword
from .._game_config import RESTART_COMMAND

if TYPE_CHECKING:
    from ..game import BullsAndCowsGame


class RestartCommandHandler(BaseCommandHandler):
    """
    Starts a new game with a fresh secret.

    The player name is kept and the loop carries on from the welcome
    message.
    """

    def can_handle(self, command: Optional[str]) -> bool:
        return normalize_keyword(command) == RESTART_COMMAND

    def process(self, command: Optional[str], game: BullsAndCowsGame) -> None:
        game.restart()
