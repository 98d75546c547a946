# Area: Commands
"""Handler for the 'top' command: show the leaderboard."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .handler_base import BaseCommandHandler, normalize_keyword
from .._game_config import TOP_COMMAND

if TYPE_CHECKING:
    from ..game import BullsAndCowsGame


class TopCommandHandler(BaseCommandHandler):

    def can_handle(self, command: Optional[str]) -> bool:
        return normalize_keyword(command) == TOP_COMMAND

    def process(self, command: Optional[str], game: BullsAndCowsGame) -> None:
        game.printer.print_leaderboard(game.scoreboard.leaderboard)
