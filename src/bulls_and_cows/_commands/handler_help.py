# Area: Commands
"""Handler for the 'help' command: reveal one hidden digit."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .handler_base import BaseCommandHandler, normalize_keyword
from .._game_config import HELP_COMMAND

if TYPE_CHECKING:
    from ..game import BullsAndCowsGame


class HelpCommandHandler(BaseCommandHandler):
    """Reveals a random hidden digit and shows the mask."""

    def can_handle(self, command: Optional[str]) -> bool:
        return normalize_keyword(command) == HELP_COMMAND

    def process(self, command: Optional[str], game: BullsAndCowsGame) -> None:
        game.reveal_digit()
