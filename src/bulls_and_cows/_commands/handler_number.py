# Area: Commands
"""
bulls_and_cows._commands.handler_number — Guess Handler
=======================================================

Handles numeric input. Exactly NUMBER_LENGTH unsigned digits are
scored against the secret; any other integer is rejected with a
dedicated message and scores nothing.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Optional

from .handler_base import BaseCommandHandler
from .._game_config import NUMBER_LENGTH
from ..counter import BullsAndCowsCounter
from ..printer import MessageType

if TYPE_CHECKING:
    from ..game import BullsAndCowsGame

logger = logging.getLogger("bulls_and_cows.commands.number")

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_GUESS = re.compile(r"\d{%d}" % NUMBER_LENGTH, re.ASCII)


class NumberCommandHandler(BaseCommandHandler):
    """
    Handler for guesses.

    1. Check the guess has exactly NUMBER_LENGTH digits
    2. Count bulls and cows against the secret
    3. Mark the session solved on all bulls, else report the counts
    """

    def __init__(self, counter: Optional[BullsAndCowsCounter] = None):
        super().__init__()
        self.counter = counter or BullsAndCowsCounter()

    def can_handle(self, command: Optional[str]) -> bool:
        return command is not None and _INTEGER.fullmatch(command.strip()) is not None

    def process(self, command: Optional[str], game: BullsAndCowsGame) -> None:
        guess = command.strip()

        if not _GUESS.fullmatch(guess):
            logger.debug(f"Rejected guess {guess!r}: not {NUMBER_LENGTH} digits")
            game.printer.print_message(MessageType.INVALID_GUESS)
            return

        session = game.session
        result = self.counter.count(session.secret_number, guess)
        logger.debug(f"Guess {guess}: {result.bulls} bulls, {result.cows} cows")

        if result.bulls == NUMBER_LENGTH:
            session.mark_solved()
        else:
            game.printer.print_message(MessageType.WRONG_NUMBER, result.bulls, result.cows)
