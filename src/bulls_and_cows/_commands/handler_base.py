# Area: Commands
"""
bulls_and_cows._commands.handler_base — Base Command Handler
============================================================

Abstract base class for the chain of responsibility that turns one
line of player input into a game action.

Each handler recognizes one command shape. A command it does not
recognize is passed to its successor.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..game import BullsAndCowsGame

logger = logging.getLogger("bulls_and_cows.commands")


def normalize_keyword(command: Optional[str]) -> Optional[str]:
    """Strip and lowercase a command for keyword matching."""
    if command is None:
        return None
    return command.strip().lower()


class BaseCommandHandler(ABC):
    """
    Abstract base class for command handlers.

    Subclasses implement can_handle() and process(). A handler that
    claims every command sets terminal = True; only a terminal handler
    may end a chain.
    """

    terminal = False

    def __init__(self):
        self.successor: Optional[BaseCommandHandler] = None

    @property
    def name(self) -> str:
        return type(self).__name__

    def set_successor(self, successor: BaseCommandHandler) -> BaseCommandHandler:
        """
        Link the next handler in the chain.

        Returns:
            The successor, so links can be chained
        """
        self.successor = successor
        return successor

    @abstractmethod
    def can_handle(self, command: Optional[str]) -> bool:
        """Whether this handler recognizes the command."""
        pass

    @abstractmethod
    def process(self, command: Optional[str], game: BullsAndCowsGame) -> None:
        """Perform the action for a recognized command."""
        pass

    def handle(self, command: Optional[str], game: BullsAndCowsGame) -> bool:
        """
        Handle the command here or delegate it down the chain.

        Args:
            command: Raw input line, or None at end of input
            game: The game whose session the command acts on

        Returns:
            True if some handler claimed the command
        """
        if self.can_handle(command):
            logger.debug(f"{self.name} handling {command!r}")
            self.process(command, game)
            return True

        if self.successor is not None:
            return self.successor.handle(command, game)

        logger.warning(f"No handler claimed {command!r}")
        return False
