# Area: Shared
"""
bulls_and_cows.errors — Custom exception classes
================================================

Defines the exception hierarchy for the game.

Only wiring and configuration problems are errors. Unrecognized
commands, malformed guesses and an exhausted help budget are normal
game outcomes reported through the printer.
"""

from __future__ import annotations
from typing import List, Optional


class BullsAndCowsError(Exception):
    """Base exception for all Bulls and Cows package errors."""
    pass


class ConfigurationError(BullsAndCowsError):
    """Raised when the game cannot be configured or wired."""

    def __init__(self, message: str, details: Optional[List[str]] = None):
        self.details = details or []
        super().__init__(message)

    def format_error_log(self) -> str:
        lines = [f"Configuration error: {self}"]
        for detail in self.details:
            lines.append(f"  • {detail}")
        return "\n".join(lines)


class MissingTerminalHandlerError(ConfigurationError):
    """Raised when a command chain has nothing to fall back to."""

    def __init__(self, handler_name: Optional[str]):
        self.handler_name = handler_name
        if handler_name is None:
            message = "Command chain is empty; a terminal handler is required"
        else:
            message = (
                f"There is no successor for {handler_name}; "
                "the command chain must end with a terminal handler"
            )
        super().__init__(message)
