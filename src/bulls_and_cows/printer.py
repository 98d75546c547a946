# Area: Collaborators
"""
bulls_and_cows.printer — Console output
=======================================

Renders game messages, the help mask and the leaderboard.
The game treats the printer as fire-and-forget.
"""

from __future__ import annotations
import sys
from enum import Enum
from typing import Iterable, Optional, Protocol, TextIO

from ._game_config import NUMBER_LENGTH
from .scoreboard import PlayerScore

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Success
YELLOW = "\033[33m"        # Hints
ORANGE = "\033[38;5;208m"  # Prompts
RED = "\033[31m"           # Rejected input
RESET = "\033[0m"


class MessageType(Enum):
    """Kinds of messages the game asks the printer to show."""
    ENTER_NAME = "enter_name"
    WELCOME = "welcome"
    GAME_RULES = "game_rules"
    COMMAND = "command"
    WRONG_NUMBER = "wrong_number"          # args: bulls, cows
    INVALID_GUESS = "invalid_guess"
    INVALID_COMMAND = "invalid_command"
    CONGRATULATIONS = "congratulations"    # args: attempts, cheats
    PLAY_AGAIN = "play_again"
    GOODBYE = "goodbye"


# ══════════════════════════════════════════════════════════════
# MESSAGE TYPE → TEXT
# ══════════════════════════════════════════════════════════════

MESSAGES = {
    MessageType.ENTER_NAME: "Please enter your name: ",
    MessageType.WELCOME: "Welcome to \"Bulls and Cows\" game.",
    MessageType.GAME_RULES: (
        f"Please try to guess my secret {NUMBER_LENGTH}-digit number.\n"
        "Use 'top' to view the top scoreboard, 'restart' to start a new game, "
        "'help' to cheat and 'exit' to quit the game."
    ),
    MessageType.COMMAND: "Enter your guess or command: ",
    MessageType.WRONG_NUMBER: "Wrong number! Bulls: {0}, Cows: {1}",
    MessageType.INVALID_GUESS: f"Your guess must be exactly {NUMBER_LENGTH} digits.",
    MessageType.INVALID_COMMAND: "Incorrect guess or command!",
    MessageType.CONGRATULATIONS: (
        "Congratulations! You guessed the secret number in {0} attempts and {1} cheats."
    ),
    MessageType.PLAY_AGAIN: "Type 'restart' to play again or press Enter to quit: ",
    MessageType.GOODBYE: "Good bye!",
}

MESSAGE_COLORS = {
    MessageType.ENTER_NAME: ORANGE,
    MessageType.COMMAND: ORANGE,
    MessageType.PLAY_AGAIN: ORANGE,
    MessageType.INVALID_GUESS: RED,
    MessageType.INVALID_COMMAND: RED,
    MessageType.CONGRATULATIONS: GREEN,
}

# Messages that wait for input on the same line
PROMPTS = {MessageType.ENTER_NAME, MessageType.COMMAND, MessageType.PLAY_AGAIN}


class Printer(Protocol):
    """Protocol for game output."""

    def print_message(self, message_type: MessageType, *args: object) -> None:
        ...

    def print_helping_number(self, helping_number: str) -> None:
        ...

    def print_leaderboard(self, scores: Iterable[PlayerScore]) -> None:
        ...


class ConsolePrinter:
    """Printer that writes plain or colored text to a stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        use_colors: bool = False,
        leaderboard_size: int = 5,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.use_colors = use_colors
        self.leaderboard_size = leaderboard_size

    def _write(self, text: str, color: Optional[str] = None, end: str = "\n") -> None:
        if self.use_colors and color:
            text = f"{color}{text}{RESET}"
        self.stream.write(text + end)
        self.stream.flush()

    def print_message(self, message_type: MessageType, *args: object) -> None:
        text = MESSAGES[message_type].format(*args)
        end = "" if message_type in PROMPTS else "\n"
        self._write(text, MESSAGE_COLORS.get(message_type), end=end)

    def print_helping_number(self, helping_number: str) -> None:
        self._write(f"The number looks like {helping_number}.", YELLOW)

    def print_leaderboard(self, scores: Iterable[PlayerScore]) -> None:
        top = list(scores)[: self.leaderboard_size]
        if not top:
            self._write("Top scoreboard is empty.")
            return

        self._write("Scoreboard:")
        for place, score in enumerate(top, start=1):
            self._write(
                f"{place}. {score.name} --> {score.attempts} guesses, "
                f"{score.cheats} cheats"
            )
