"""
bulls_and_cows — Bulls and Cows console game
============================================

Guess the secret 4-digit number. After each guess the game reports
bulls (right digit, right place) and cows (right digit, wrong place).

Quick Start:
    from bulls_and_cows import BullsAndCowsGame
    BullsAndCowsGame().run()

Scripted play:
    from bulls_and_cows import BullsAndCowsGame, ScriptedReader
    game = BullsAndCowsGame(reader=ScriptedReader(["Ann", "help", "1234"]))
    game.run()

Commands: a 4-digit guess, help, top, restart, exit.
"""

from .counter import BullsAndCowsCounter, BullsAndCowsResult
from .game import BullsAndCowsGame
from .console import ConsoleReader, LineReader, ScriptedReader
from .printer import ConsolePrinter, MessageType, Printer
from .random_provider import DefaultRandomNumberProvider, RandomNumberProvider
from .scoreboard import PlayerScore, ScoreBoard
from ._commands import (
    BaseCommandHandler,
    CommandChain,
    build_default_chain,
)
from ._game_config import GameConfig, load_config
from .errors import (
    BullsAndCowsError,
    ConfigurationError,
    MissingTerminalHandlerError,
)

__all__ = [
    # Main classes
    "BullsAndCowsGame",
    "BullsAndCowsCounter",
    "BullsAndCowsResult",
    # Collaborators
    "ConsoleReader",
    "LineReader",
    "ScriptedReader",
    "ConsolePrinter",
    "MessageType",
    "Printer",
    "DefaultRandomNumberProvider",
    "RandomNumberProvider",
    "PlayerScore",
    "ScoreBoard",
    # Commands
    "BaseCommandHandler",
    "CommandChain",
    "build_default_chain",
    # Configuration
    "GameConfig",
    "load_config",
    # Errors
    "BullsAndCowsError",
    "ConfigurationError",
    "MissingTerminalHandlerError",
]
__version__ = "1.0.0"
