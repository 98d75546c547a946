# Area: Game Engine
"""
bulls_and_cows.game — Main game loop
====================================

BullsAndCowsGame owns one GameSession and runs the interactive
read → dispatch loop in a single blocking thread. Commands are
interpreted by the command chain; the game records a score and shows
the leaderboard whenever a session is solved.

Every input line counts as an attempt, whatever command it turns out
to be.
"""

from __future__ import annotations

import logging
from typing import Optional

from ._commands import CommandChain, build_default_chain
from ._game_config import NUMBER_LENGTH, RESTART_COMMAND, SECRET_MAX, SECRET_MIN
from ._state import GameSession
from .console import ConsoleReader, LineReader
from .printer import ConsolePrinter, MessageType, Printer
from .random_provider import DefaultRandomNumberProvider, RandomNumberProvider
from .scoreboard import PlayerScore, ScoreBoard

logger = logging.getLogger("bulls_and_cows.game")


class BullsAndCowsGame:
    """
    Interactive Bulls and Cows game.

    Usage
    -----
        game = BullsAndCowsGame()
        game.run()

    Collaborators default to the console and a fresh random source;
    pass replacements to script or test the game.
    """

    def __init__(
        self,
        random_provider: Optional[RandomNumberProvider] = None,
        scoreboard: Optional[ScoreBoard] = None,
        printer: Optional[Printer] = None,
        reader: Optional[LineReader] = None,
        command_chain: Optional[CommandChain] = None,
        player_name: Optional[str] = None,
    ):
        self.random_provider = random_provider or DefaultRandomNumberProvider()
        self.scoreboard = scoreboard if scoreboard is not None else ScoreBoard()
        self.printer = printer or ConsolePrinter()
        self.reader = reader or ConsoleReader()
        self.command_chain = command_chain or build_default_chain()
        self.session = GameSession(player_name=player_name)

    # ── Session lifecycle ────────────────────────────────────

    def initialize(self) -> None:
        """Draw a new secret and clear all counters and reveals."""
        number = self.random_provider.generate_number(SECRET_MIN, SECRET_MAX)
        self.session.reset(str(number).zfill(NUMBER_LENGTH))
        logger.info("New game initialized")

    def restart(self) -> None:
        """Reinitialize and greet the player again, keeping their name."""
        logger.info("Restarting game")
        self.initialize()
        self._print_intro()

    def reveal_digit(self) -> None:
        """
        Reveal one random hidden digit of the secret, if any help is left.

        The mask is shown either way.
        """
        session = self.session
        if session.can_reveal:
            hidden = session.hidden_positions()
            index = self.random_provider.generate_number(0, len(hidden) - 1)
            session.reveal(hidden[index])
        else:
            logger.info("Help requested with no hidden digits left")

        self.printer.print_helping_number(session.helping_number())

    # ── Loop ─────────────────────────────────────────────────

    def _print_intro(self) -> None:
        self.printer.print_message(MessageType.WELCOME)
        self.printer.print_message(MessageType.GAME_RULES)

    def _ask_player_name(self) -> None:
        while self.session.player_name is None:
            self.printer.print_message(MessageType.ENTER_NAME)
            name = self.reader.read_line()
            if name is None:
                self.session.player_name = "Anonymous"
            elif name.strip():
                self.session.player_name = name.strip()
        logger.info(f"Player: {self.session.player_name}")

    def play(self) -> Optional[PlayerScore]:
        """
        Play the current session until it is solved or terminated.

        Returns:
            The recorded PlayerScore, or None if the player quit
        """
        self._ask_player_name()
        self._print_intro()

        session = self.session
        while not session.is_finished:
            self.printer.print_message(MessageType.COMMAND)
            command = self.reader.read_line()
            session.register_attempt()
            self.command_chain.dispatch(command, self)

        if not session.is_solved:
            return None

        score = PlayerScore(
            name=session.player_name,
            attempts=session.guess_attempts,
            cheats=session.cheat_attempts,
        )
        self.printer.print_message(
            MessageType.CONGRATULATIONS, score.attempts, score.cheats
        )
        self.scoreboard.add_player_score(score)
        self.printer.print_leaderboard(self.scoreboard.leaderboard)
        return score

    def run(self) -> None:
        """Play games until the player quits or declines to play again."""
        self.initialize()
        while self.play() is not None:
            self.printer.print_message(MessageType.PLAY_AGAIN)
            answer = self.reader.read_line()
            if answer is None or answer.strip().lower() != RESTART_COMMAND:
                self.printer.print_message(MessageType.GOODBYE)
                break
            self.initialize()
        logger.info("Game over")
