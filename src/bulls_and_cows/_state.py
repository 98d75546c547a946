# Area: Game Engine
"""
bulls_and_cows._state — Game session state
==========================================

Tracks the mutable state of one play-through: the secret number, the
help reveal mask, attempt counters and completion flags.

The session is owned by BullsAndCowsGame; command handlers mutate it
only for the duration of a single dispatch.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import logging

from ._game_config import HIDDEN_DIGIT, MAX_CHEAT_ATTEMPTS, NUMBER_LENGTH

logger = logging.getLogger("bulls_and_cows.state")


def _hidden_mask() -> List[Optional[str]]:
    return [None] * NUMBER_LENGTH


@dataclass
class GameSession:
    """
    Full state of one game.

    reveal_mask holds None for a hidden position and the secret digit
    for a revealed one. player_name survives reset().
    """
    secret_number: str = ""
    reveal_mask: List[Optional[str]] = field(default_factory=_hidden_mask)
    guess_attempts: int = 0
    cheat_attempts: int = 0
    is_solved: bool = False
    is_terminated: bool = False
    player_name: Optional[str] = None

    # ── Lifecycle ────────────────────────────────────────────

    def reset(self, secret_number: str) -> None:
        """Start a fresh play-through with a new secret number."""
        if len(secret_number) != NUMBER_LENGTH or not secret_number.isdigit():
            raise ValueError(
                f"Secret number must be {NUMBER_LENGTH} digits, got {secret_number!r}"
            )
        self.secret_number = secret_number
        self.reveal_mask = _hidden_mask()
        self.guess_attempts = 0
        self.cheat_attempts = 0
        self.is_solved = False
        self.is_terminated = False
        logger.debug("Session reset")

    @property
    def is_finished(self) -> bool:
        return self.is_solved or self.is_terminated

    def register_attempt(self) -> int:
        self.guess_attempts += 1
        return self.guess_attempts

    def mark_solved(self) -> None:
        if not self.is_solved:
            logger.info(f"Secret guessed after {self.guess_attempts} attempts")
        self.is_solved = True

    def terminate(self) -> None:
        if not self.is_terminated:
            logger.info("Session terminated")
        self.is_terminated = True

    # ── Help reveals ─────────────────────────────────────────

    @property
    def can_reveal(self) -> bool:
        return self.cheat_attempts < MAX_CHEAT_ATTEMPTS

    def hidden_positions(self) -> List[int]:
        return [i for i, digit in enumerate(self.reveal_mask) if digit is None]

    def reveal(self, position: int) -> bool:
        """
        Reveal the secret digit at a position.

        Returns:
            True if the position was hidden and is now revealed,
            False if it was already revealed or the budget is spent
        """
        if not self.can_reveal or self.reveal_mask[position] is not None:
            return False
        self.reveal_mask[position] = self.secret_number[position]
        self.cheat_attempts += 1
        logger.info(f"Revealed position {position} ({self.cheat_attempts}/{MAX_CHEAT_ATTEMPTS})")
        return True

    def helping_number(self) -> str:
        """The reveal mask as shown to the player, e.g. 'X3XX'."""
        return "".join(HIDDEN_DIGIT if d is None else d for d in self.reveal_mask)
