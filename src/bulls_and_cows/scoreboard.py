# Area: Collaborators
"""
bulls_and_cows.scoreboard — Leaderboard
=======================================

Defines the PlayerScore record and the in-memory ScoreBoard that
collects one record per solved game.
"""

import logging
from dataclasses import dataclass
from typing import List

logger = logging.getLogger("bulls_and_cows.scoreboard")


@dataclass(frozen=True)
class PlayerScore:
    """
    Result of one solved game.

    Attributes:
        name: Player name
        attempts: Lines entered until the secret was guessed
        cheats: Number of help reveals used
    """

    name: str
    attempts: int
    cheats: int = 0


class ScoreBoard:
    """
    Append-only collection of player scores.

    The leaderboard view is sorted by ascending attempts; equal
    attempts keep the order in which they were recorded.
    """

    def __init__(self):
        self._scores: List[PlayerScore] = []

    def __len__(self) -> int:
        return len(self._scores)

    def add_player_score(self, score: PlayerScore) -> None:
        self._scores.append(score)
        logger.info(f"Recorded score: {score.name} in {score.attempts} attempts")

    @property
    def leaderboard(self) -> List[PlayerScore]:
        return sorted(self._scores, key=lambda s: s.attempts)

    def top(self, count: int) -> List[PlayerScore]:
        return self.leaderboard[:count]
