# Area: Collaborators
"""
bulls_and_cows.random_provider — Random number sources
======================================================

The game draws the secret number and help reveal positions through a
RandomNumberProvider so tests can substitute a fixed sequence.
"""

import random
from typing import Optional, Protocol


class RandomNumberProvider(Protocol):
    """Protocol for random number sources."""

    def generate_number(self, min_value: int, max_value: int) -> int:
        """Return an integer in [min_value, max_value], both inclusive."""
        ...


class DefaultRandomNumberProvider:
    """RandomNumberProvider backed by random.Random."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def generate_number(self, min_value: int, max_value: int) -> int:
        if min_value > max_value:
            raise ValueError(f"Empty range: [{min_value}, {max_value}]")
        return self._random.randint(min_value, max_value)
