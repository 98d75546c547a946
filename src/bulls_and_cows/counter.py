# Area: Game Engine
"""
bulls_and_cows.counter — Bulls and Cows scoring
===============================================

Pure scoring of a guess against the secret number.

Bull = correct digit in the correct position
Cow  = correct digit in the wrong position

Repeated digits are counted with multiset semantics: once the bulls
are removed, each digit value contributes the smaller of its remaining
counts in the secret and in the guess.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class BullsAndCowsResult:
    """Outcome of scoring one guess."""

    bulls: int
    cows: int


class BullsAndCowsCounter:
    """
    Stateless bulls/cows calculator.

    Usage:
        counter = BullsAndCowsCounter()
        result = counter.count("1234", "1243")
        # result.bulls == 2, result.cows == 2
    """

    def count(self, secret: Sequence[str], guess: Sequence[str]) -> BullsAndCowsResult:
        """
        Count bulls and cows for a guess.

        Args:
            secret: The secret digits
            guess: The guessed digits, same length as secret

        Returns:
            BullsAndCowsResult with the bulls and cows counts

        Raises:
            ValueError: If the sequences differ in length
        """
        if len(secret) != len(guess):
            raise ValueError(
                f"Secret and guess must have the same length "
                f"({len(secret)} != {len(guess)})"
            )

        bulls = 0
        secret_rest: Counter = Counter()
        guess_rest: Counter = Counter()

        for secret_digit, guess_digit in zip(secret, guess):
            if secret_digit == guess_digit:
                bulls += 1
            else:
                secret_rest[secret_digit] += 1
                guess_rest[guess_digit] += 1

        cows = sum((secret_rest & guess_rest).values())
        return BullsAndCowsResult(bulls=bulls, cows=cows)
