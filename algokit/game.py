"""A number-guessing game between 1 and 100."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Optional

LOWEST = 1
HIGHEST = 100
ALLOWED_ATTEMPTS = 2


class Verdict(enum.Enum):
    """How a guess compares with the hidden number."""

    TOO_HIGH = "higher phase please"
    TOO_LOW = "lower phase please"
    GUESSED = "guessed"
    LATE = "guessed too late"


@dataclass(frozen=True)
class GuessResult:
    """The verdict on one guess and the number of attempts made so far."""

    verdict: Verdict
    attempts: int


class GuessGame:
    """Hide a number and judge guesses; finding it within two attempts wins."""

    def __init__(self, number: Optional[int] = None, rng: Optional[random.Random] = None):
        if number is None:
            number = (rng or random.Random()).randint(LOWEST, HIGHEST)
        if not LOWEST <= number <= HIGHEST:
            raise ValueError(f"number must lie between {LOWEST} and {HIGHEST}")
        self.number = number
        self.attempts = 0
        self.finished = False

    def guess(self, value: int) -> GuessResult:
        """Judge one guess; raises RuntimeError once the number has been found."""
        if self.finished:
            raise RuntimeError("the game is over")
        self.attempts += 1
        if value > self.number:
            verdict = Verdict.TOO_HIGH
        elif value < self.number:
            verdict = Verdict.TOO_LOW
        else:
            self.finished = True
            verdict = Verdict.GUESSED if self.attempts <= ALLOWED_ATTEMPTS else Verdict.LATE
        return GuessResult(verdict, self.attempts)