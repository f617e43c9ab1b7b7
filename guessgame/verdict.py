from collections import namedtuple
from enum import Enum


class Comparison(Enum):
    TOO_LOW = "too low"
    TOO_HIGH = "too high"
    CORRECT = "correct"


class Verdict(namedtuple("Verdict", ["comparison", "guess"])):
    """The result of comparing a guess to the secret."""

    __slots__ = ()

    @property
    def correct(self):
        return self.comparison is Comparison.CORRECT

    @property
    def message(self):
        if self.correct:
            return "Correct! "
        return f"{self.guess} is {self.comparison.value}!"


def evaluate(guess, secret):
    if guess < secret:
        return Verdict(Comparison.TOO_LOW, guess)
    elif guess > secret:
        return Verdict(Comparison.TOO_HIGH, guess)
    else:
        return Verdict(Comparison.CORRECT, guess)
