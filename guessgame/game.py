import logging
from enum import Enum

from .config import DEFAULT_MAXIMUM, DEFAULT_MINIMUM, GUESS_DOMAIN
from .console import parse_unsigned, prompt, write
from .errors import GuessGameError
from .verdict import evaluate

log = logging.getLogger(__name__)

QUIT_COMMAND = "quit"


class GameError(GuessGameError):
    """A round ended without being won or quit."""


class RoundOutcome(Enum):
    WON = "won"
    QUIT = "quit"
    # A round that is still going, or that stopped for no known reason
    UNKNOWN = "unknown"


class Game:
    """One round of the guessing game.

    ``play`` prompts for guesses until the secret is found or the player
    enters ``quit``. Input that is neither a valid guess nor ``quit`` is
    reported and the player is asked again.

    Attributes:
        secret: The number to guess.
        writer: Where prompts and verdicts are written.
        reader: Where guesses are read from.
        minimum: Smallest possible secret, shown in the help message.
        maximum: Upper bound of the secrets, shown in the help message.
        attempts: Number of valid guesses made so far.
    """

    def __init__(
        self,
        secret,
        writer,
        reader,
        minimum=DEFAULT_MINIMUM,
        maximum=DEFAULT_MAXIMUM,
    ):
        self.secret = secret
        self.writer = writer
        self.reader = reader
        self.minimum = minimum
        self.maximum = maximum
        self.attempts = 0

    @property
    def invalid_input_message(self):
        return (
            "Invalid input, please guess an integer belonging to"
            f" [{self.minimum},{self.maximum}]"
            f" or enter '{QUIT_COMMAND}' to quit playing.\n"
        )

    def play(self):
        """Play the round and return its RoundOutcome (WON or QUIT)."""
        outcome = RoundOutcome.UNKNOWN

        while outcome is RoundOutcome.UNKNOWN:
            write(self.writer, "Guess a number...\n")
            text = prompt(self.writer, self.reader)
            guess = parse_unsigned(text, *GUESS_DOMAIN)

            if guess is not None:
                self.attempts += 1
                verdict = evaluate(guess, self.secret)
                log.debug(
                    "Guess #%s: %s (%s)",
                    self.attempts,
                    guess,
                    verdict.comparison.value,
                )
                if verdict.correct:
                    write(self.writer, verdict.message)
                    outcome = RoundOutcome.WON
                else:
                    write(self.writer, f"{verdict.message}\n\n")

            elif text == QUIT_COMMAND:
                write(self.writer, "Quitting...\n")
                outcome = RoundOutcome.QUIT

            else:
                log.debug("Invalid guess: %r", text)
                write(self.writer, self.invalid_input_message)

        log.debug(
            "Round over after %s guesses: %s", self.attempts, outcome.value
        )
        assert outcome is not RoundOutcome.UNKNOWN
        return outcome
