import logging
from types import SimpleNamespace

from .config import DEFAULT_MAXIMUM, DEFAULT_MINIMUM
from .console import write
from .game import Game, GameError, RoundOutcome
from .menu import INVALID_CHOICE, InvalidChoice, menu
from .secret import SecretGenerator

log = logging.getLogger(__name__)

BANNER = "Welcome to the guessing game!\n\n"

PLAY = 1
EXIT = 2
OPTIONS = ["play game", "exit"]


class Session:
    """Run rounds of the guessing game until the user picks "exit".

    Attributes:
        writer: Output stream shared by the menu and the rounds.
        reader: Input stream shared by the menu and the rounds.
        generator: The SecretGenerator that picks each round's secret.
        minimum: Smallest possible secret.
        maximum: Secrets are strictly smaller than this.
        summary: Number of rounds played, won and quit.
    """

    def __init__(
        self,
        writer,
        reader,
        generator=None,
        minimum=DEFAULT_MINIMUM,
        maximum=DEFAULT_MAXIMUM,
    ):
        self.writer = writer
        self.reader = reader
        self.generator = generator or SecretGenerator()
        self.minimum = minimum
        self.maximum = maximum
        self.summary = SimpleNamespace(rounds=0, won=0, quit=0)

    def play_round(self):
        secret = self.generator.generate(self.minimum, self.maximum)
        log.debug(
            "New round, secret drawn from [%s, %s)", self.minimum, self.maximum
        )
        game = Game(
            secret,
            self.writer,
            self.reader,
            minimum=self.minimum,
            maximum=self.maximum,
        )
        outcome = game.play()
        self.summary.rounds += 1

        if outcome is RoundOutcome.QUIT:
            self.summary.quit += 1
            write(self.writer, "You quit. ")
        elif outcome is RoundOutcome.WON:
            self.summary.won += 1
            write(self.writer, "You won!\n")
        else:
            write(self.writer, "An unknown Error occurred.")
            raise GameError(f"Round ended with outcome {outcome}")

        write(self.writer, "Play again?\n")
        return outcome

    def run(self):
        """Show the menu in a loop and return the session summary."""
        write(self.writer, BANNER)
        log.info("Session started")

        while True:
            try:
                choice = menu(OPTIONS, self.writer, self.reader)
            except InvalidChoice as err:
                log.debug("Invalid menu choice")
                write(self.writer, f"{err}\n")
                continue

            if choice == PLAY:
                self.play_round()
            elif choice == EXIT:
                break
            else:
                write(self.writer, f"{INVALID_CHOICE}\n")

        log.info(
            "Session over: %s rounds, %s won, %s quit",
            self.summary.rounds,
            self.summary.won,
            self.summary.quit,
        )
        return self.summary
