"""Command-line entry point.

Example usage:
  guessgame
  guessgame --minimum 1 --maximum 11 --seed 1234
  guessgame @settings.yaml --log-level debug

To see all options:
  guessgame -h

"""

import logging
import sys

from coleo import Option, default, run_cli, tooled

from .config import (
    DEFAULT_MAXIMUM,
    DEFAULT_MINIMUM,
    InvalidSettings,
    resolve_log_level,
    settings_expander,
    validate_bounds,
)
from .secret import SecretGenerator
from .session import Session

log = logging.getLogger(__name__)


@tooled
def guess(writer=None, reader=None):
    """Guess the secret number."""
    # Smallest possible secret
    minimum: Option & int = default(DEFAULT_MINIMUM)

    # Secrets are always smaller than this number
    maximum: Option & int = default(DEFAULT_MAXIMUM)

    # Seed of the random number generator (defaults to system entropy)
    seed: Option & int = default(None)

    # Logging level (debug, info, warning, error)
    # [metavar: LEVEL]
    log_level: Option & str = default("warning")

    logging.basicConfig(
        level=resolve_log_level(log_level),
        stream=sys.stderr,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    validate_bounds(minimum, maximum)

    session = Session(
        writer or sys.stdout,
        reader or sys.stdin,
        SecretGenerator(seed),
        minimum=minimum,
        maximum=maximum,
    )
    return session.run()


def main(argv=None):
    """Run the guessing game on stdin and stdout."""
    try:
        run_cli(guess, argv=argv, expand=settings_expander())
    except InvalidSettings as err:
        print(f"error: {err}", file=sys.stderr)
        sys.exit(1)
    except (EOFError, KeyboardInterrupt) as err:
        log.info("Stopped: %s", type(err).__name__)
        print(file=sys.stderr)
        sys.exit(1)
