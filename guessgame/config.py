"""Game settings.

Options can be given on the command line or read from settings files
through coleo's argument expansion: ``guessgame @settings.yaml`` reads
the keys of the file (``minimum``, ``maximum``, ``seed``, ``log-level``)
as if they were given as ``--minimum`` and so on. Any file format coleo
knows (json, yaml, toml, cfg/ini) may be used. ``SETTINGS_FILE`` is read
first when it exists.
"""

import logging
import os

from coleo import ArgsExpander

from .errors import GuessGameError

DEFAULT_MINIMUM = 0
DEFAULT_MAXIMUM = 100

# Guesses are unsigned bytes
GUESS_DOMAIN = (0, 255)

SETTINGS_FILE = os.path.expanduser("~/.config/guessgame/settings.toml")


class InvalidSettings(GuessGameError):
    """Raised when user-provided settings cannot be used."""


def validate_bounds(minimum, maximum):
    """Check that secrets can be drawn from [minimum, maximum).

    Every secret must also be a valid guess, so the range must fit in
    the guess domain.
    """
    low, high = GUESS_DOMAIN
    if minimum >= maximum:
        raise InvalidSettings(
            f"minimum ({minimum}) must be smaller than maximum ({maximum})"
        )
    if minimum < low or maximum > high + 1:
        raise InvalidSettings(
            f"the range [{minimum}, {maximum}) must lie within"
            f" [{low}, {high + 1})"
        )
    return minimum, maximum


def resolve_log_level(name):
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise InvalidSettings(f"unknown log level: '{name}'")
    return level


def settings_expander(default_file=SETTINGS_FILE):
    """Expand ``@file`` arguments into options.

    Arguments:
        default_file: Settings file that is always read first if it
            exists. None disables it.
    """
    return ArgsExpander(prefix="@", default_file=default_file)
