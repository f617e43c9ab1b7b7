from .config import (
    DEFAULT_MAXIMUM,
    DEFAULT_MINIMUM,
    GUESS_DOMAIN,
    InvalidSettings,
    settings_expander,
    validate_bounds,
)
from .console import parse_unsigned, prompt, write
from .errors import GuessGameError
from .game import Game, GameError, RoundOutcome
from .menu import InvalidChoice, menu
from .secret import SecretGenerator
from .session import Session
from .verdict import Comparison, Verdict, evaluate
from .version import version
