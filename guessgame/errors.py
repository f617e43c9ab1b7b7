class GuessGameError(Exception):
    """Base class for the errors raised by guessgame."""
