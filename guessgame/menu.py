from .console import parse_unsigned, prompt, write
from .errors import GuessGameError

INVALID_CHOICE = "Invalid choice!"


class InvalidChoice(GuessGameError):
    """The menu input was not the number of one of the options."""

    def __init__(self, message=INVALID_CHOICE):
        super().__init__(message)


def menu(options, writer, reader):
    """Show numbered options and return the number the user picks.

    Options are numbered from 1.

    Raises:
        InvalidChoice: The input is not a number, or it does not
            correspond to an option.
    """
    write(writer, "\nPlease choose from the following...\n")
    for index, option in enumerate(options, start=1):
        write(writer, f"{index}) {option}\n")

    choice = parse_unsigned(prompt(writer, reader))
    if choice is None or not 1 <= choice <= len(options):
        raise InvalidChoice()
    return choice
