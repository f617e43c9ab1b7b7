import pytest

from guessgame import GameError, RoundOutcome, Session

from .common import FixedSecret, scripted_io

MENU = "\nPlease choose from the following...\n1) play game\n2) exit\n> \n"


def run(secret, *lines):
    writer, reader = scripted_io(*lines)
    generator = FixedSecret(secret)
    session = Session(writer, reader, generator)
    summary = session.run()
    return summary, writer.getvalue(), generator


def test_exit():
    summary, output, generator = run(5, "2")
    assert output == "Welcome to the guessing game!\n\n" + MENU
    assert summary.rounds == 0
    assert generator.calls == []


def test_win():
    summary, output, generator = run(5, "1", "5", "2")
    assert output == (
        "Welcome to the guessing game!\n\n"
        + MENU
        + "Guess a number...\n> \nCorrect! You won!\nPlay again?\n"
        + MENU
    )
    assert (summary.rounds, summary.won, summary.quit) == (1, 1, 0)
    assert generator.calls == [(0, 100)]


def test_quit():
    summary, output, _ = run(5, "1", "quit", "2")
    assert "Quitting...\nYou quit. Play again?\n" in output
    assert "You won!" not in output
    assert (summary.rounds, summary.won, summary.quit) == (1, 0, 1)


def test_invalid_choice_shows_menu_again():
    summary, output, _ = run(5, "3", "zero", "2")
    assert output.count("Invalid choice!\n") == 2
    assert output.count("Please choose from the following...") == 3
    assert summary.rounds == 0


def test_several_rounds():
    summary, output, generator = run(
        5, "1", "4", "6", "5", "1", "quit", "1", "5", "2"
    )
    assert (summary.rounds, summary.won, summary.quit) == (3, 2, 1)
    assert len(generator.calls) == 3
    assert output.count("Play again?") == 3


def test_bounds_are_forwarded():
    writer, reader = scripted_io("1", "x", "3", "2")
    generator = FixedSecret(3)
    Session(writer, reader, generator, minimum=1, maximum=10).run()
    assert generator.calls == [(1, 10)]
    assert "belonging to [1,10]" in writer.getvalue()


def test_end_of_input():
    writer, reader = scripted_io("1", "7")
    with pytest.raises(EOFError):
        Session(writer, reader, FixedSecret(5)).run()


def test_unknown_outcome(monkeypatch):
    monkeypatch.setattr(
        "guessgame.session.Game.play", lambda self: RoundOutcome.UNKNOWN
    )
    writer, reader = scripted_io("1", "2")
    with pytest.raises(GameError):
        Session(writer, reader, FixedSecret(5)).run()
    assert writer.getvalue().endswith("An unknown Error occurred.")
