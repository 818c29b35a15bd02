"""Tests for the interactive play loop."""

from io import StringIO

from rich.console import Console

from wordle.game import Game, State
from wordle.session import PlaySession


def _reader(answers):
    """Return a read function that replays ``answers`` in order."""
    iterator = iter(answers)

    def read(prompt):
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError
    return read


class TestPlaySession:
    """Test cases for PlaySession."""

    def setup_method(self):
        self.output = StringIO()
        self.console = Console(file=self.output, width=120)

    def test_win(self):
        game = Game("world")
        session = PlaySession(game, console=self.console, quiet=True)
        assert session.run(_reader(["  CRANE ", "world"])) is State.WON
        assert [g.word for g in game.history] == ["crane", "world"]
        assert "Solved in 2/6" in self.output.getvalue()

    def test_loss_reveals_secret(self):
        game = Game("guess")
        session = PlaySession(game, console=self.console, quiet=True)
        assert session.run(_reader(["xxxxx"] * 5 + ["xuxxg"])) is State.LOST
        assert "GUESS" in self.output.getvalue()

    def test_invalid_guess_is_reprompted(self):
        game = Game("world")
        session = PlaySession(game, console=self.console, quiet=True)
        assert session.run(_reader(["abc", "ab1de", "world"])) is State.WON
        assert session.rejected == 2
        assert len(game.history) == 1
        assert "too short" in self.output.getvalue()

    def test_dictionary_rejects_unknown_words(self):
        game = Game("world")
        session = PlaySession(game, console=self.console, dictionary=["world", "crane"], quiet=True)
        assert session.run(_reader(["xxxxx", "crane", "world"])) is State.WON
        assert session.rejected == 1
        assert "not in the word list" in self.output.getvalue()

    def test_quit(self):
        game = Game("world")
        session = PlaySession(game, console=self.console, quiet=True)
        assert session.run(_reader(["crane", "quit"])) is State.PLAYING
        assert "WORLD" in self.output.getvalue()
        assert len(game.history) == 1

    def test_end_of_input_quits(self):
        game = Game("world")
        session = PlaySession(game, console=self.console, quiet=True)
        assert session.run(_reader([])) is State.PLAYING

    def test_board_is_drawn_when_not_quiet(self):
        game = Game("world")
        session = PlaySession(game, console=self.console)
        session.run(_reader(["world"]))
        assert "Wordle" in self.output.getvalue()
        assert "Q W E R T Y" in self.output.getvalue()
