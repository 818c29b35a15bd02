"""Interactive play loop that drives a Game from console input."""

import logging
from typing import Callable, Iterable, Optional

from rich.console import Console

from wordle.game import Game, State
from wordle.render import render_board, render_keyboard
from wordle.validation import ValidationError

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit"}


class PlaySession:
    """Prompt for guesses until the game ends or the player quits.

    Args:
        game: The game to drive
        console: Rich console used for prompts and output
        dictionary: Allowed guesses; None accepts any valid word
        quiet: Suppress the board display between guesses
    """

    def __init__(
        self,
        game: Game,
        console: Optional[Console] = None,
        dictionary: Optional[Iterable[str]] = None,
        quiet: bool = False,
    ):
        self.game = game
        self.console = console or Console()
        self.dictionary = set(dictionary) if dictionary is not None else None
        self.quiet = quiet
        self.rejected = 0

    def _print(self, *args, **kwargs):
        """Print to console unless in quiet mode."""
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def read_guess(self, read: Optional[Callable[[str], str]] = None) -> str:
        """Prompt once and return the trimmed, lowercased answer."""
        read = read or self.console.input
        prompt = f"Guess {len(self.game.history) + 1}/{self.game.max_attempts}: "
        return read(prompt).strip().lower()

    def submit(self, word: str) -> bool:
        """Try one guess. Returns False if it was rejected."""
        if self.dictionary is not None and word not in self.dictionary:
            self.console.print(f"[red]'{word}' is not in the word list[/red]")
            self.rejected += 1
            return False
        try:
            guess = self.game.play(word)
        except ValidationError as e:
            self.console.print(f"[red]{e}[/red]")
            self.rejected += 1
            return False

        self._print(render_board(self.game))
        self._print(render_keyboard(self.game.history))
        logger.debug(f"Accepted guess {guess.word} ({guess.pattern})")
        return True

    def run(self, read: Optional[Callable[[str], str]] = None) -> State:
        """Play until the game is over or the player quits.

        Returns the final state; PLAYING means the player quit early.
        """
        self._print(
            f"\n[bold]Wordle[/bold] - guess the {len(self.game.secret)} letter word "
            f"in {self.game.max_attempts} tries. Type 'quit' to give up."
        )
        while not self.game.is_over:
            try:
                word = self.read_guess(read)
            except EOFError:
                word = "quit"
            if word in QUIT_COMMANDS:
                self.console.print(f"[yellow]Gave up. The word was [bold]{self.game.secret.upper()}[/bold][/yellow]")
                logger.info("Player quit before the game ended")
                return self.game.state
            self.submit(word)

        self.announce()
        return self.game.state

    def announce(self):
        """Print the outcome of a finished game."""
        tries = len(self.game.history)
        if self.game.state is State.WON:
            self.console.print(f"[green]Solved in {tries}/{self.game.max_attempts}![/green]")
        elif self.game.state is State.LOST:
            self.console.print(
                f"[red]Out of guesses! The word was [bold]{self.game.secret.upper()}[/bold][/red]"
            )
