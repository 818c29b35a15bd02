"""Rich rendering of scored guesses and boards."""

from typing import Dict, Iterable

from rich.table import Table
from rich.text import Text

from wordle.correctness import Correctness
from wordle.game import Game
from wordle.guess import ScoredGuess
from wordle.validation import WORD_LENGTH

STYLES = {
    Correctness.CORRECT: "bold green",
    Correctness.MISPLACED: "bold yellow",
    Correctness.WRONG: "dim strike",
}

_PRIORITY = {
    Correctness.CORRECT: 2,
    Correctness.MISPLACED: 1,
    Correctness.WRONG: 0,
}

KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")


def render_guess(guess: ScoredGuess) -> Text:
    """Color each letter by its correctness."""
    text = Text()
    for char, correctness in zip(guess.word, guess.result):
        text.append(char.upper(), style=STYLES[correctness])
    return text


def letter_status(history: Iterable[ScoredGuess]) -> Dict[str, Correctness]:
    """Best known status per guessed letter (CORRECT > MISPLACED > WRONG)."""
    status: Dict[str, Correctness] = {}
    for guess in history:
        for char, correctness in zip(guess.word, guess.result):
            current = status.get(char)
            if current is None or _PRIORITY[correctness] > _PRIORITY[current]:
                status[char] = correctness
    return status


def render_keyboard(history: Iterable[ScoredGuess]) -> Text:
    """Keyboard summary; unused letters stay unstyled."""
    status = letter_status(history)
    text = Text()
    for i, row in enumerate(KEYBOARD_ROWS):
        if i:
            text.append("\n")
        text.append(" " * i)
        for char in row:
            style = STYLES[status[char]] if char in status else ""
            text.append(char.upper() + " ", style=style)
    return text


def render_board(game: Game) -> Table:
    """Board with one row per attempt; unplayed rows are blank."""
    table = Table(show_header=False, show_lines=True)
    for _ in range(WORD_LENGTH):
        table.add_column(justify="center", min_width=3)

    for guess in game.history:
        table.add_row(*[
            Text(char.upper(), style=STYLES[correctness])
            for char, correctness in zip(guess.word, guess.result)
        ])
    for _ in range(game.remaining_attempts):
        table.add_row(*[""] * WORD_LENGTH)

    return table
