"""Wordle: guess the five letter word in six tries.

Each guess is scored letter by letter:
- Correct: the letter is in the right position
- Misplaced: the letter is in the word, but elsewhere
- Wrong: the letter does not appear (or all its occurrences are used up)
"""

from wordle.correctness import Correctness, evaluate
from wordle.exceptions import InvariantViolation, WordleError
from wordle.game import MAX_ATTEMPTS, Game, GameError, GameOverError, GameWonError, State
from wordle.guess import ScoredGuess
from wordle.validation import (
    WORD_LENGTH,
    InvalidCharactersError,
    TooLongError,
    TooShortError,
    ValidationError,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "Correctness",
    "evaluate",
    "Game",
    "State",
    "MAX_ATTEMPTS",
    "ScoredGuess",
    "WORD_LENGTH",
    "validate",
    "WordleError",
    "InvariantViolation",
    "GameError",
    "GameOverError",
    "GameWonError",
    "ValidationError",
    "TooShortError",
    "TooLongError",
    "InvalidCharactersError",
]
