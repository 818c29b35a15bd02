"""Input validation shared by game construction and guess submission.

Every word that reaches the evaluator passes through ``validate`` first,
whether it is the secret or a candidate guess.
"""

import re

from wordle.exceptions import WordleError

WORD_LENGTH = 5

_LETTERS = re.compile(r"[a-z]+")


class ValidationError(WordleError, ValueError):
    """Raised when a word is not exactly five lowercase letters."""

    message = "Invalid input"

    def __init__(self, word: str = ""):
        self.word = word
        super().__init__(self.message)


class TooShortError(ValidationError):
    message = f"Input too short. Please supply a {WORD_LENGTH} letter word"


class TooLongError(ValidationError):
    message = f"Input too long. Please supply a {WORD_LENGTH} letter word"


class InvalidCharactersError(ValidationError):
    message = "Input contains invalid characters. Please only use a-z"


def validate(word: str) -> None:
    """Check that ``word`` is exactly five characters from a-z.

    Raises:
        TooShortError: fewer than five characters
        TooLongError: more than five characters
        InvalidCharactersError: anything outside a-z
    """
    if len(word) < WORD_LENGTH:
        raise TooShortError(word)
    if len(word) > WORD_LENGTH:
        raise TooLongError(word)
    if not _LETTERS.fullmatch(word):
        raise InvalidCharactersError(word)


def is_valid(word: str) -> bool:
    """Return True if ``word`` would pass ``validate``."""
    try:
        validate(word)
    except ValidationError:
        return False
    return True
