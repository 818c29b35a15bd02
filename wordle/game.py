"""Core game logic for Wordle."""

import logging
from enum import Enum
from typing import Tuple

from wordle.correctness import evaluate
from wordle.exceptions import WordleError
from wordle.guess import ScoredGuess
from wordle.validation import validate

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 6


class State(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not State.PLAYING


class GameError(WordleError):
    """Raised when a guess is submitted to a finished game."""


class GameOverError(GameError):
    def __init__(self):
        super().__init__("You've lost this game. Start a new one to keep playing")


class GameWonError(GameError):
    def __init__(self):
        super().__init__("You've already won this game. Start a new one to play again")


class Game:
    """A single Wordle session.

    The game owns the secret, the guesses made so far and the current
    state. ``play`` is the only way to change any of them, and it refuses
    to do so once the game is won or lost.

    Instances are not thread-safe; a game should be owned by one caller
    at a time.
    """

    max_attempts = MAX_ATTEMPTS

    def __init__(self, secret: str):
        validate(secret)
        self._secret = secret
        self._state = State.PLAYING
        self._history = []
        logger.debug("New game created")

    @property
    def state(self) -> State:
        return self._state

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def history(self) -> Tuple[ScoredGuess, ...]:
        """Guesses made so far, oldest first."""
        return tuple(self._history)

    @property
    def remaining_attempts(self) -> int:
        return self.max_attempts - len(self._history)

    @property
    def is_over(self) -> bool:
        return self._state.is_terminal

    def play(self, word: str) -> ScoredGuess:
        """Submit a guess.

        Args:
            word: Five lowercase letters

        Returns:
            The scored guess that was appended to the history

        Raises:
            GameOverError: the game is already lost
            GameWonError: the game is already won
            ValidationError: ``word`` is not five lowercase letters
        """
        if self._state is State.LOST:
            logger.debug("Rejected guess: game already lost")
            raise GameOverError()
        if self._state is State.WON:
            logger.debug("Rejected guess: game already won")
            raise GameWonError()

        validate(word)
        guess = ScoredGuess(word=word, result=evaluate(self._secret, word))
        self._history.append(guess)
        logger.debug(f"Guess {len(self._history)}/{self.max_attempts}: {guess.to_dict()}")

        if guess.is_winning:
            self._state = State.WON
            logger.info(f"Game won in {len(self._history)} guesses")
        elif len(self._history) >= self.max_attempts:
            self._state = State.LOST
            logger.info(f"Game lost after {len(self._history)} guesses")

        return guess
