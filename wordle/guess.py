"""Scored guess value type."""

from dataclasses import dataclass
from typing import Any, Dict

from wordle.correctness import Correctness, Result, format_pattern


def is_winning_guess(result: Result) -> bool:
    """True if every position is CORRECT."""
    return all(c is Correctness.CORRECT for c in result)


@dataclass(frozen=True)
class ScoredGuess:
    """A guessed word paired with its per-position scoring."""
    word: str
    result: Result

    @property
    def is_winning(self) -> bool:
        return is_winning_guess(self.result)

    @property
    def pattern(self) -> str:
        """Compact representation, e.g. ``"WCWWM"``."""
        return format_pattern(self.result)

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for logs."""
        return {"word": self.word, "pattern": self.pattern}
