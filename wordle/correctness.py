"""Letter-by-letter scoring of a guess against the secret word.

This module is the single source of truth for the scoring rules. Both the
game state machine and the ``score`` command call ``evaluate``.
"""

from enum import Enum
from typing import Tuple

from wordle.exceptions import InvariantViolation
from wordle.validation import WORD_LENGTH, validate

_ALPHABET_SIZE = ord("z") - ord("a") + 1


class Correctness(Enum):
    """Classification of a single guessed letter."""
    CORRECT = "C"
    MISPLACED = "M"
    WRONG = "W"

    @classmethod
    def from_code(cls, code: str) -> "Correctness":
        """Build from a one-letter code (``C``, ``M`` or ``W``)."""
        return cls(code.upper())


Result = Tuple[Correctness, Correctness, Correctness, Correctness, Correctness]


def evaluate(secret: str, candidate: str) -> Result:
    """Score ``candidate`` against ``secret``.

    Exact matches are resolved first. Every secret letter that was not
    matched exactly is counted as unaccounted, and the second pass lets a
    remaining guessed letter claim one of those counts to become
    MISPLACED. A letter guessed more often than it is still available is
    WRONG for the surplus occurrences.

    Args:
        secret: The hidden word
        candidate: The guessed word

    Returns:
        Five Correctness values, one per position

    Raises:
        ValidationError: if either word is not five lowercase letters
    """
    validate(secret)
    validate(candidate)
    if len(secret) != WORD_LENGTH or len(candidate) != WORD_LENGTH:
        raise InvariantViolation(
            f"evaluate() needs {WORD_LENGTH} letter words, got {len(secret)} and {len(candidate)}"
        )

    result = [Correctness.WRONG] * WORD_LENGTH
    # 0 for each letter a-z
    unaccounted = [0] * _ALPHABET_SIZE

    for idx, (g, t) in enumerate(zip(candidate, secret)):
        if g == t:
            result[idx] = Correctness.CORRECT
        else:
            unaccounted[ord(t) - ord("a")] += 1

    for idx, g in enumerate(candidate):
        if result[idx] is Correctness.CORRECT:
            continue
        slot = ord(g) - ord("a")
        if unaccounted[slot] > 0:
            result[idx] = Correctness.MISPLACED
            unaccounted[slot] -= 1

    return tuple(result)


def parse_pattern(pattern: str) -> Result:
    """Turn a pattern such as ``"CMWWC"`` into a result tuple."""
    compact = pattern.replace(" ", "")
    if len(compact) != WORD_LENGTH:
        raise ValueError(f"Pattern must have {WORD_LENGTH} codes, got {pattern!r}")
    return tuple(Correctness.from_code(code) for code in compact)


def format_pattern(result: Result) -> str:
    """Turn a result tuple into its compact ``C``/``M``/``W`` string."""
    return "".join(c.value for c in result)
