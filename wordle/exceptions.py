"""Exception types shared by the Wordle engine."""


class WordleError(Exception):
    """Base class for every recoverable error raised by the engine."""


class InvariantViolation(AssertionError):
    """Raised when an internal precondition is broken.

    This signals a bug in the engine, not bad user input. Callers should
    not catch it as part of normal play.
    """
