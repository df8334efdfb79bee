"""
Error taxonomy for the guessing engine.

- LengthMismatch      : a word/guess/result has the wrong length for this game.
- InconsistentFeedback: accumulated feedback contradicts itself.
- FeedbackInputError  : an interactive feedback line could not be parsed.

An unknown objective word is NOT an exception; it is a game outcome
(see harness.game.GameStatus.UNKNOWN_WORD).
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for every error raised by wordle_solver."""


class LengthMismatch(WordleError, ValueError):
    def __init__(self, expected: int, actual: int, word: str | None = None):
        self.expected = expected
        self.actual = actual
        self.word = word
        detail = f" ({word!r})" if word is not None else ""
        super().__init__(f"expected a word of length {expected}, got length {actual}{detail}")


class InconsistentFeedback(WordleError):
    """Feedback contradicts what is already known about the objective word."""


class FeedbackInputError(WordleError, ValueError):
    """An interactive feedback string is malformed (wrong length or characters)."""
