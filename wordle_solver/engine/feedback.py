"""
Wordle-style feedback for a single (objective, guess) pair.

Conventions (also the interactive encoding, one character per letter):
  - 'g' : CORRECT           = right letter, right position
  - 'y' : PRESENT_ELSEWHERE = letter is in the word, but not here
  - '.' : ABSENT            = letter not present (or present fewer times than guessed)

Algorithm (two-pass, duplicate-safe):
  1) First pass marks every exact match CORRECT and counts the objective's
     letters that were NOT matched.
  2) Second pass walks the guess left to right and marks PRESENT_ELSEWHERE only
     while the letter still has an unclaimed occurrence, consuming one each time.

So every distinct letter gets exactly min(count in guess, count in objective)
non-absent marks, and CORRECT always wins over PRESENT_ELSEWHERE.

Examples:
  compute_feedback("mesas", "sassy").pattern() -> "yyg.."
  compute_feedback("abba", "babb").pattern()   -> "yyg."
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .errors import FeedbackInputError, LengthMismatch


class LetterOutcome(Enum):
    CORRECT = "g"
    PRESENT_ELSEWHERE = "y"
    ABSENT = "."


# Digit used for each outcome in the compressed (base-3) feedback code.
_CODE_DIGIT = {
    LetterOutcome.ABSENT: 0,
    LetterOutcome.PRESENT_ELSEWHERE: 1,
    LetterOutcome.CORRECT: 2,
}


@dataclass(frozen=True)
class FeedbackResult:
    """The guess plus one outcome per letter position. Immutable."""
    guess: str
    outcomes: Tuple[LetterOutcome, ...]

    def __post_init__(self):
        if len(self.guess) != len(self.outcomes):
            raise LengthMismatch(len(self.guess), len(self.outcomes), self.guess)

    def is_solved(self) -> bool:
        return all(o is LetterOutcome.CORRECT for o in self.outcomes)

    def pattern(self) -> str:
        """The 'g'/'y'/'.' string for this result, e.g. "g.gy."."""
        return "".join(o.value for o in self.outcomes)

    def code(self) -> int:
        """Compressed form; two results of the same length are equal iff their codes are."""
        code = 0
        for o in reversed(self.outcomes):
            code = code * 3 + _CODE_DIGIT[o]
        return code

    @classmethod
    def from_pattern(cls, guess: str, pattern: str) -> "FeedbackResult":
        return parse_feedback(guess, pattern)


def _mark(objective: str, guess: str) -> List[LetterOutcome]:
    if len(guess) != len(objective):
        raise LengthMismatch(len(objective), len(guess), guess)

    n = len(guess)
    marks = [LetterOutcome.ABSENT] * n

    # Pass 1: greens, and the objective's leftover letters.
    remaining: Counter = Counter()
    for i, (g, o) in enumerate(zip(guess, objective)):
        if g == o:
            marks[i] = LetterOutcome.CORRECT
        else:
            remaining[o] += 1

    # Pass 2: yellows, capped by the leftover multiplicity.
    for i, g in enumerate(guess):
        if marks[i] is LetterOutcome.CORRECT:
            continue
        if remaining[g] > 0:
            marks[i] = LetterOutcome.PRESENT_ELSEWHERE
            remaining[g] -= 1

    return marks


def compute_feedback(objective: str, guess: str) -> FeedbackResult:
    """
    Compute the feedback `guess` receives when the hidden word is `objective`.

    Raises:
      LengthMismatch if the two words differ in length.
    """
    return FeedbackResult(guess, tuple(_mark(objective, guess)))


def feedback_code(objective: str, guess: str) -> int:
    """Same as compute_feedback(objective, guess).code(), without building the result."""
    code = 0
    for o in reversed(_mark(objective, guess)):
        code = code * 3 + _CODE_DIGIT[o]
    return code


_BY_CHAR = {o.value: o for o in LetterOutcome}


def parse_feedback(guess: str, text: str) -> FeedbackResult:
    """
    Parse an interactive feedback line aligned 1:1 with `guess`.

    Accepts only '.', 'y' and 'g' (lowercase only, surrounding
    whitespace ignored). Anything else raises FeedbackInputError so the caller can re-prompt.
    """
    line = text.strip()
    if len(line) != len(guess):
        raise FeedbackInputError(
            f"Input {line!r} didn't match the length of the guess {guess!r} ({len(guess)} letters)."
        )
    bad = sorted({ch for ch in line if ch not in _BY_CHAR})
    if bad:
        raise FeedbackInputError(
            f"Must enter only the characters '.', 'y', or 'g' (got {''.join(bad)!r})."
        )
    return FeedbackResult(guess, tuple(_BY_CHAR[ch] for ch in line))


def count_marks(result: FeedbackResult, letter: str) -> Tuple[int, int]:
    """(non-absent marks, absent marks) for `letter` within one guess."""
    present = absent = 0
    for ch, o in zip(result.guess, result.outcomes):
        if ch != letter:
            continue
        if o is LetterOutcome.ABSENT:
            absent += 1
        else:
            present += 1
    return present, absent

