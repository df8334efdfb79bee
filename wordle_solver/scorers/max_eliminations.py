"""
Maximum Expected Eliminations (exact partition).

Idea:
  For guess g, partition the n CURRENT candidates by the exact feedback each
  would give. If the objective lands in a bucket of size c, the other n - c
  candidates are eliminated, and that happens with probability c / n:
      E[eliminated | g] = sum_c (n - c) * c / n
  Pick the g that maximizes it.

Cost:
  Scoring one word is O(n); scoring the whole bank before the first guess is
  O(n^2). That first round is identical for every game over the same bank, so
  it is computed once (in parallel, see precompute.py) and kept as a
  word -> float table that every copy() of the scorer shares. After the first
  update() scores are computed live against the shrinking candidate list.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Mapping, Optional, Sequence

import numpy as np

from wordle_solver.engine import WordBank, WordRestrictions, feedback_code
from .base import BaseScorer, register, scaled
from .precompute import ScoreTable, compute_score_table

log = logging.getLogger(__name__)


def expected_eliminations(guess: str, possible_words: Sequence[str]) -> float:
    """Expected number of `possible_words` that `guess` eliminates."""
    n = len(possible_words)
    if n == 0:
        return 0.0
    codes = np.fromiter((feedback_code(w, guess) for w in possible_words), dtype=np.int64, count=n)
    _, counts = np.unique(codes, return_counts=True)
    return float(((n - counts) * counts).sum()) / n


@register
class MaxEliminationsScorer(BaseScorer):
    id = "max_eliminations"
    name = "Max Expected Eliminations"
    version = "1.0.0"

    def __init__(self, bank: WordBank, first_guess_eliminations: Optional[Mapping[str, float]] = None,
                 max_workers: Optional[int] = None):
        super().__init__(bank)
        self.possible_words = list(bank)
        if first_guess_eliminations is None:
            log.info("precomputing first-guess eliminations for %d words", len(bank))
            first_guess_eliminations = compute_score_table(
                partial(expected_eliminations, possible_words=tuple(bank)),
                self.possible_words,
                max_workers=max_workers,
            )
        self._first_guess_eliminations: Optional[Mapping[str, float]] = first_guess_eliminations

    @classmethod
    def from_first_guess_eliminations(cls, table: Mapping[str, float],
                                      bank: WordBank) -> "MaxEliminationsScorer":
        """Rebuild a scorer from a previously exported first-guess table."""
        if not table:
            raise ValueError("first-guess eliminations table is empty")
        return cls(bank, first_guess_eliminations=dict(table))

    @property
    def first_guess_eliminations(self) -> Optional[ScoreTable]:
        """The shared first-round table, or None once the scorer has been updated."""
        return self._first_guess_eliminations

    def update(self, latest_guess: str, restrictions: WordRestrictions,
               possible_words: Sequence[str]) -> None:
        self.possible_words = list(possible_words)
        self._first_guess_eliminations = None

    def score_word(self, word: str) -> int:
        table = self._first_guess_eliminations
        if table is not None and word in table:
            return scaled(table[word])
        return scaled(expected_eliminations(word, self.possible_words))

    def copy(self) -> "MaxEliminationsScorer":
        other = object.__new__(MaxEliminationsScorer)
        other.word_length = self.word_length
        other.possible_words = list(self.possible_words)
        other._first_guess_eliminations = self._first_guess_eliminations
        return other
