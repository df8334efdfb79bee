"""
Two-guess lookahead on expected eliminations.

For guess g and every candidate objective (all equally likely):
  1) apply g's feedback and count what it eliminates;
  2) if exactly one word is left the game is as good as won: add a small
     bonus and stop;
  3) otherwise add the expected eliminations of the BEST second guess against
     what is left (we will pick the best, not a random one).
The score is the average over objectives. Objectives that give g the same
feedback give the same answer, so each feedback pattern is computed once.

This is roughly O(n^3) in the candidate count and is only worth it while the
candidate list is large; at or below `min_possible_words_for_combo` candidates
the scorer falls back to single-guess expected eliminations.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Dict, List, Mapping, Optional, Sequence

from wordle_solver.engine import (
    WordBank,
    WordRestrictions,
    compute_feedback,
    filter_candidates,
)
from .base import BaseScorer, GuessFrom, register, scaled
from .max_eliminations import expected_eliminations
from .precompute import ScoreTable, compute_score_table

log = logging.getLogger(__name__)

# Added when the first guess alone pins down the objective.
SOLVED_BONUS = 0.1


def expected_combo_eliminations(word: str, possible_words: Sequence[str],
                                words_to_guess: Sequence[str], guess_from: GuessFrom) -> float:
    n = len(possible_words)
    if n == 0:
        return 0.0
    second_pool = [w for w in words_to_guess if w != word]
    by_pattern: Dict[int, float] = {}
    total = 0.0

    for objective in possible_words:
        result = compute_feedback(objective, word)
        code = result.code()
        if code in by_pattern:
            total += by_pattern[code]
            continue

        still_possible = filter_candidates(possible_words, WordRestrictions.from_result(result))
        eliminated = float(n - len(still_possible))
        if len(still_possible) == 1:
            eliminated += SOLVED_BONUS
        else:
            pool = second_pool if guess_from is GuessFrom.ALL_UNGUESSED_WORDS else still_possible
            best_second = 0.0
            for second in pool:
                best_second = max(best_second, expected_eliminations(second, still_possible))
            eliminated += best_second

        by_pattern[code] = eliminated
        total += eliminated

    return total / n


@register
class MaxComboEliminationsScorer(BaseScorer):
    id = "combo_eliminations"
    name = "Max Combo (two-guess) Eliminations"
    version = "1.0.0"

    DEFAULT_MIN_POSSIBLE_WORDS_FOR_COMBO = 1000
    SOLVED_BONUS = SOLVED_BONUS

    def __init__(self, bank: WordBank, guess_from: GuessFrom = GuessFrom.ALL_UNGUESSED_WORDS,
                 min_possible_words_for_combo: int = DEFAULT_MIN_POSSIBLE_WORDS_FOR_COMBO,
                 first_guess_eliminations: Optional[Mapping[str, float]] = None):
        super().__init__(bank)
        self.guess_from = guess_from
        self.min_possible_words_for_combo = min_possible_words_for_combo
        self.possible_words: List[str] = list(bank)
        self.words_to_guess: List[str] = list(bank)
        self._first_guess_eliminations = first_guess_eliminations

    def _combo_fn(self):
        return partial(
            expected_combo_eliminations,
            possible_words=tuple(self.possible_words),
            words_to_guess=tuple(self.words_to_guess),
            guess_from=self.guess_from,
        )

    def precompute_first_guess_eliminations(self, max_workers: Optional[int] = None) -> ScoreTable:
        """
        Score every bank word for the first round and keep the table.
        Only valid before the first update().
        """
        if self.possible_words != self.words_to_guess:
            raise RuntimeError("first-guess table can only be built before the first update")
        log.info("precomputing combo eliminations for %d words", len(self.words_to_guess))
        fn = self._combo_fn() if self._uses_combo() else partial(
            expected_eliminations, possible_words=tuple(self.possible_words))
        self._first_guess_eliminations = compute_score_table(fn, self.words_to_guess, max_workers)
        return self._first_guess_eliminations

    @property
    def first_guess_eliminations(self) -> Optional[Mapping[str, float]]:
        return self._first_guess_eliminations

    def _uses_combo(self) -> bool:
        return len(self.possible_words) > self.min_possible_words_for_combo

    def expected_eliminations(self, word: str) -> float:
        table = self._first_guess_eliminations
        if table is not None and word in table:
            return table[word]
        if self._uses_combo():
            return expected_combo_eliminations(
                word, self.possible_words, self.words_to_guess, self.guess_from)
        return expected_eliminations(word, self.possible_words)

    def update(self, latest_guess: str, restrictions: WordRestrictions,
               possible_words: Sequence[str]) -> None:
        self.possible_words = list(possible_words)
        self._first_guess_eliminations = None
        if self.guess_from is GuessFrom.ALL_UNGUESSED_WORDS:
            if latest_guess in self.words_to_guess:
                self.words_to_guess.remove(latest_guess)
        else:
            self.words_to_guess = list(possible_words)

    def score_word(self, word: str) -> int:
        return scaled(self.expected_eliminations(word))

    def copy(self) -> "MaxComboEliminationsScorer":
        other = object.__new__(MaxComboEliminationsScorer)
        other.word_length = self.word_length
        other.guess_from = self.guess_from
        other.min_possible_words_for_combo = self.min_possible_words_for_combo
        other.possible_words = list(self.possible_words)
        other.words_to_guess = list(self.words_to_guess)
        other._first_guess_eliminations = self._first_guess_eliminations
        return other
