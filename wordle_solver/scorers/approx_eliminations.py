"""
Approximate Expected Eliminations.

For each letter of a guess, estimate how many candidates its outcome removes,
weighting each possible outcome by the fraction of candidates that produce it:

    correct             : (n - here) * here / n
    present elsewhere   : (n - elsewhere) * elsewhere / n
    absent (first occurrence of the letter only)
                        : with_letter * (n - with_letter) / n

where `here` counts candidates with the letter at this position, `with_letter`
counts candidates containing it anywhere and `elsewhere = with_letter - here`.
The per-letter expectations are summed. Frequency tables only, so this is far
cheaper than the exact partition in max_eliminations.

Example (candidates: could, match, coast; letter 'c' of "could" at 0):
  correct removes match (1 * 2/3), elsewhere removes could+coast (2 * 1/3),
  absent removes all three but nobody lacks 'c' (3 * 0/3).
"""

from __future__ import annotations
from typing import Sequence

from wordle_solver.engine import WordBank, WordCounter, WordRestrictions
from .base import BaseScorer, register, scaled


def _letter_expectation(counter: WordCounter, letter: str, index: int, is_new_letter: bool) -> float:
    total = counter.num_words
    num_here = counter.num_words_with_located_letter(letter, index)
    num_with_letter = counter.num_words_with_letter(letter)
    num_elsewhere = num_with_letter - num_here

    expected = ((total - num_here) * num_here + (total - num_elsewhere) * num_elsewhere) / total
    if not is_new_letter:
        # The absent branch was already counted at the letter's first position.
        return expected
    num_without = total - num_with_letter
    return expected + num_with_letter * num_without / total


@register
class MaxApproximateEliminationsScorer(BaseScorer):
    id = "approx_eliminations"
    name = "Approximate Expected Eliminations"
    version = "1.0.0"

    def __init__(self, bank: WordBank):
        super().__init__(bank)
        self.counter = WordCounter(bank)

    def update(self, latest_guess: str, restrictions: WordRestrictions,
               possible_words: Sequence[str]) -> None:
        self.counter = WordCounter(possible_words)

    def expected_eliminations(self, word: str) -> float:
        if self.counter.num_words == 0:
            return 0.0
        return sum(
            _letter_expectation(self.counter, letter, index, letter not in word[:index])
            for index, letter in enumerate(word)
        )

    def score_word(self, word: str) -> int:
        return scaled(self.expected_eliminations(word))

    def copy(self) -> "MaxApproximateEliminationsScorer":
        other = object.__new__(MaxApproximateEliminationsScorer)
        other.word_length = self.word_length
        other.counter = self.counter
        return other
