"""
Unique-Letter Frequency Scorer (distinct-letter coverage).

Idea:
  - Count, over the CURRENT candidate set, how many words contain each letter.
    Score a word as the sum of those counts over its DISTINCT letters that
    have not been guessed yet.

Why it works:
  - Early turns: favors words that cover common, untested letters.
  - Later turns: counts come from the filtered candidates, so the top word
    tends to probe whatever still splits them.

Notes:
  - Ignores positions (see located_letters for a position-aware variant).
  - Letters already guessed score nothing, whatever their outcome was.
"""

from __future__ import annotations
from typing import Sequence, Set

from wordle_solver.engine import WordBank, WordCounter, WordRestrictions
from .base import BaseScorer, register


def unique_letters(word: str) -> str:
    """Letters of `word` in order of first occurrence ("llama" -> "lam")."""
    return "".join(dict.fromkeys(word))


@register
class MaxUniqueLetterFrequencyScorer(BaseScorer):
    id = "unique_letters"
    name = "Unique Letter Frequency"
    version = "1.0.0"

    def __init__(self, bank: WordBank):
        super().__init__(bank)
        self.guessed_letters: Set[str] = set()
        self.counter = WordCounter(bank)

    def update(self, latest_guess: str, restrictions: WordRestrictions,
               possible_words: Sequence[str]) -> None:
        self.guessed_letters.update(latest_guess)
        self.counter = WordCounter(possible_words)

    def score_word(self, word: str) -> int:
        return sum(
            self.counter.num_words_with_letter(ch)
            for ch in unique_letters(word)
            if ch not in self.guessed_letters
        )

    def copy(self) -> "MaxUniqueLetterFrequencyScorer":
        other = object.__new__(MaxUniqueLetterFrequencyScorer)
        other.word_length = self.word_length
        other.guessed_letters = set(self.guessed_letters)
        # Counters are never mutated after construction, so sharing is safe.
        other.counter = self.counter
        return other
