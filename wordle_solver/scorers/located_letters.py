"""
Located-Letters Scorer (presence + position).

Each letter of a word is scored from what is known about it at that position,
then the letter scores are summed:

  - known to be HERE                      -> 1
  - present, maybe here                   -> candidates with the letter here
  - present but not here, or not present  -> 0
  - nothing known about the letter:
      candidates with the letter here, plus (first occurrence in the word
      only) candidates with the letter anywhere
"""

from __future__ import annotations
from typing import Sequence

from wordle_solver.engine import LetterRestriction, WordBank, WordCounter, WordRestrictions
from .base import BaseScorer, register


@register
class LocatedLettersScorer(BaseScorer):
    id = "located_letters"
    name = "Located Letters"
    version = "1.0.0"

    def __init__(self, bank: WordBank):
        super().__init__(bank)
        self.restrictions = WordRestrictions(bank.word_length)
        self.counter = WordCounter(bank)

    def update(self, latest_guess: str, restrictions: WordRestrictions,
               possible_words: Sequence[str]) -> None:
        self.restrictions = restrictions.copy()
        self.counter = WordCounter(possible_words)

    def score_word(self, word: str) -> int:
        total = 0
        for index, letter in enumerate(word):
            known = self.restrictions.state(letter, index)
            if known is LetterRestriction.HERE:
                total += 1
            elif known is LetterRestriction.PRESENT_MAYBE_HERE:
                total += self.counter.num_words_with_located_letter(letter, index)
            elif known is None:
                if letter not in word[:index]:
                    total += self.counter.num_words_with_letter(letter)
                total += self.counter.num_words_with_located_letter(letter, index)
        return total

    def copy(self) -> "LocatedLettersScorer":
        other = object.__new__(LocatedLettersScorer)
        other.word_length = self.word_length
        other.restrictions = self.restrictions.copy()
        other.counter = self.counter
        return other
