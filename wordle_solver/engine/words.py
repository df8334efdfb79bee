"""
Word banks and candidate filtering.

A WordBank is the list of words a game is played over: every allowed guess and
every possible objective. All words share one length, taken from the first
word. Entries are normalized (stripped, lower-cased) and blank lines dropped;
duplicates are kept as given.

filter_candidates() is the core step that turns feedback into a shrinking
candidate set: keep only the words that still satisfy the restrictions.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, List, Sequence, TextIO

from .errors import LengthMismatch
from .restrictions import WordRestrictions


class WordBank:
    """An ordered, fixed-length list of words."""

    def __init__(self, words: Sequence[str] = ()):
        self._words: List[str] = list(words)
        self.word_length = len(self._words[0]) if self._words else 0

    @classmethod
    def from_iterable(cls, words: Iterable[str]) -> "WordBank":
        """
        Build a bank from raw entries.

        Raises:
          LengthMismatch if a word's length differs from the first word's.
        """
        out: List[str] = []
        expected = None
        for raw in words:
            w = raw.strip().lower()
            if not w:
                continue
            if expected is None:
                expected = len(w)
            elif len(w) != expected:
                raise LengthMismatch(expected, len(w), w)
            out.append(w)
        return cls(out)

    @classmethod
    def from_lines(cls, stream: TextIO) -> "WordBank":
        """Read one word per line from a text stream."""
        return cls.from_iterable(stream)

    @property
    def words(self) -> List[str]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __getitem__(self, index):
        return self._words[index]

    def __contains__(self, word) -> bool:
        return word in self._words

    def __repr__(self) -> str:
        return f"WordBank({len(self._words)} words, length={self.word_length})"


class WordCounter:
    """Letter statistics over a list of words, used by the frequency scorers."""

    def __init__(self, words: Iterable[str]):
        self.num_words = 0
        self._with_letter: Counter = Counter()
        self._with_located_letter: Counter = Counter()
        for w in words:
            self.num_words += 1
            # A word counts once per distinct letter.
            self._with_letter.update(set(w))
            self._with_located_letter.update((ch, i) for i, ch in enumerate(w))

    def num_words_with_letter(self, letter: str) -> int:
        return self._with_letter[letter]

    def num_words_with_located_letter(self, letter: str, index: int) -> int:
        return self._with_located_letter[(letter, index)]


def filter_candidates(words: Iterable[str], restrictions: WordRestrictions) -> List[str]:
    """
    Keep only the words that satisfy `restrictions`.

    Args:
      words        : iterable of candidate words (often the bank or current candidates)
      restrictions : everything learned so far in the game

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    return [w for w in words if restrictions.satisfies(w)]
