"""
Guessers: pick the next word and learn from its feedback.

A guesser owns the per-game state: the restrictions learned so far and the
candidate list filtered by them. Each round the game asks for a guess with
select_next_guess() and then hands back the feedback with update().

- MaxScoreGuesser: the word with the highest score from a scorer.
- RandomGuesser:   a uniformly random candidate (seeded for reproducibility).
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from wordle_solver.engine import FeedbackResult, WordBank, WordRestrictions, filter_candidates
from wordle_solver.scorers import BaseScorer, GuessFrom

log = logging.getLogger(__name__)


class Guesser:
    """Shared restriction tracking and candidate filtering."""

    def __init__(self, bank: WordBank):
        self.bank = bank
        self.restrictions = WordRestrictions(bank.word_length)
        self.possible_words: List[str] = list(bank)

    def update(self, result: FeedbackResult) -> None:
        """
        Fold in the feedback for the latest guess.

        Raises:
          InconsistentFeedback if the result contradicts earlier feedback
          (the guesser is left unchanged).
          LengthMismatch if the guess has the wrong length.
        """
        self.restrictions.apply(result)
        # Unless it was the winning guess, this also filters out the guess itself.
        self.possible_words = filter_candidates(self.possible_words, self.restrictions)

    def select_next_guess(self) -> Optional[str]:
        raise NotImplementedError("Override in subclass")


class RandomGuesser(Guesser):
    def __init__(self, bank: WordBank, seed: int | None = None):
        super().__init__(bank)
        self.rng = random.Random(seed)

    def select_next_guess(self) -> Optional[str]:
        if not self.possible_words:
            return None
        return self.rng.choice(self.possible_words)


class MaxScoreGuesser(Guesser):
    """
    Selects the guess that maximizes `scorer`'s score.

    With GuessFrom.ALL_UNGUESSED_WORDS any word not yet guessed may be played,
    even one that cannot be the answer, as long as more than two candidates
    remain. If every unguessed word scores the same the scorer has nothing to
    say, and the first candidate is played instead. With two or fewer
    candidates, or in GuessFrom.POSSIBLE_WORDS mode, only candidates are scored.

    Ties go to the word that comes first in list order.
    """

    def __init__(self, guess_from: GuessFrom, bank: WordBank, scorer: BaseScorer):
        super().__init__(bank)
        self.guess_from = guess_from
        self.scorer = scorer
        self.unguessed_words: List[str] = list(bank)

    def update(self, result: FeedbackResult) -> None:
        super().update(result)
        if result.guess in self.unguessed_words:
            self.unguessed_words.remove(result.guess)
        self.scorer.update(result.guess, self.restrictions, self.possible_words)
        log.debug("after %s (%s): %d candidates left",
                  result.guess, result.pattern(), len(self.possible_words))

    def select_next_guess(self) -> Optional[str]:
        if not self.possible_words:
            return None

        if self.guess_from is GuessFrom.ALL_UNGUESSED_WORDS and len(self.possible_words) > 2:
            best_word = None
            best_score = None
            all_same = True
            for word in self.unguessed_words:
                score = self.scorer.score_word(word)
                if best_score is None:
                    best_word, best_score = word, score
                elif score != best_score:
                    all_same = False
                    if score > best_score:
                        best_word, best_score = word, score
            if best_word is not None and not all_same:
                log.debug("guess %s (score %d, from %d unguessed words)",
                          best_word, best_score, len(self.unguessed_words))
                return best_word
            return self.possible_words[0]

        guess = max(self.possible_words, key=self.scorer.score_word)
        log.debug("guess %s (from %d candidates)", guess, len(self.possible_words))
        return guess
