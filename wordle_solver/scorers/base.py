from __future__ import annotations
from enum import Enum
from typing import Dict, Sequence, Type

from wordle_solver.engine import WordBank, WordRestrictions

# Fractional scores are scaled by this and truncated, so every score is an int.
SCORE_SCALE = 1000

# ---- Global scorer registry ----
REGISTRY: Dict[str, Type["BaseScorer"]] = {}


def register(cls: Type["BaseScorer"]) -> Type["BaseScorer"]:
    """
    Decorator: @register on a scorer class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate scorer id: {sid}")
    REGISTRY[sid] = cls
    return cls


def scaled(value: float) -> int:
    """Scale a fractional score to the integer score range (truncating)."""
    return int(value * SCORE_SCALE)


# ---- Base class that scorers inherit ----
class BaseScorer:
    """
    Gives words a score; the highest-scoring word is the best guess.

    A scorer is built once from the full word bank and then told about each
    round's outcome through update(). Games never share a scorer: each game
    works on its own copy().
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, bank: WordBank):
        self.word_length = bank.word_length

    def update(self, latest_guess: str, restrictions: WordRestrictions,
               possible_words: Sequence[str]) -> None:
        raise NotImplementedError("Override in subclass")

    def score_word(self, word: str) -> int:
        raise NotImplementedError("Override in subclass")

    def copy(self) -> "BaseScorer":
        raise NotImplementedError("Override in subclass")


class GuessFrom(Enum):
    """Which words a guesser is allowed to pick its next guess from."""
    POSSIBLE_WORDS = "possible"
    ALL_UNGUESSED_WORDS = "all_unguessed"
