from __future__ import annotations
from typing import List

from wordle_solver.engine import WordBank
from .base import BaseScorer, GuessFrom, REGISTRY, SCORE_SCALE, register

from . import letter_freq  # noqa: F401
from . import located_letters  # noqa: F401
from . import approx_eliminations  # noqa: F401
from . import max_eliminations  # noqa: F401
from . import combo_eliminations  # noqa: F401

from .letter_freq import MaxUniqueLetterFrequencyScorer
from .located_letters import LocatedLettersScorer
from .approx_eliminations import MaxApproximateEliminationsScorer
from .max_eliminations import MaxEliminationsScorer
from .combo_eliminations import MaxComboEliminationsScorer

__all__ = [
    "BaseScorer", "GuessFrom", "REGISTRY", "SCORE_SCALE", "register", "create_scorer", "get_scorer_ids",
    "MaxUniqueLetterFrequencyScorer", "LocatedLettersScorer", "MaxApproximateEliminationsScorer",
    "MaxEliminationsScorer", "MaxComboEliminationsScorer",
]


def create_scorer(scorer_id: str, bank: WordBank, **options) -> BaseScorer:
    """
    Factory: instantiate a registered scorer by id over `bank`.
    Extra keyword options go to the scorer's constructor.
    """
    try:
        cls = REGISTRY[scorer_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown scorer id: {scorer_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(bank, **options)


def get_scorer_ids() -> List[str]:
    """
    Return all registered scorer ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
