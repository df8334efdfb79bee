"""
Experiment harness core primitives.

- run_case:  play one game (one hidden objective) with a scorer-driven guesser.
- run_batch: play many games in sequence (optionally a sample prefix).
- summarize: rounds-to-solve histogram plus mean / std over a batch.

The turn budget defaults to Wordle's 6 but any positive limit is accepted
(benchmarks often use a generous limit to see the full distribution).

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or a service without changes.
"""

from __future__ import annotations
import time
from typing import Callable, Dict, List, Optional

import numpy as np

from wordle_solver.engine import WordBank
from wordle_solver.scorers import BaseScorer, GuessFrom
from .game import GameStatus, play_game_with_guesser
from .guesser import MaxScoreGuesser

# Default turn budget (Wordle rules).
WORDLE_MAX_TURNS = 6


def _check_max_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def run_case(
        scorer: BaseScorer,
        answer: str,
        *,
        bank: WordBank,
        guess_from: GuessFrom = GuessFrom.ALL_UNGUESSED_WORDS,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Play one game until the guesser wins or the turn budget is exhausted.

    Args:
        scorer:     a scorer built over `bank`; the game works on scorer.copy()
        answer:     the hidden word for this case
        bank:       all words the guesser may play (and the candidate universe)
        guess_from: which words the guesser may pick from
        max_turns:  round limit (>= 1)

    Returns:
        dict with keys:
            answer (str), scorer_id (str), status (str), success (bool),
            guesses (int), time_ms (float), history (list[(guess, pattern)])
    """
    _check_max_turns(max_turns)
    guesser = MaxScoreGuesser(guess_from, bank, scorer.copy())

    t0 = time.perf_counter()
    result = play_game_with_guesser(answer, max_turns, guesser)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": answer,
        "scorer_id": scorer.id,
        "status": result.status.value,
        "success": result.status is GameStatus.SUCCESS,
        "guesses": len(result.turns),
        "time_ms": dt,
        "history": [(t.result.guess, t.result.pattern()) for t in result.turns],
    }


def run_batch(
        scorer: BaseScorer,
        bank: WordBank,
        *,
        guess_from: GuessFrom = GuessFrom.ALL_UNGUESSED_WORDS,
        max_turns: int = WORDLE_MAX_TURNS,
        answers: Optional[List[str]] = None,
        sample: int | None = None,
        progress: Optional[Callable] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back, one per answer. Answers default to every word
    in the bank; if `sample` is given only the first K are played.

    `progress`, if given, wraps the answer iterable (e.g. tqdm).
    """
    _check_max_turns(max_turns)

    pool = list(bank) if answers is None else list(answers)
    if sample is not None:
        pool = pool[:sample]

    it = progress(pool) if progress is not None else pool
    return [
        run_case(scorer, ans, bank=bank, guess_from=guess_from, max_turns=max_turns)
        for ans in it
    ]


def summarize(records: List[Dict]) -> Dict:
    """
    Aggregate a batch: outcome counts, and over solved games the number of
    games per round count plus mean / std of rounds-to-solve.
    """
    solved = np.array([r["guesses"] for r in records if r["success"]], dtype=np.int64)
    statuses = [r["status"] for r in records]

    histogram: Dict[int, int] = {}
    if solved.size:
        rounds, counts = np.unique(solved, return_counts=True)
        histogram = {int(k): int(v) for k, v in zip(rounds, counts)}

    return {
        "num_games": len(records),
        "num_success": statuses.count(GameStatus.SUCCESS.value),
        "num_failure": statuses.count(GameStatus.FAILURE.value),
        "num_unknown": statuses.count(GameStatus.UNKNOWN_WORD.value),
        "mean_guesses": float(solved.mean()) if solved.size else None,
        "std_guesses": float(solved.std()) if solved.size else None,
        "histogram": histogram,
    }


def format_histogram(summary: Dict) -> str:
    """Render a summary as a markdown table plus the average line."""
    lines = ["|Num guesses|Num games|", "|-----------|---------|"]
    for rounds, count in sorted(summary["histogram"].items()):
        lines.append(f"|{rounds}|{count}|")
    if summary["mean_guesses"] is not None:
        lines.append("")
        lines.append(f"**Average guesses:** {summary['mean_guesses']:.2f} +/- {summary['std_guesses']:.2f}")
    if summary["num_failure"] or summary["num_unknown"]:
        lines.append(f"Failures: {summary['num_failure']}, unknown words: {summary['num_unknown']}")
    return "\n".join(lines)
