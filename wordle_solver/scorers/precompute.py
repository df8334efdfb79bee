"""
One-time score tables over a whole word bank.

Scoring every dictionary word against every other is the expensive step of the
elimination scorers, and it is an embarrassingly parallel map: each word's
score depends only on read-only inputs. compute_score_table() splits the words
into chunks, scores each chunk in a worker process and merges the per-chunk
dicts. Small banks (or max_workers=1) are scored in-process.

`score_fn` runs in other processes, so it must be picklable: a module-level
function, or a functools.partial over one.
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional, Sequence

log = logging.getLogger(__name__)

# Below this many words the process pool costs more than it saves.
PARALLEL_MIN_WORDS = 500

ScoreTable = Dict[str, float]


def _score_chunk(score_fn: Callable[[str], float], chunk: List[str]) -> ScoreTable:
    """Worker: score one chunk of words."""
    return {w: score_fn(w) for w in chunk}


def _chunks(words: Sequence[str], num_chunks: int) -> List[List[str]]:
    size = max(1, -(-len(words) // num_chunks))
    return [list(words[i:i + size]) for i in range(0, len(words), size)]


def compute_score_table(score_fn: Callable[[str], float], words: Sequence[str],
                        max_workers: Optional[int] = None) -> ScoreTable:
    """
    Map `score_fn` over `words` and return {word: score}.

    Args:
      score_fn    : picklable callable, word -> float
      words       : words to score (duplicates collapse into one entry)
      max_workers : process count (None = os.cpu_count(); 1 = serial)

    Returns:
      Dict word -> score, in no particular order.
    """
    if max_workers is None:
        max_workers = os.cpu_count() or 1
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    t0 = time.perf_counter()
    if max_workers == 1 or len(words) < PARALLEL_MIN_WORDS:
        table = _score_chunk(score_fn, list(words))
    else:
        # A few chunks per worker keeps the pool busy when chunk costs differ.
        table = {}
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(_score_chunk, score_fn, chunk)
                for chunk in _chunks(words, max_workers * 4)
            ]
            for future in as_completed(futures):
                table.update(future.result())

    log.info("scored %d words in %.1fs (workers=%d)",
             len(table), time.perf_counter() - t0, max_workers)
    return table
