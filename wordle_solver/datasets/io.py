from __future__ import annotations
from pathlib import Path

from wordle_solver.engine import WordBank


def load_word_bank(p: Path | str) -> WordBank:
    """
    Load a UTF-8 word list into a WordBank (stripped, lowercased, blank lines
    skipped, duplicates kept).
    Raises FileNotFoundError if the path doesn't exist and LengthMismatch
    if the words don't all share one length.
    """
    p = Path(p)
    with p.open("r", encoding="utf-8") as f:
        return WordBank.from_lines(f)
