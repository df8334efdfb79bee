# apps/cli/precompute.py
"""
Precompute a scorer's first-guess table and export it as JSON.

The first round of the elimination scorers scores every word against the
whole bank, which dominates their cost. The table is the same for every game
over the same word list, so compute it once here and pass it to
apps.cli.run / apps.cli.play with --table.

Usage:
    python -m apps.cli.precompute --words data/words.txt --out tables/max_elim.json
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordle_solver.datasets import load_word_bank
from wordle_solver.engine import WordleError
from wordle_solver.harness.io import write_score_table
from wordle_solver.scorers import GuessFrom, MaxComboEliminationsScorer, MaxEliminationsScorer


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-solver: export a first-guess score table")
    ap.add_argument("--words", required=True, help="path to the word list (one word per line)")
    ap.add_argument("--scorer", choices=["max_eliminations", "combo_eliminations"],
                    default="max_eliminations")
    ap.add_argument("--out", required=True, help="output JSON path")
    ap.add_argument("--workers", type=int, help="worker processes (default: all cores; 1 = serial)")
    ap.add_argument("--guess-from", choices=[g.value for g in GuessFrom],
                    default=GuessFrom.ALL_UNGUESSED_WORDS.value,
                    help="combo_eliminations: second-guess pool")
    ap.add_argument("--combo-threshold", type=int,
                    default=MaxComboEliminationsScorer.DEFAULT_MIN_POSSIBLE_WORDS_FOR_COMBO,
                    help="combo_eliminations: candidate count at or below which lookahead is skipped")
    return ap


def run(args) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    bank = load_word_bank(args.words)

    if args.scorer == "max_eliminations":
        table = MaxEliminationsScorer(bank, max_workers=args.workers).first_guess_eliminations
    else:
        scorer = MaxComboEliminationsScorer(
            bank,
            guess_from=GuessFrom(args.guess_from),
            min_possible_words_for_combo=args.combo_threshold,
        )
        table = scorer.precompute_first_guess_eliminations(max_workers=args.workers)

    best = max(table, key=table.get) if table else None
    print(f"Scored {len(table)} words; best first guess: {best}")
    print(f"Wrote: {write_score_table(table, args.out)}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except WordleError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
