# apps/cli/run.py
"""
CLI entry point for benchmarking a scorer over a whole word list.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads it into a WordBank and builds the requested scorer (optionally from
     a precomputed first-guess table, see apps/cli/precompute.py).
  3) Plays one game per word (or a sample) with a live progress indicator,
     prints the rounds-to-solve histogram and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, word-list hash, summary, git commit, etc.

Usage:
    python -m apps.cli.run --words data/words.txt --scorer max_eliminations
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordle_solver.datasets import load_word_bank, pretty_summary, validate_wordlist
from wordle_solver.engine import WordleError
from wordle_solver.harness import WORDLE_MAX_TURNS, format_histogram, run_batch, summarize
from wordle_solver.harness.io import (
    git_commit_or_unknown,
    read_score_table,
    timestamp_id,
    write_csv,
    write_manifest,
)
from wordle_solver.scorers import GuessFrom, create_scorer, get_scorer_ids

# Scorers that accept a precomputed first-guess table.
TABLE_SCORERS = ("max_eliminations", "combo_eliminations")


def scorer_options(args) -> dict:
    """Constructor keyword options for the chosen scorer."""
    opts = {}
    if args.scorer in TABLE_SCORERS and args.table:
        opts["first_guess_eliminations"] = read_score_table(args.table)
    elif args.table:
        raise SystemExit(f"--table only applies to: {', '.join(TABLE_SCORERS)}")
    if args.scorer == "max_eliminations":
        opts["max_workers"] = args.workers
    if args.scorer == "combo_eliminations":
        opts["guess_from"] = GuessFrom(args.guess_from)
        if args.combo_threshold is not None:
            opts["min_possible_words_for_combo"] = args.combo_threshold
    return opts


def _plain_progress(total: int):
    """Wrap an iterable with a once-per-second status line on stderr."""
    def wrap(items):
        start = time.time()
        last_print = 0.0
        for idx, item in enumerate(items, 1):
            yield item
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now
        sys.stderr.write("\n")
        sys.stderr.flush()
    return wrap


def build_parser() -> argparse.ArgumentParser:
    scorer_choices = ", ".join(get_scorer_ids())

    ap = argparse.ArgumentParser(description="wordle-solver: benchmark a scorer over a word list")
    ap.add_argument("--words", required=True, help="path to the word list (one word per line)")
    ap.add_argument("--scorer", default="approx_eliminations",
                    help=f"scorer id (one of: {scorer_choices})")
    ap.add_argument("--guess-from", choices=[g.value for g in GuessFrom],
                    default=GuessFrom.ALL_UNGUESSED_WORDS.value,
                    help="pick guesses from every unguessed word, or only from possible words")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS,
                    help="round limit per game (benchmarks often use a larger one)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--table", help="JSON first-guess table written by apps.cli.precompute")
    ap.add_argument("--workers", type=int, help="processes for table precomputation (default: all cores)")
    ap.add_argument("--combo-threshold", type=int,
                    help="combo_eliminations: candidate count at or below which lookahead is skipped")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="log per-round detail to stderr")
    return ap


def run(args) -> None:
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    # 2) Load the bank and build the scorer (registry populated on import)
    bank = load_word_bank(args.words)
    scorer = create_scorer(args.scorer, bank, **scorer_options(args))

    # 3) Choose cases (deterministic sample by seed)
    cases = list(bank)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if mode == "bar":
        progress = lambda items: tqdm(items, ncols=80, desc="Running", unit="game")  # noqa: E731
    elif mode == "plain":
        progress = _plain_progress(len(cases))
    else:
        progress = None

    # 4) Run the batch
    results = run_batch(
        scorer, bank,
        guess_from=GuessFrom(args.guess_from),
        max_turns=args.max_turns,
        answers=cases,
        progress=progress,
    )
    summary = summarize(results)
    print(format_histogram(summary))

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "scorer_id": scorer.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


def main(argv=None):
    """
    Parse CLI args, validate the word list, run the batch and write outputs.
    """
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except WordleError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
