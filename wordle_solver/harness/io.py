"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:        flatten per-game results into a tidy CSV (one row per game).
- write_manifest:   dump a JSON manifest with config, hashes, and summary.
- write_score_table / read_score_table: export and import one-time scorer
                    tables (JSON object, word -> float).
- timestamp_id:     stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe so spreadsheet apps keep strings
  like "..g.y" as text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "..g.y" -> "'..g.y"
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      scorer, answer, status, success, guesses, time_ms,
      guess_1, patt_1, guess_2, patt_2, ..., guess_max_turns, patt_max_turns

    Args:
      results  : list of dicts returned by harness.run_case.
      path     : output CSV path.
      max_turns: turn budget used for the batch.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["scorer", "answer", "status", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "scorer": r.get("scorer_id", "?"),
                "answer": r["answer"],
                "status": r["status"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (scorer, guess mode, paths, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def write_score_table(table: Mapping[str, float], path: str) -> str:
    """Write a word -> score table as a JSON object (keys sorted)."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(dict(table), f, indent=0, sort_keys=True)
    return str(p)


def read_score_table(path: str) -> Dict[str, float]:
    """
    Read a table written by write_score_table.

    Raises:
      ValueError if the file is valid JSON but not a word -> number object.
    """
    with Path(path).open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a JSON object of word -> score")
    table: Dict[str, float] = {}
    for word, score in raw.items():
        if not isinstance(score, (int, float)) or isinstance(score, bool):
            raise ValueError(f"{path}: score for {word!r} is not a number")
        table[word] = float(score)
    return table


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
