"""
Word-list validator.

What this module does:
- Validate one word list (one word per line) before it becomes a WordBank.
- Enforce formatting rules (lowercase, a-z only, one shared length).
- Count duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Blank lines are ignored, the same way the word-bank loader ignores them.

Typical use:
    from wordle_solver.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/words.txt", N=5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Optional
import hashlib


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list."""
    path: str                 # file path (as given)
    exists: bool              # did the file exist on disk?
    N: Optional[int]          # expected word length (given, or taken from the first word)
    count: int                # number of VALID words
    unique_count: int         # unique valid words
    invalid_lines: int        # lines that are not a lowercase a-z word of length N
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> lines, over all non-blank lines
    sha256: str = ""          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_wordlist(path: str, N: Optional[int] = None) -> Dict:
    """
    Validate a word list.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).
    N : int, optional
        Required word length. Defaults to the length of the first word.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport) with counts,
        length mix, SHA-256, `passed` (non-empty, no invalid lines) and
        `issues` (list of strings) to surface any problems.
    """
    p = Path(path)
    if not p.exists():
        return asdict(WordlistReport(path, False, N, 0, 0, 0, issues=[f"file not found: {path}"]))

    valid: List[str] = []
    invalid = 0
    lengths: Counter = Counter()

    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            lengths[len(w)] += 1
            if N is None:
                N = len(w)
            if w.islower() and w.isalpha() and w.isascii() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    rep = WordlistReport(
        path=str(p),
        exists=True,
        N=N,
        count=len(valid),
        unique_count=len(set(valid)),
        invalid_lines=invalid,
        lengths=dict(sorted(lengths.items())),
        sha256=_sha256_file(p),
    )

    if rep.count == 0:
        rep.issues.append("file contains 0 valid words")
    if invalid:
        rep.issues.append(f"{invalid} invalid line(s)")
    if len(lengths) > 1:
        rep.issues.append(f"mixed word lengths: {sorted(lengths)}")
    if rep.count != rep.unique_count:
        rep.issues.append(f"{rep.count - rep.unique_count} duplicate line(s)")

    # Duplicates are reported but allowed; a bank keeps them as given.
    rep.passed = rep.count > 0 and invalid == 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words.txt | N=5 | words=2315 (uniq=2315, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    line = (
        f"{report['path']} | N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) | {status}"
    )
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
