import csv
import json
import re
from pathlib import Path

import pytest
from wordle_solver.engine import WordBank
from wordle_solver.harness import GuessFrom, format_histogram, run_batch, run_case, summarize
from wordle_solver.harness.io import (
    read_score_table,
    timestamp_id,
    write_csv,
    write_manifest,
    write_score_table,
)
from wordle_solver.scorers import create_scorer

WORDS = ["alpha", "allot", "begot", "below", "endow", "ingot"]


@pytest.fixture
def bank():
    return WordBank.from_iterable(WORDS)


def test_run_case_smoke(bank):
    scorer = create_scorer("unique_letters", bank)
    r = run_case(scorer, "alpha", bank=bank, max_turns=6)
    assert r["success"] is True
    assert r["status"] == "success"
    assert r["scorer_id"] == "unique_letters"
    assert r["guesses"] == len(r["history"])
    assert r["history"][-1] == ("alpha", "ggggg")
    # The game played on a copy.
    assert scorer.guessed_letters == set()


def test_run_case_unknown_word(bank):
    r = run_case(create_scorer("located_letters", bank), "other", bank=bank)
    assert r["status"] == "unknown_word"
    assert r["success"] is False
    assert r["guesses"] == 0


def test_run_case_rejects_bad_turn_limit(bank):
    with pytest.raises(ValueError):
        run_case(create_scorer("unique_letters", bank), "alpha", bank=bank, max_turns=0)


def test_run_batch(bank):
    scorer = create_scorer("approx_eliminations", bank)
    results = run_batch(scorer, bank, guess_from=GuessFrom.POSSIBLE_WORDS, max_turns=len(bank))
    assert [r["answer"] for r in results] == WORDS
    assert all(r["success"] for r in results)

    seen = []
    results = run_batch(scorer, bank, sample=2, progress=lambda items: (seen.append(i) or i for i in items))
    assert len(results) == 2
    assert seen == WORDS[:2]


def _record(status, guesses):
    return {"status": status, "success": status == "success", "guesses": guesses}


def test_summarize():
    records = [_record("success", n) for n in (1, 2, 2, 3)]
    records += [_record("failure", 6), _record("unknown_word", 0)]
    s = summarize(records)
    assert s["num_games"] == 6
    assert s["num_success"] == 4 and s["num_failure"] == 1 and s["num_unknown"] == 1
    assert s["histogram"] == {1: 1, 2: 2, 3: 1}
    assert s["mean_guesses"] == pytest.approx(2.0)
    assert s["std_guesses"] == pytest.approx(0.5 ** 0.5)
    # JSON-ready
    json.dumps(s)

    table = format_histogram(s)
    assert "|2|2|" in table
    assert "2.00 +/- 0.71" in table
    assert "Failures: 1" in table


def test_summarize_empty():
    s = summarize([])
    assert s["histogram"] == {}
    assert s["mean_guesses"] is None
    assert "Average" not in format_histogram(s)


def test_score_table_round_trip(tmp_path: Path):
    table = {"cod": 4 / 3, "mwc": 2.0}
    path = write_score_table(table, str(tmp_path / "tables" / "t.json"))
    assert read_score_table(path) == pytest.approx(table)


@pytest.mark.parametrize("content", ['["cod"]', '{"cod": "x"}', '{"cod": true}'])
def test_read_score_table_rejects_bad_content(tmp_path: Path, content):
    p = tmp_path / "t.json"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        read_score_table(str(p))


def test_write_csv_and_manifest(tmp_path: Path, bank):
    results = run_batch(create_scorer("unique_letters", bank), bank, sample=2)
    path = write_csv(results, str(tmp_path / "run.csv"), max_turns=6)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == ["alpha", "allot"]
    assert rows[0]["scorer"] == "unique_letters"
    assert rows[0]["patt_1"].startswith("'")
    assert "guess_6" in rows[0]

    mpath = write_manifest({"run_id": "x", "summary": summarize(results)}, str(tmp_path / "m.json"))
    assert json.loads(Path(mpath).read_text(encoding="utf-8"))["run_id"] == "x"


def test_timestamp_id():
    assert re.fullmatch(r"\d{8}T\d{6}Z", timestamp_id())
