import io

import pytest
from wordle_solver.engine import (
    FeedbackResult,
    LengthMismatch,
    WordBank,
    WordCounter,
    WordRestrictions,
    filter_candidates,
)


def test_from_lines_skips_blank_lines():
    bank = WordBank.from_lines(io.StringIO("\n\nworda\nwordb\n"))
    assert len(bank) == 2
    assert bank.word_length == 5


def test_from_iterable_normalizes():
    bank = WordBank.from_iterable(["", "worda", "Wordb "])
    assert list(bank) == ["worda", "wordb"]
    assert bank[1] == "wordb"
    assert "worda" in bank and "wordc" not in bank


def test_length_mismatch_reports_expected_length():
    with pytest.raises(LengthMismatch) as e:
        WordBank.from_lines(io.StringIO("\nlongword\nshort\n"))
    assert e.value.expected == 8
    assert e.value.actual == 5


def test_empty_bank():
    bank = WordBank.from_iterable([])
    assert len(bank) == 0
    assert bank.word_length == 0


def test_duplicates_are_kept():
    assert WordBank.from_iterable(["abc", "abc", "def"]).words == ["abc", "abc", "def"]


def test_word_counter():
    counter = WordCounter(["alpha", "allot", "below"])
    assert counter.num_words == 3
    # Each word counts once per distinct letter.
    assert counter.num_words_with_letter("a") == 2
    assert counter.num_words_with_letter("l") == 3
    assert counter.num_words_with_letter("z") == 0
    assert counter.num_words_with_located_letter("l", 1) == 2
    assert counter.num_words_with_located_letter("a", 4) == 1
    assert counter.num_words_with_located_letter("a", 3) == 0


def test_filter_candidates_keeps_order():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    r = WordRestrictions.from_result(FeedbackResult.from_pattern("raise", "yy..g"))
    assert filter_candidates(words, r) == ["crane", "trace"]
