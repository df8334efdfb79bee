from collections import Counter

import pytest
from wordle_solver.engine import (
    FeedbackInputError,
    FeedbackResult,
    LengthMismatch,
    LetterOutcome,
    compute_feedback,
    feedback_code,
    parse_feedback,
)
from wordle_solver.engine.feedback import count_marks


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("objective,guess,expected", [
    ("mesas", "sassy", "yyg.."),
    ("abba", "babb", "yyg."),
    ("abcb", "bcce", "y.g."),
    ("level", "belle", ".gyyy"),
    ("level", "level", "ggggg"),
    ("level", "lemon", "gg..."),
    ("scoop", "cools", "yyg.y"),
    ("crane", "raise", "yy..g"),
    ("crane", "stare", "..gyg"),
    ("letter", "settle", ".gggyy"),
    ("letter", "little", "g.gg.y"),
    ("palate", "planet", "gyy.yy"),
    ("tinket", "kitten", "ygyygy"),
])
def test_compute_feedback_golden(objective, guess, expected):
    assert compute_feedback(objective, guess).pattern() == expected


@pytest.mark.parametrize("word", ["a", "crane", "sassy", "letter"])
def test_guessing_the_objective_is_all_correct(word):
    result = compute_feedback(word, word)
    assert result.is_solved()
    assert all(o is LetterOutcome.CORRECT for o in result.outcomes)


@pytest.mark.parametrize("objective,guess", [
    ("mesas", "sassy"), ("abba", "babb"), ("eerie", "eeeee"), ("sassy", "sssss"), ("geese", "sense"),
])
def test_non_absent_marks_per_letter_is_min_of_counts(objective, guess):
    result = compute_feedback(objective, guess)
    in_objective = Counter(objective)
    for letter, n in Counter(guess).items():
        present, absent = count_marks(result, letter)
        assert present == min(n, in_objective[letter])
        assert present + absent == n


def test_correct_wins_over_present_elsewhere():
    # The only 'b' left goes to the exact match, not to the earlier 'b'.
    assert compute_feedback("abc", "bbx").pattern() == ".g."


def test_length_mismatch():
    with pytest.raises(LengthMismatch) as e:
        compute_feedback("crane", "cranes")
    assert e.value.expected == 5 and e.value.actual == 6
    with pytest.raises(ValueError):
        feedback_code("abc", "ab")


def test_code_matches_result_code_and_separates_patterns():
    words = ["crane", "raise", "stare", "trace", "cared", "sassy"]
    seen = {}
    for objective in words:
        for guess in words:
            result = compute_feedback(objective, guess)
            code = feedback_code(objective, guess)
            assert code == result.code()
            assert seen.setdefault(code, result.pattern()) == result.pattern()


def test_parse_feedback_strips_whitespace():
    result = parse_feedback("abcd", "  g.yg \n")
    assert result == FeedbackResult("abcd", (
        LetterOutcome.CORRECT, LetterOutcome.ABSENT, LetterOutcome.PRESENT_ELSEWHERE, LetterOutcome.CORRECT,
    ))
    assert FeedbackResult.from_pattern("abcd", "g.yg") == result


@pytest.mark.parametrize("text", ["g.y", "g.yg.", "gxyg", "g-yg", "", "G.yg", "g.Yg"])
def test_parse_feedback_rejects_bad_input(text):
    with pytest.raises(FeedbackInputError):
        parse_feedback("abcd", text)


def test_result_rejects_mismatched_outcomes():
    with pytest.raises(LengthMismatch):
        FeedbackResult("abc", (LetterOutcome.ABSENT,))
