import pytest
from wordle_solver.engine import FeedbackResult, InconsistentFeedback, WordBank
from wordle_solver.harness import GuessFrom, MaxScoreGuesser, RandomGuesser
from wordle_solver.scorers import MaxUniqueLetterFrequencyScorer


def _guesser(words, guess_from=GuessFrom.POSSIBLE_WORDS):
    bank = WordBank.from_iterable(words)
    return MaxScoreGuesser(guess_from, bank, MaxUniqueLetterFrequencyScorer(bank))


def test_picks_highest_scoring_candidate():
    guesser = _guesser(["abcz", "wxyz", "defy", "ghix"])
    assert guesser.select_next_guess() == "wxyz"


def test_update_narrows_candidates():
    guesser = _guesser(["abcz", "weyz", "defy", "ghix"])
    guesser.update(FeedbackResult.from_pattern("weyz", ".gy."))
    assert guesser.possible_words == ["defy"]
    assert guesser.select_next_guess() == "defy"


def test_empty_bank_has_no_guess():
    assert _guesser([]).select_next_guess() is None
    assert RandomGuesser(WordBank.from_iterable([])).select_next_guess() is None


def test_all_equal_scores_fall_back_to_first_candidate():
    guesser = _guesser(["abc", "def", "ghi"], GuessFrom.ALL_UNGUESSED_WORDS)
    assert all(guesser.scorer.score_word(w) > 0 for w in guesser.unguessed_words)
    assert guesser.select_next_guess() == "abc"


def test_equal_candidates_pick_first_in_list():
    guesser = _guesser(["ghi", "abc", "def"])
    scores = {guesser.scorer.score_word(w) for w in guesser.possible_words}
    assert len(scores) == 1 and scores.pop() > 0
    assert guesser.select_next_guess() == "ghi"


def test_unguessed_words_and_scorer_follow_updates():
    guesser = _guesser(["abc", "abd", "abe", "xyz"], GuessFrom.ALL_UNGUESSED_WORDS)
    guesser.update(FeedbackResult.from_pattern("xyz", "..."))
    assert guesser.unguessed_words == ["abc", "abd", "abe"]
    assert guesser.possible_words == ["abc", "abd", "abe"]
    assert guesser.scorer.counter.num_words == 3


def test_ties_go_to_first_in_list():
    guesser = _guesser(["bca", "abc", "cab"])
    assert guesser.select_next_guess() == "bca"


def test_random_guesser_follows_feedback():
    guesser = RandomGuesser(WordBank.from_iterable(["abc", "bcd", "cde"]), seed=3)
    guesser.update(FeedbackResult.from_pattern("bcd", "yy."))
    assert guesser.select_next_guess() == "abc"


def test_random_guesser_rejects_inconsistent_feedback():
    guesser = RandomGuesser(WordBank.from_iterable(["abc", "bcd", "cde"]))
    guesser.update(FeedbackResult.from_pattern("abc", "..y"))
    guesser.update(FeedbackResult.from_pattern("bcd", ".y."))
    candidates = list(guesser.possible_words)
    with pytest.raises(InconsistentFeedback):
        guesser.update(FeedbackResult.from_pattern("cde", "y.."))
    assert guesser.possible_words == candidates


def test_random_guesser_is_reproducible():
    bank = WordBank.from_iterable(["abc", "bcd", "cde", "def", "efg"])
    assert RandomGuesser(bank, seed=7).select_next_guess() == RandomGuesser(bank, seed=7).select_next_guess()


def test_rejected_update_leaves_max_score_guesser_unchanged():
    guesser = _guesser(["abc", "bcd", "cde"], GuessFrom.ALL_UNGUESSED_WORDS)
    guesser.update(FeedbackResult.from_pattern("abc", "..y"))
    guesser.update(FeedbackResult.from_pattern("bcd", ".y."))
    unguessed = list(guesser.unguessed_words)
    candidates = list(guesser.possible_words)
    guessed_letters = set(guesser.scorer.guessed_letters)
    with pytest.raises(InconsistentFeedback):
        guesser.update(FeedbackResult.from_pattern("cde", "y.."))
    assert guesser.unguessed_words == unguessed == ["cde"]
    assert guesser.possible_words == candidates
    assert guesser.scorer.guessed_letters == guessed_letters
