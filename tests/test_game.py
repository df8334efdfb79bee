import pytest
from wordle_solver.engine import FeedbackResult, InconsistentFeedback, WordBank, compute_feedback
from wordle_solver.harness import (
    Game,
    GameState,
    GameStatus,
    GuessFrom,
    Guesser,
    MaxScoreGuesser,
    play_game,
    play_game_with_guesser,
)
from wordle_solver.scorers import create_scorer, get_scorer_ids

WORDS = ["alpha", "allot", "begot", "below", "endow", "ingot"]


class FixedGuesser(Guesser):
    """Plays the given guesses in order."""

    def __init__(self, bank, guesses):
        super().__init__(bank)
        self.guesses = list(guesses)

    def select_next_guess(self):
        return self.guesses.pop(0) if self.guesses else None


@pytest.fixture
def bank():
    return WordBank.from_iterable(WORDS)


@pytest.mark.parametrize("scorer_id", get_scorer_ids())
@pytest.mark.parametrize("guess_from", list(GuessFrom))
def test_solves_every_word(bank, scorer_id, guess_from):
    scorer = create_scorer(scorer_id, bank)
    for objective in WORDS:
        guesser = MaxScoreGuesser(guess_from, bank, scorer.copy())
        result = play_game_with_guesser(objective, len(bank), guesser)
        assert result.status is GameStatus.SUCCESS
        assert result.guesses[-1] == objective
        assert result.turns[-1].result.is_solved()
        assert result.turns[0].num_possible_words_before == len(bank)


@pytest.mark.parametrize("scorer_id", get_scorer_ids())
def test_unknown_word(bank, scorer_id):
    guesser = MaxScoreGuesser(GuessFrom.ALL_UNGUESSED_WORDS, bank, create_scorer(scorer_id, bank))
    result = play_game_with_guesser("other", len(bank), guesser)
    assert result.status is GameStatus.UNKNOWN_WORD
    assert result.turns == []


def test_play_game_with_random_guesser():
    bank = WordBank.from_iterable(["abc", "bcd", "cde"])
    result = play_game("bcd", 3, bank, seed=1)
    assert result.status is GameStatus.SUCCESS


def test_round_limit_is_a_failure(bank):
    result = play_game_with_guesser("endow", 1, FixedGuesser(bank, ["alpha", "endow"]))
    assert result.status is GameStatus.FAILURE
    assert result.guesses == ["alpha"]


def test_running_out_of_words_is_a_failure(bank):
    result = play_game_with_guesser("endow", 6, FixedGuesser(bank, ["alpha"]))
    assert result.status is GameStatus.FAILURE
    assert len(result.turns) == 1


def test_state_machine(bank):
    game = Game(FixedGuesser(bank, ["alpha", "below"]), 6)
    assert game.state is GameState.AWAITING_GUESS
    with pytest.raises(RuntimeError):
        game.submit_feedback(compute_feedback("below", "alpha"))

    assert game.next_guess() == "alpha"
    assert game.state is GameState.AWAITING_FEEDBACK
    with pytest.raises(RuntimeError):
        game.next_guess()
    with pytest.raises(ValueError):
        game.submit_feedback(compute_feedback("below", "begot"))

    assert game.submit_feedback(compute_feedback("below", "alpha")) is GameState.AWAITING_GUESS
    assert game.turns[0].num_possible_words_before == 6
    assert game.next_guess() == "below"
    assert game.submit_feedback(compute_feedback("below", "below")) is GameState.SOLVED
    with pytest.raises(RuntimeError):
        game.next_guess()


def test_inconsistent_feedback_ends_game():
    bank = WordBank.from_iterable(["abc", "bcd", "cde"])
    game = Game(FixedGuesser(bank, ["abc", "bcd", "cde"]), 6)
    for guess, pattern in [("abc", "..y"), ("bcd", ".y.")]:
        assert game.next_guess() == guess
        game.submit_feedback(FeedbackResult.from_pattern(guess, pattern))
    assert game.next_guess() == "cde"
    with pytest.raises(InconsistentFeedback):
        game.submit_feedback(FeedbackResult.from_pattern("cde", "y.."))
    assert game.state is GameState.FAILED_INCONSISTENT


def test_max_num_guesses_must_be_positive(bank):
    with pytest.raises(ValueError):
        Game(FixedGuesser(bank, []), 0)
