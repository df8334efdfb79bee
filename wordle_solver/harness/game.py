"""
The round loop: guess, get feedback, update, repeat.

Game is a small state machine driven from outside, so the same loop serves an
automatic game (feedback computed from a known objective) and an interactive
one (feedback typed in by a person):

    AWAITING_GUESS --next_guess()--> AWAITING_FEEDBACK
    AWAITING_FEEDBACK --submit_feedback()--> AWAITING_GUESS | SOLVED | FAILED_INCONSISTENT
    AWAITING_GUESS --next_guess()--> EXHAUSTED   (round limit hit, or no candidates left)

play_game_with_guesser() runs a whole game against a known objective.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from wordle_solver.engine import FeedbackResult, InconsistentFeedback, WordBank, compute_feedback
from .guesser import Guesser, RandomGuesser


class GameState(Enum):
    AWAITING_GUESS = "awaiting_guess"
    AWAITING_FEEDBACK = "awaiting_feedback"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    FAILED_INCONSISTENT = "failed_inconsistent"


class GameStatus(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    UNKNOWN_WORD = "unknown_word"


@dataclass(frozen=True)
class Turn:
    result: FeedbackResult
    num_possible_words_before: int


@dataclass
class GameResult:
    status: GameStatus
    turns: List[Turn] = field(default_factory=list)

    @property
    def guesses(self) -> List[str]:
        return [t.result.guess for t in self.turns]


class Game:
    """One game played by `guesser`, at most `max_num_guesses` rounds."""

    def __init__(self, guesser: Guesser, max_num_guesses: int):
        if max_num_guesses < 1:
            raise ValueError(f"max_num_guesses must be >= 1, got {max_num_guesses}")
        self.guesser = guesser
        self.max_num_guesses = max_num_guesses
        self.state = GameState.AWAITING_GUESS
        self.turns: List[Turn] = []
        self._pending_guess: Optional[str] = None
        self._possible_before = 0

    def _require(self, state: GameState) -> None:
        if self.state is not state:
            raise RuntimeError(f"game is {self.state.value}, expected {state.value}")

    def next_guess(self) -> Optional[str]:
        """The guess to play now, or None when the game is exhausted."""
        self._require(GameState.AWAITING_GUESS)
        if len(self.turns) >= self.max_num_guesses:
            self.state = GameState.EXHAUSTED
            return None
        guess = self.guesser.select_next_guess()
        if guess is None:
            self.state = GameState.EXHAUSTED
            return None
        self._pending_guess = guess
        self._possible_before = len(self.guesser.possible_words)
        self.state = GameState.AWAITING_FEEDBACK
        return guess

    def submit_feedback(self, result: FeedbackResult) -> GameState:
        """
        Record the feedback for the pending guess and advance the game.

        Raises:
          ValueError if `result` is for a different word than the pending guess.
          InconsistentFeedback if it contradicts earlier feedback (the game ends).
        """
        self._require(GameState.AWAITING_FEEDBACK)
        if result.guess != self._pending_guess:
            raise ValueError(f"feedback is for {result.guess!r}, expected {self._pending_guess!r}")
        self.turns.append(Turn(result, self._possible_before))
        self._pending_guess = None

        if result.is_solved():
            self.state = GameState.SOLVED
            return self.state
        try:
            self.guesser.update(result)
        except InconsistentFeedback:
            self.state = GameState.FAILED_INCONSISTENT
            raise
        self.state = GameState.AWAITING_GUESS
        return self.state


def play_game_with_guesser(objective: str, max_num_guesses: int, guesser: Guesser) -> GameResult:
    """
    Let `guesser` try to find `objective` within `max_num_guesses` rounds.

    Returns UNKNOWN_WORD without guessing if the objective is not in the
    guesser's bank, SUCCESS once it is guessed, FAILURE otherwise.
    """
    if objective not in guesser.bank:
        return GameResult(GameStatus.UNKNOWN_WORD)

    game = Game(guesser, max_num_guesses)
    while True:
        guess = game.next_guess()
        if guess is None:
            return GameResult(GameStatus.FAILURE, game.turns)
        if game.submit_feedback(compute_feedback(objective, guess)) is GameState.SOLVED:
            return GameResult(GameStatus.SUCCESS, game.turns)


def play_game(objective: str, max_num_guesses: int, bank: WordBank,
              seed: int | None = None) -> GameResult:
    """Play with a RandomGuesser over `bank`."""
    return play_game_with_guesser(objective, max_num_guesses, RandomGuesser(bank, seed))
