# apps/cli/play.py
"""
Play one game with a scorer-driven guesser.

Interactive (default): the solver prints a guess, you type the feedback the
game gave you, one character per letter:
    g = right letter, right place
    y = in the word, somewhere else
    . = not in the word
Malformed input is re-prompted. Contradictory feedback ends the game.

Automatic: with --word the feedback is computed against that objective and the
game is printed turn by turn.

Usage:
    python -m apps.cli.play --words data/words.txt
    python -m apps.cli.play --words data/words.txt --word crane
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from wordle_solver.datasets import load_word_bank
from wordle_solver.engine import FeedbackInputError, FeedbackResult, WordleError, parse_feedback
from wordle_solver.harness import (
    WORDLE_MAX_TURNS,
    Game,
    GameState,
    GameStatus,
    MaxScoreGuesser,
    play_game_with_guesser,
)
from wordle_solver.harness.io import read_score_table
from wordle_solver.scorers import GuessFrom, create_scorer, get_scorer_ids


def read_feedback(guess: str, ask: Callable[[str], str] = input,
                  out=sys.stdout) -> FeedbackResult:
    """Prompt until a well-formed feedback line for `guess` is entered."""
    while True:
        line = ask("Feedback (g/y/.): ")
        try:
            return parse_feedback(guess, line)
        except FeedbackInputError as e:
            print(e, file=out)


def play_interactive(game: Game, ask: Callable[[str], str] = input, out=sys.stdout) -> GameState:
    """Drive `game` with feedback typed by the user. Returns the final state."""
    while True:
        guess = game.next_guess()
        if guess is None:
            if game.guesser.possible_words:
                print("Out of guesses.", file=out)
            else:
                print("No words left that match the feedback.", file=out)
            return game.state
        print(f"Guess {len(game.turns) + 1}: {guess}  "
              f"({len(game.guesser.possible_words)} possible words)", file=out)
        state = game.submit_feedback(read_feedback(guess, ask, out))
        if state is GameState.SOLVED:
            print(f"Solved in {len(game.turns)} guesses.", file=out)
            return state


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-solver: play one game")
    ap.add_argument("--words", required=True, help="path to the word list (one word per line)")
    ap.add_argument("--scorer", default="approx_eliminations",
                    help=f"scorer id (one of: {', '.join(get_scorer_ids())})")
    ap.add_argument("--guess-from", choices=[g.value for g in GuessFrom],
                    default=GuessFrom.ALL_UNGUESSED_WORDS.value)
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS)
    ap.add_argument("--table", help="JSON first-guess table (max_eliminations / combo_eliminations)")
    ap.add_argument("--word", help="objective word: play automatically instead of asking for feedback")
    ap.add_argument("-v", "--verbose", action="store_true", help="log per-round detail to stderr")
    return ap


def run(args) -> int:
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    bank = load_word_bank(args.words)
    guess_from = GuessFrom(args.guess_from)
    opts = {}
    if args.table:
        if args.scorer not in ("max_eliminations", "combo_eliminations"):
            raise SystemExit("--table only applies to max_eliminations and combo_eliminations")
        opts["first_guess_eliminations"] = read_score_table(args.table)
    if args.scorer == "combo_eliminations":
        opts["guess_from"] = guess_from
    scorer = create_scorer(args.scorer, bank, **opts)
    guesser = MaxScoreGuesser(guess_from, bank, scorer)

    if args.word:
        result = play_game_with_guesser(args.word.strip().lower(), args.max_turns, guesser)
        for i, turn in enumerate(result.turns, 1):
            print(f"{i}. {turn.result.guess} {turn.result.pattern()}  "
                  f"({turn.num_possible_words_before} possible)")
        print(result.status.value)
        return 0 if result.status is GameStatus.SUCCESS else 2

    state = play_interactive(Game(guesser, args.max_turns))
    return 0 if state is GameState.SOLVED else 2


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        code = run(args)
    except WordleError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
