from .core import WORDLE_MAX_TURNS, format_histogram, run_batch, run_case, summarize
from .game import Game, GameResult, GameState, GameStatus, Turn, play_game, play_game_with_guesser
from .guesser import GuessFrom, Guesser, MaxScoreGuesser, RandomGuesser
from .io import read_score_table, write_csv, write_manifest, write_score_table

__all__ = [
    "WORDLE_MAX_TURNS", "run_case", "run_batch", "summarize", "format_histogram",
    "Game", "GameResult", "GameState", "GameStatus", "Turn", "play_game", "play_game_with_guesser",
    "GuessFrom", "Guesser", "MaxScoreGuesser", "RandomGuesser",
    "write_csv", "write_manifest", "write_score_table", "read_score_table",
]
