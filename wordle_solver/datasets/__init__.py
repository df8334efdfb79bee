from .validator import validate_wordlist, pretty_summary
from .io import load_word_bank

__all__ = ["validate_wordlist", "pretty_summary", "load_word_bank"]
