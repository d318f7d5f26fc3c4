from .validator import validate_wordlist, pretty_summary
from .io import DEFAULT_WORDLIST, WordList, load_words, parse_words, write_lines

__all__ = ["validate_wordlist", "pretty_summary", "DEFAULT_WORDLIST", "WordList",
           "load_words", "parse_words", "write_lines"]
