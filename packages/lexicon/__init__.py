from .index import DictionaryIndex, EXCLUDED_SUFFIXES, MIN_WORD_LENGTH, is_playable
from .validator import validate_wordlist, pretty_summary
from .io import read_words, write_words, fetch_words

__all__ = ["DictionaryIndex", "EXCLUDED_SUFFIXES", "MIN_WORD_LENGTH", "is_playable",
           "validate_wordlist", "pretty_summary", "read_words", "write_words", "fetch_words"]
