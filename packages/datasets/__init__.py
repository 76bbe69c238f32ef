from .validator import validate_wordlist, pretty_summary
from .io import write_lines
from .wordstore import (
    DEFAULT_N,
    DEFAULT_WORDLISTS,
    WordListNotFound,
    WordListReadError,
    WordStore,
    WordStoreError,
    find_wordlist,
)

__all__ = [
    "validate_wordlist", "pretty_summary", "write_lines",
    "DEFAULT_N", "DEFAULT_WORDLISTS", "WordStore", "WordStoreError",
    "WordListNotFound", "WordListReadError", "find_wordlist",
]
