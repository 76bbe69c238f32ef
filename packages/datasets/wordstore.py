"""
Word store: the immutable candidate list every constraint engine filters.

Loading rules:
  - candidate locations are probed in order; the first one that EXISTS wins
    (later ones are never consulted, even if the winner turns out unreadable)
  - the file is read as UTF-8, one word per line
  - each line is lowercased and kept only if it has exactly N characters
  - file order is preserved; nothing else (comments, metadata) is recognized

The store also exposes its words as an (len, N) numpy character matrix so
the engine can filter with boolean masks instead of per-word Python loops.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from .io import iter_lines

logger = logging.getLogger(__name__)

DEFAULT_N = 5

# Probed in order; mirrors where Unix systems usually ship a word list.
DEFAULT_WORDLISTS: Tuple[str, ...] = (
    "/usr/share/dict/words",
    "/usr/dict/words",
)


class WordStoreError(Exception):
    """Base class for word list loading failures."""


class WordListNotFound(WordStoreError, FileNotFoundError):
    """None of the candidate locations exist."""


class WordListReadError(WordStoreError, OSError):
    """A candidate location exists but could not be read; see __cause__."""


def normalize_word(line: str, N: int) -> Optional[str]:
    """
    Apply the store's per-line rule: lowercase, keep only if exactly N chars.
    Returns None for lines that should be dropped.
    """
    w = line.rstrip("\r\n").lower()
    if len(w) != N:
        return None
    return w


def find_wordlist(candidate_paths: Iterable[Path | str]) -> Path:
    """Return the first candidate path that exists on disk."""
    tried = []
    for raw in candidate_paths:
        p = Path(raw)
        tried.append(str(p))
        if p.exists():
            return p
    raise WordListNotFound(f"Unable to find a word list (tried: {', '.join(tried) or 'nothing'})")


def read_words(path: Path | str, N: int) -> Tuple[str, ...]:
    """Read and normalize every line of `path`; wraps read failures."""
    words = []
    try:
        for line in iter_lines(path):
            w = normalize_word(line, N)
            if w is not None:
                words.append(w)
    except (OSError, UnicodeDecodeError) as e:
        raise WordListReadError(f"Unable to read word list {path}: {e}") from e
    return tuple(words)


@dataclass(frozen=True)
class WordStore:
    """Ordered, read-only sequence of lowercase N-letter words."""
    N: int
    words: Tuple[str, ...]
    path: str = ""

    @classmethod
    def load(cls, candidate_paths: Iterable[Path | str] = DEFAULT_WORDLISTS,
             N: int = DEFAULT_N) -> "WordStore":
        if N < 1:
            raise ValueError(f"word length must be positive; got {N}")
        path = find_wordlist(candidate_paths)
        words = read_words(path, N)
        logger.info("Loaded %d %d-letter words from %s", len(words), N, path)
        return cls(N=N, words=words, path=str(path))

    @classmethod
    def from_words(cls, words: Iterable[str], N: int = DEFAULT_N) -> "WordStore":
        """Build a store from in-memory lines using the same normalization as load()."""
        kept = tuple(w for w in (normalize_word(x, N) for x in words) if w is not None)
        return cls(N=N, words=kept)

    @cached_property
    def letters(self) -> np.ndarray:
        # One row per word, one single-character cell per position.
        return np.array([list(w) for w in self.words], dtype="<U1").reshape(len(self.words), self.N)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)
