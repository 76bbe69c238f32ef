"""
Constraint model and matcher.

A word survives filtering iff:
  1) it contains none of the EXCLUDED letters
  2) it contains every INCLUDED letter (presence only; counts are ignored,
     so one 'e' satisfies an included 'e' even if the answer has two)
  3) every fixed position matches; WILDCARD slots match anything

The matcher works on an (M, N) character matrix and returns a boolean mask,
so it can run over the full store or over a cached subset of its rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, List, Tuple

import numpy as np

from packages.datasets.wordstore import normalize_word

# Position slot value meaning "no constraint here".
WILDCARD = "."


class SetKind(Enum):
    EXCLUDED = "excluded"
    INCLUDED = "included"

    @property
    def other(self) -> "SetKind":
        return SetKind.INCLUDED if self is SetKind.EXCLUDED else SetKind.EXCLUDED


@dataclass(frozen=True)
class Constraints:
    """Immutable snapshot of (excluded, included, positions)."""
    excluded: FrozenSet[str] = frozenset()
    included: FrozenSet[str] = frozenset()
    positions: Tuple[str, ...] = ()

    @classmethod
    def empty(cls, N: int) -> "Constraints":
        return cls(positions=(WILDCARD,) * N)

    @property
    def pattern(self) -> str:
        """Positions as a compact string, e.g. 'p...e'."""
        return "".join(self.positions)

    def is_empty(self) -> bool:
        return not self.excluded and not self.included and all(c == WILDCARD for c in self.positions)


def word_mask(letters: np.ndarray, constraints: Constraints) -> np.ndarray:
    """
    Boolean mask over the rows of `letters` (shape (M, N)) that satisfy
    `constraints`. Exclusion runs first since it rejects the most rows.
    """
    if letters.ndim != 2 or letters.shape[1] != len(constraints.positions):
        raise ValueError(
            f"letters must have shape (M, {len(constraints.positions)}); got {letters.shape}")

    keep = np.ones(letters.shape[0], dtype=bool)

    if constraints.excluded:
        keep &= ~np.isin(letters, sorted(constraints.excluded)).any(axis=1)

    for ch in sorted(constraints.included):
        keep &= (letters == ch).any(axis=1)

    for i, ch in enumerate(constraints.positions):
        if ch != WILDCARD:
            keep &= letters[:, i] == ch

    return keep


def filter_candidates(words: Iterable[str], constraints: Constraints) -> List[str]:
    """
    Keep only words that satisfy `constraints`, after the WordStore's own line
    rule (N taken from the constraint positions). Order is preserved as in `words`.
    """
    N = len(constraints.positions)
    pool = [w for w in (normalize_word(x, N) for x in words) if w is not None]
    letters = np.array([list(w) for w in pool], dtype="<U1").reshape(len(pool), N)
    mask = word_mask(letters, constraints)
    return [w for w, ok in zip(pool, mask) if ok]
