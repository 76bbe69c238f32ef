"""
Constraint engine: one player's mutable constraint state over a shared WordStore.

State:
  - excluded letters, included letters (mutually exclusive sets)
  - one slot per position holding a letter or WILDCARD
  - a result cache holding the rows of the last matches() call

Caching:
  Tightening a constraint can only shrink the match set, so matches() filters
  the cached rows instead of the whole store. Every edit that could GROW the
  set (removing a letter, clearing a set, clearing or overwriting a position,
  moving a letter between sets) drops the cache, and the next matches() call
  starts again from the full store.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set

import numpy as np

from packages.datasets.wordstore import WordStore
from .constraints import WILDCARD, Constraints, SetKind, word_mask
from .validation import check_position, normalize_letter

logger = logging.getLogger(__name__)


class ConstraintEngine:
    def __init__(self, store: WordStore):
        self.store = store
        self.N: int = store.N
        self._excluded: Set[str] = set()
        self._included: Set[str] = set()
        self._positions: List[str] = [WILDCARD] * self.N
        self._cache: Optional[np.ndarray] = None  # row indices into store

    # ---- state edits ----

    def reset(self) -> None:
        """Drop every constraint and the cached result."""
        self._excluded.clear()
        self._included.clear()
        self._positions = [WILDCARD] * self.N
        self._cache = None

    def add_letter(self, kind: SetKind, ch: str) -> None:
        """Add `ch` to the `kind` set, taking it out of the other set."""
        ch = normalize_letter(ch)
        target, other = self._set(kind), self._set(kind.other)
        if ch in other:
            # Lifting the opposite constraint can bring words back.
            other.discard(ch)
            self._invalidate(f"{ch!r} moved to {kind.value}")
        target.add(ch)

    def remove_letter(self, kind: SetKind, ch: str) -> None:
        ch = normalize_letter(ch)
        self._set(kind).discard(ch)
        self._invalidate(f"{ch!r} removed from {kind.value}")

    def clear_set(self, kind: SetKind) -> None:
        self._set(kind).clear()
        self._invalidate(f"{kind.value} cleared")

    def set_position(self, pos: int, ch: str) -> None:
        """
        Fix 1-based position `pos` to `ch`, or free it when `ch` is WILDCARD.
        A fixed letter is stronger than either set, so it leaves both.
        Raises InvalidPosition (state untouched) when pos is outside 1..N.
        """
        check_position(pos, self.N)
        if ch != WILDCARD:
            ch = normalize_letter(ch)
        current = self._positions[pos - 1]

        if ch == WILDCARD:
            self._invalidate(f"position {pos} cleared")
        else:
            if current not in (WILDCARD, ch) or ch in self._excluded:
                self._invalidate(f"position {pos} relaxed to {ch!r}")
            self._excluded.discard(ch)
            self._included.discard(ch)

        self._positions[pos - 1] = ch

    def unset_position(self, pos: int) -> None:
        self.set_position(pos, WILDCARD)

    # ---- read accessors ----

    def excluded_letters(self) -> List[str]:
        return sorted(self._excluded)

    def included_letters(self) -> List[str]:
        return sorted(self._included)

    def positions(self) -> List[str]:
        return list(self._positions)

    def snapshot(self) -> Constraints:
        return Constraints(
            excluded=frozenset(self._excluded),
            included=frozenset(self._included),
            positions=tuple(self._positions),
        )

    def matches(self) -> List[str]:
        """
        Words consistent with the current constraints, in store order.

        Filters the cached rows when present, else the full store, and caches
        the result for the next call.
        """
        if self._cache is None:
            pool = np.arange(len(self.store))
        else:
            pool = self._cache
        constraints = self.snapshot()
        self._cache = pool[word_mask(self.store.letters[pool], constraints)]
        logger.debug("Filtered %d -> %d candidates (%s)", len(pool), len(self._cache),
                     "no constraints" if constraints.is_empty() else constraints.pattern)
        return [self.store.words[i] for i in self._cache]

    # ---- internals ----

    def _set(self, kind: SetKind) -> Set[str]:
        return self._excluded if kind is SetKind.EXCLUDED else self._included

    def _invalidate(self, reason: str) -> None:
        if self._cache is not None:
            logger.debug("Result cache dropped: %s", reason)
        self._cache = None
