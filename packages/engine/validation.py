"""
Input validation for constraint edits.

The engine accepts one character per call, so front ends translate whatever
the player typed into single letters first. This module answers:
  - "Is this a letter the engine can store?"      -> normalize_letter
  - "Is this position inside 1..N?"               -> check_position
  - "Which letters did the player type?"          -> letters_from_text
  - "Which letter is fixed at each slot?"         -> parse_pattern
"""

from __future__ import annotations

from typing import List

from .constraints import WILDCARD

# Separators a player may type between letters; silently skipped.
SEPARATORS = frozenset(", ")


class InvalidPosition(ValueError):
    """A 1-based position outside 1..N was passed to the engine."""

    def __init__(self, pos, N: int):
        super().__init__(f"position must be between 1 and {N}; got {pos!r}")
        self.pos = pos
        self.N = N


def normalize_letter(ch: str) -> str:
    """
    Lowercase a single letter; reject anything else, WILDCARD included.
    Letters whose lowercase form is not one character ('İ') are rejected too.
    """
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character; got {ch!r}")
    if not ch.isalpha():
        raise ValueError(f"not a letter: {ch!r}")
    low = ch.lower()
    if len(low) != 1:
        raise ValueError(f"letter has no single-character lowercase form: {ch!r}")
    return low


def check_position(pos: int, N: int) -> int:
    """Return `pos` unchanged if it is a valid 1-based slot, else raise InvalidPosition."""
    if isinstance(pos, bool) or not isinstance(pos, int) or not 1 <= pos <= N:
        raise InvalidPosition(pos, N)
    return pos


def letters_from_text(text: str) -> List[str]:
    """
    Split free-form input like "a, e r" into ['a', 'e', 'r'].
    Commas and spaces are skipped; any other non-letter is rejected.
    """
    out: List[str] = []
    for ch in text:
        if ch in SEPARATORS:
            continue
        out.append(normalize_letter(ch))
    return out


def parse_pattern(pattern: str, N: int) -> List[str]:
    """
    Parse a position pattern such as 'p...e' into N slots.
    Each slot is a lowercase letter or WILDCARD.
    """
    if len(pattern) != N:
        raise ValueError(f"pattern must have exactly {N} characters; got {pattern!r}")
    slots: List[str] = []
    for ch in pattern:
        slots.append(WILDCARD if ch == WILDCARD else normalize_letter(ch))
    return slots
