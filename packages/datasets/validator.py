"""
Word list validator for girdle.

What this module does:
- Inspect a single word list against a target length N using the same
  per-line rule the WordStore applies (lowercase, exact length N).
- Count kept vs dropped lines, detect duplicates and non-alphabetic entries
  (apostrophes, accents), and compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import iter_lines
from .wordstore import normalize_word


@dataclass
class WordListReport:
    """Diagnostics for one word list file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    total_lines: int     # raw line count
    kept: int            # lines the WordStore would keep
    unique_count: int    # distinct kept words
    dropped_lines: int   # lines of the wrong length
    non_alpha: int       # kept words containing non-letters
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a word list for length N.

    Returns a JSON-serializable dict (see WordListReport). `passed` requires the
    file to exist and to yield at least one word; duplicates and non-alphabetic
    entries are reported as issues but do not fail the check, since the store
    keeps them as-is.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(N, path, False, 0, 0, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    total = 0
    kept: List[str] = []
    for line in iter_lines(p):
        total += 1
        w = normalize_word(line, N)
        if w is not None:
            kept.append(w)

    issues: List[str] = []
    unique = set(kept)
    non_alpha = sum(1 for w in kept if not w.isalpha())

    if not kept:
        issues.append(f"word list contains 0 words of length {N}")
    if len(unique) != len(kept):
        issues.append(f"word list contains {len(kept) - len(unique)} duplicate word(s)")
    if non_alpha:
        issues.append(f"{non_alpha} word(s) contain non-letter characters")

    rep = WordListReport(
        N=N,
        path=str(p),
        exists=True,
        total_lines=total,
        kept=len(kept),
        unique_count=len(unique),
        dropped_lines=total - len(kept),
        non_alpha=non_alpha,
        sha256=_sha256_file(p),
        passed=bool(kept),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        N=5 | /usr/share/dict/words | kept=10230/104334 (uniq=10230, dropped=94104, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    if not report["exists"]:
        return f"N={report['N']} | {report['path']} | missing | {status}"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | {report['path']} "
        f"| kept={report['kept']}/{report['total_lines']} "
        f"(uniq={report['unique_count']}, dropped={report['dropped_lines']}, sha={sha}) "
        f"| {status}"
    )
