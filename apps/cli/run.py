# apps/cli/run.py
"""
Command-line front end for girdle.

One-shot mode applies --exclude/--include/--pattern to a fresh engine and
prints the matching words, one per line:

    python -m apps.cli.run --include cr --exclude t
    python -m apps.cli.run --pattern p...e --wordlist words_5.txt

Interactive mode reads one command per line and re-prints the matches after
every edit, exercising the engine's incremental filtering:

    in LETTERS | out LETTERS | del-in LETTERS | del-out LETTERS
    clear in|out | pos N CH | unpos N | show | state | reset | quit
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from packages.datasets import (
    DEFAULT_N,
    DEFAULT_WORDLISTS,
    WordStore,
    WordStoreError,
    pretty_summary,
    validate_wordlist,
    write_lines,
)
from packages.engine import (
    WILDCARD,
    ConstraintEngine,
    SetKind,
    letters_from_text,
    parse_pattern,
)

logger = logging.getLogger("girdle")

_SET_NAMES = {"in": SetKind.INCLUDED, "out": SetKind.EXCLUDED}


def _print_words(words: List[str], out: TextIO) -> None:
    for w in words:
        out.write(w + "\n")
    out.flush()


def _state_line(engine: ConstraintEngine) -> str:
    return (
        f"exclude={''.join(engine.excluded_letters()) or '-'} "
        f"include={''.join(engine.included_letters()) or '-'} "
        f"pattern={''.join(engine.positions())}"
    )


def apply_constraints(engine: ConstraintEngine, *, exclude: str = "", include: str = "",
                      pattern: Optional[str] = None) -> None:
    """Translate one-shot CLI input into per-character engine calls."""
    for ch in letters_from_text(exclude):
        engine.add_letter(SetKind.EXCLUDED, ch)
    for ch in letters_from_text(include):
        engine.add_letter(SetKind.INCLUDED, ch)
    if pattern:
        for pos, ch in enumerate(parse_pattern(pattern, engine.N), start=1):
            if ch != WILDCARD:
                engine.set_position(pos, ch)


def handle_command(engine: ConstraintEngine, line: str, out: TextIO) -> bool:
    """
    Apply one interactive command. Returns False when the session should end.
    Rejected input raises ValueError (InvalidPosition included).
    """
    parts = line.split()
    if not parts:
        return True
    cmd, args = parts[0].lower(), parts[1:]

    if cmd in ("quit", "exit"):
        return False
    if cmd == "show":
        _print_words(engine.matches(), out)
        return True
    if cmd == "state":
        out.write(_state_line(engine) + "\n")
        return True
    if cmd == "reset":
        engine.reset()
        return True

    if cmd in ("in", "out", "del-in", "del-out"):
        kind = _SET_NAMES[cmd.replace("del-", "")]
        for ch in letters_from_text(" ".join(args)):
            if cmd.startswith("del-"):
                engine.remove_letter(kind, ch)
            else:
                engine.add_letter(kind, ch)
    elif cmd == "clear":
        if len(args) != 1 or args[0] not in _SET_NAMES:
            raise ValueError("usage: clear in|out")
        engine.clear_set(_SET_NAMES[args[0]])
    elif cmd == "pos":
        if len(args) != 2:
            raise ValueError("usage: pos N CH")
        engine.set_position(int(args[0]), args[1])
    elif cmd == "unpos":
        if len(args) != 1:
            raise ValueError("usage: unpos N")
        engine.unset_position(int(args[0]))
    else:
        raise ValueError(f"unknown command: {cmd}")

    _print_words(engine.matches(), out)
    return True


def run_interactive(engine: ConstraintEngine, stream: TextIO, out: TextIO) -> None:
    for line in stream:
        try:
            if not handle_command(engine, line, out):
                break
        except ValueError as e:
            logger.warning("%s", e)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="girdle: list words matching known letters")
    ap.add_argument("--wordlist", action="append", dest="wordlists",
                    help="word list path; repeat to give fallbacks "
                         f"(default: {', '.join(DEFAULT_WORDLISTS)})")
    ap.add_argument("--N", type=int, default=DEFAULT_N, help="word length (e.g., 5 or 6)")
    ap.add_argument("--exclude", default="", help="letters known to be absent")
    ap.add_argument("--include", default="", help="letters known to be present")
    ap.add_argument("--pattern", help=f"known positions, {WILDCARD!r} for unknown (e.g. p...e)")
    ap.add_argument("--interactive", action="store_true",
                    help="read edit commands from stdin after applying the flags above")
    ap.add_argument("--check", action="store_true", help="print a word list summary first")
    ap.add_argument("--out", help="also write the final matches to this file")
    ap.add_argument("--log", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging level")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log),
                        format="%(levelname)s %(name)s: %(message)s")

    candidates = args.wordlists or list(DEFAULT_WORDLISTS)
    try:
        store = WordStore.load(candidates, N=args.N)
    except (WordStoreError, ValueError) as e:
        logger.error("%s", e)
        return 1

    if args.check:
        print(pretty_summary(validate_wordlist(args.N, store.path)))

    engine = ConstraintEngine(store)
    try:
        apply_constraints(engine, exclude=args.exclude, include=args.include,
                          pattern=args.pattern)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    if args.interactive:
        run_interactive(engine, sys.stdin, sys.stdout)
    else:
        _print_words(engine.matches(), sys.stdout)

    if args.out:
        print(f"Wrote: {write_lines(engine.matches(), args.out)}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
