"""
Extract a clean N-letter word list from a larger dictionary.

Features:
- Reads through the WordStore loader, so the per-line rule is the same
  (lowercase, exact length N, only CR/LF stripped).
- Preserves original order while removing duplicates (stable dedupe).
- Optional --alpha-only to drop entries with apostrophes, hyphens, digits.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Reads the first existing system dictionary when --in is omitted.

Usage:
    python -m script.extract_wordlist --N 5 --alpha-only --out words_5.txt
    python -m script.extract_wordlist --in big_dict.txt --N 6 --sort --progress --out words_6.txt
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from tqdm import tqdm

from packages.datasets import DEFAULT_N, DEFAULT_WORDLISTS, WordStore, WordStoreError, write_lines

logger = logging.getLogger("girdle.extract")


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def select_words(words: List[str], alpha_only: bool = False, progress: bool = False) -> List[str]:
    """Dedupe already-normalized words, optionally dropping non-alphabetic ones."""
    kept = (w for w in tqdm(words, ncols=80, desc="Scanning", unit="word", disable=not progress)
            if not alpha_only or w.isalpha())
    return unique_preserve_order(kept)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Extract unique N-letter words from a dictionary.")
    ap.add_argument("--in", dest="inp", help=f"input dictionary (default: first of {', '.join(DEFAULT_WORDLISTS)})")
    ap.add_argument("--out", dest="out", required=True, help="output .txt file")
    ap.add_argument("--N", type=int, default=DEFAULT_N, help="word length")
    ap.add_argument("--alpha-only", action="store_true", help="drop words containing non-letters")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    ap.add_argument("--progress", action="store_true", help="show a progress bar while scanning")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        store = WordStore.load([args.inp] if args.inp else DEFAULT_WORDLISTS, N=args.N)
    except (WordStoreError, ValueError) as e:
        logger.error("%s", e)
        return 1

    out = select_words(list(store), alpha_only=args.alpha_only, progress=args.progress)
    if args.sort:
        out = sorted(out)

    write_lines(out, args.out)
    logger.info("Input: %s (%d words of length %d) -> Output: %s (%d unique)",
                store.path, len(store), args.N, args.out, len(out))
    return 0


if __name__ == "__main__":
    sys.exit(main())
