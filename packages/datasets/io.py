from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator


def iter_lines(p: Path | str) -> Iterator[str]:
    """
    Stream a UTF-8 text file line by line, stripping trailing CR/LF.
    Decoding errors surface as UnicodeDecodeError while iterating.
    """
    p = Path(p)
    with p.open("r", encoding="utf-8") as f:
        for ln in f:
            yield ln.rstrip("\r\n")


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
