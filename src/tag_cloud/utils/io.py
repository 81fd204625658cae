"""
utils/io.py

What this file does:
- Streams the lines of a text file (handle closed on every exit path).
- Reads / writes whole UTF-8 text files.

How it fits:
- This is the only place where files are opened; everything downstream works
  on plain strings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator


def iter_lines(path: str | Path) -> Iterator[str]:
    path = Path(path)
    with path.open("r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line.rstrip("\r\n")


def read_text(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8", errors="replace")


def write_text(path: str | Path, text: str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(text)
    return path
