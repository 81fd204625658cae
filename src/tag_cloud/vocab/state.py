"""
vocab/state.py

What this file does:
- Counts word occurrences across the lines of a document.
- Words are lowercased; separator runs are ignored.

How it fits:
- cloud/select.py reads the resulting Counter to pick the top-N words.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections import Counter
from typing import AbstractSet, Iterable, Mapping

from ..text.tokenize import SEPARATORS, iter_words


@dataclass(frozen=True)
class CountEntry:
  word: str
  count: int


def count_words(lines: Iterable[str], separators: AbstractSet[str] = SEPARATORS) -> Counter[str]:
  c: Counter[str] = Counter()
  for word in iter_words(lines, separators):
    c[word] += 1
  return c


def count_entries(counts: Mapping[str, int]) -> list[CountEntry]:
  return [CountEntry(word, int(cnt)) for word, cnt in counts.items()]
