"""
cloud/select.py

What this file does:
- Picks the N most frequent words from a word-count map.
- Records the count range (min/max) of that selection; font scaling is
  relative to the selection, not to the whole document.

Tie-break:
- Words with equal counts are ordered by their lowercased form (then the raw
  word), so the same document always produces the same selection.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Mapping, Tuple

from ..vocab.state import CountEntry, count_entries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    entries: Tuple[CountEntry, ...]  # highest count first
    count_min: int
    count_max: int

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def words(self) -> list[str]:
        return [e.word for e in self.entries]


def _rank_key(entry: CountEntry) -> tuple:
    # smallest key = best rank
    return (-entry.count, entry.word.lower(), entry.word)


def sort_by_count(counts: Mapping[str, int]) -> list[CountEntry]:
    """
    All entries in ascending rank order: lowest count first, and within a
    count the alphabetically last word first. Popping from the end of this
    list yields the same order select_top_n() uses.
    """
    return sorted(count_entries(counts), key=_rank_key, reverse=True)


def select_top_n(counts: Mapping[str, int], n: int) -> Selection:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"n must be an int, got {type(n).__name__}")
    if n < 1 or n > len(counts):
        raise ValueError(f"n must be between 1 and {len(counts)} (distinct words), got {n}")

    top = heapq.nsmallest(n, count_entries(counts), key=_rank_key)

    logger.debug("selected %d of %d distinct words", len(top), len(counts))
    return Selection(
        entries=tuple(top),
        count_min=top[-1].count,
        count_max=top[0].count,
    )
