"""
cloud/layout.py

Orders the selected words alphabetically (case-insensitive) for display and
attaches each word's scaled font size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .scale import scale_size
from .select import Selection


@dataclass(frozen=True)
class CloudWord:
    word: str
    count: int
    size: int

    @property
    def css_class(self) -> str:
        return f"f{self.size}"


def arrange_alphabetically(
    selection: Selection,
    font_max: int,
    font_min: int,
) -> Tuple[List[CloudWord], Dict[str, int]]:
    """
    Returns (words in display order, word -> font size).

    Sizes are computed against selection.count_min / count_max, so the most
    frequent selected word always gets font_max.
    """
    ordered = sorted(selection.entries, key=lambda e: (e.word.lower(), e.count))

    font_sizes: Dict[str, int] = {}
    words: List[CloudWord] = []
    for e in ordered:
        size = scale_size(font_max, font_min, e.count, selection.count_min, selection.count_max)
        font_sizes[e.word] = size
        words.append(CloudWord(word=e.word, count=e.count, size=size))

    return words, font_sizes
