"""
cloud/scale.py

Linear font scaling of a word's count within the selection's count range.
"""

from __future__ import annotations


def scale_size(font_max: int, font_min: int, count: int, count_min: int, count_max: int) -> int:
    """
    Map `count` in [count_min, count_max] onto [font_min, font_max].

    Integer (truncating) arithmetic: the result is font_min at count_min,
    font_max at count_max and never decreases as count grows.

    When every selected word has the same count (count_min == count_max)
    there is no range to scale over and every word gets font_min, whatever
    its count. Otherwise a count outside [count_min, count_max] is rejected.
    """
    if font_min > font_max:
        raise ValueError(f"font_min ({font_min}) must not exceed font_max ({font_max})")
    if count_min > count_max:
        raise ValueError(f"count_min ({count_min}) must not exceed count_max ({count_max})")

    if count_min == count_max:
        return font_min
    if not count_min <= count <= count_max:
        raise ValueError(f"count ({count}) must lie within [{count_min}, {count_max}]")
    return font_min + (font_max - font_min) * (count - count_min) // (count_max - count_min)
