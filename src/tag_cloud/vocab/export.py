"""
vocab/export.py

Dumps the full word-count table (not only the top-N selection) to CSV,
most frequent first. Used by --counts-csv and scripts/dump_word_counts.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import pandas as pd

from ..cloud.select import sort_by_count

COLUMNS = ["word", "count"]


def counts_frame(counts: Mapping[str, int]) -> pd.DataFrame:
    # same ranking as the top-N selection: row i is what select_top_n picks i-th
    ranked = reversed(sort_by_count(counts))
    df = pd.DataFrame([(e.word, e.count) for e in ranked], columns=COLUMNS)
    if not df.empty:
        df["count"] = df["count"].astype(int)
    return df


def write_counts_csv(counts: Mapping[str, int], csv_path: str | Path) -> int:
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    df = counts_frame(counts)
    df.to_csv(csv_path, index=False, encoding="utf-8")
    return len(df)
