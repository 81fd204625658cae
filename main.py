"""
main.py

What this file does:
- Builds one tag cloud from fixed paths (edit them below).

How to run:
- From project root:
  PYTHONPATH=src python main.py
or, for the interactive / flag-driven version:
  PYTHONPATH=src python -m tag_cloud.cli --help
"""

from __future__ import annotations

from pathlib import Path
from tag_cloud.cloud.config import CloudConfig
from tag_cloud.pipeline.build import build_tag_cloud

if __name__ == "__main__":
    result = build_tag_cloud(
        input_path=Path("data/input.txt"),
        output_path=Path("data/tag_cloud.html"),
        top_n=100,                             # <-- change if needed
        config=CloudConfig(font_min=11, font_max=48),
        counts_csv=Path("data/word_counts.csv"),
    )
    print(f"✅ Tag cloud complete: {result.output_path}")
