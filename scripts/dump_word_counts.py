#!/usr/bin/env python3
"""
scripts/dump_word_counts.py

Write the full word-count table of a text file to CSV (most frequent first).

Usage:
  PYTHONPATH=src python scripts/dump_word_counts.py \
    --input data/input.txt \
    --out data/word_counts.csv
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tag_cloud.pipeline.build import read_document_lines
from tag_cloud.vocab.export import write_counts_csv
from tag_cloud.vocab.state import count_words


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="Text file to count.")
    ap.add_argument("--out", required=True, help="Output CSV path.")
    ap.add_argument("--strip-html", action="store_true", help="Treat the input as HTML.")
    args = ap.parse_args()

    counts = count_words(read_document_lines(Path(args.input), strip_html=args.strip_html))
    rows = write_counts_csv(counts, Path(args.out))

    print(f"✅ Wrote {rows} word counts to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
