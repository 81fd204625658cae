"""
pipeline/build.py

Orchestrates one tag cloud run:
  1) Read the input file line by line (optionally strip HTML first)
  2) Tokenize + count lowercased words
  3) Resolve N (given, or chosen by a callback that sees the distinct count)
  4) Select the top-N words and their count range
  5) Sort them alphabetically and scale font sizes
  6) Optionally dump the full count table to CSV
  7) Render HTML and write the output file

Nothing here prompts or prints; cli.py owns user interaction.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Mapping, Optional, Tuple

from ..cloud.config import CloudConfig
from ..cloud.layout import CloudWord, arrange_alphabetically
from ..cloud.select import Selection, select_top_n
from ..render.html import render_tag_cloud
from ..text.clean import clean_html
from ..utils.io import iter_lines, read_text, write_text
from ..vocab.export import write_counts_csv
from ..vocab.state import count_words

logger = logging.getLogger(__name__)


@dataclass
class TagCloudResult:
    output_path: Path
    top_n: int
    distinct_words: int
    total_words: int
    selection: Selection
    words: List[CloudWord] = field(default_factory=list)
    counts_csv: Optional[Path] = None


def build_cloud_words(
    counts: Mapping[str, int],
    top_n: int,
    font_max: int = 48,
    font_min: int = 11,
) -> Tuple[Selection, List[CloudWord]]:
    """Select the top-N words of `counts` and lay them out alphabetically with sizes."""
    selection = select_top_n(counts, top_n)
    words, _ = arrange_alphabetically(selection, font_max, font_min)
    return selection, words


def read_document_lines(input_path: str | Path, strip_html: bool = False) -> Iterable[str]:
    input_path = Path(input_path)
    if not input_path.is_file():
        raise FileNotFoundError(f"input file not found: {input_path}")
    if strip_html:
        return clean_html(read_text(input_path)).splitlines()
    return iter_lines(input_path)


def build_tag_cloud(
    input_path: str | Path,
    output_path: str | Path,
    top_n: Optional[int] = None,
    config: Optional[CloudConfig] = None,
    strip_html: bool = False,
    counts_csv: str | Path | None = None,
    choose_top_n: Optional[Callable[[int], int]] = None,
    source_name: Optional[str] = None,
) -> TagCloudResult:
    """
    The CSV (if any) is written before the HTML, so a failed CSV write never
    leaves a finished tag cloud behind.
    """
    config = (config or CloudConfig()).validate()
    output_path = Path(output_path)

    counts: Counter[str] = count_words(read_document_lines(input_path, strip_html=strip_html))
    distinct = len(counts)
    total = sum(counts.values())
    logger.info("counted %d words (%d distinct) in %s", total, distinct, input_path)

    if distinct == 0:
        raise ValueError(f"no words found in {input_path}")

    if top_n is None:
        if choose_top_n is None:
            raise ValueError("top_n is required when no choose_top_n callback is given")
        top_n = choose_top_n(distinct)

    selection, words = build_cloud_words(counts, top_n, config.font_max, config.font_min)
    logger.info(
        "selected top %d words (count range %d..%d)",
        top_n, selection.count_min, selection.count_max,
    )

    csv_path: Optional[Path] = None
    if counts_csv is not None:
        csv_path = Path(counts_csv)
        rows = write_counts_csv(counts, csv_path)
        logger.info("wrote %d word counts to %s", rows, csv_path)

    html = render_tag_cloud(
        words,
        source_name=source_name if source_name is not None else str(input_path),
        css_href=config.css_href,
    )
    write_text(output_path, html)
    logger.info("wrote tag cloud to %s", output_path)

    return TagCloudResult(
        output_path=output_path,
        top_n=top_n,
        distinct_words=distinct,
        total_words=total,
        selection=selection,
        words=words,
        counts_csv=csv_path,
    )
