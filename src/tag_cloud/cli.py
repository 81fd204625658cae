"""
cli.py

Command-line entry point (installed as `tag-cloud`).

Usage:
  tag-cloud notes.txt -o cloud.html -n 50
  tag-cloud page.html -o cloud.html -n 30 --strip-html --counts-csv counts.csv
  tag-cloud                       # prompts for input, output and N

Anything not given on the command line is asked for interactively; the
number of words is re-asked until it lies in [1, distinct words].
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from .cloud.config import CloudConfig, load_config
from .pipeline.build import build_tag_cloud
from .utils.log import setup_logging

logger = logging.getLogger(__name__)

INPUT_PROMPT = "Enter the name of file location: "
OUTPUT_PROMPT = "Enter the name of the output html file location: "
TOP_N_PROMPT = "Please enter the number of words to be included in tag cloud[1, {max_n}]: "


def prompt_text(
    prompt: str,
    input_fn: Callable[[str], str] = input,
) -> str:
    try:
        answer = input_fn(prompt).strip()
    except EOFError:
        raise ValueError("no input given") from None
    if not answer:
        raise ValueError("empty answer")
    return answer


def prompt_top_n(
    max_n: int,
    input_fn: Callable[[str], str] = input,
    err: Optional[TextIO] = None,
) -> int:
    """Ask until an integer in [1, max_n] is entered; end of input aborts."""
    err = err or sys.stderr
    while True:
        try:
            raw = input_fn(TOP_N_PROMPT.format(max_n=max_n))
        except EOFError:
            raise ValueError("no valid number of words was entered") from None
        try:
            n = int(raw.strip())
        except ValueError:
            print(f"Not a number: {raw.strip()!r}", file=err)
            continue
        if 1 <= n <= max_n:
            return n
        print(f"Out of range: {n} (expected 1..{max_n})", file=err)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tag-cloud",
        description="Render the N most frequent words of a text file as an HTML tag cloud.",
    )
    ap.add_argument("input", nargs="?", help="Text file to analyze (prompted if omitted).")
    ap.add_argument("-o", "--output", help="Output HTML file (prompted if omitted).")
    ap.add_argument("-n", "--top-n", type=int, help="Number of words in the cloud (prompted if omitted).")
    ap.add_argument("--config", help="JSON config file (font_min, font_max, css_href).")
    ap.add_argument("--font-min", type=int, help="Smallest font size (overrides config).")
    ap.add_argument("--font-max", type=int, help="Largest font size (overrides config).")
    ap.add_argument("--strip-html", action="store_true", help="Treat the input as HTML and count only its text.")
    ap.add_argument("--counts-csv", help="Also write the full word-count table to this CSV file.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log pipeline steps to stderr.")
    return ap


def main(
    argv: Optional[Sequence[str]] = None,
    input_fn: Callable[[str], str] = input,
) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config) if args.config else CloudConfig()
        config = config.with_overrides(font_min=args.font_min, font_max=args.font_max)

        input_path = args.input or prompt_text(INPUT_PROMPT, input_fn)
        output_path = args.output or prompt_text(OUTPUT_PROMPT, input_fn)

        result = build_tag_cloud(
            input_path,
            output_path,
            top_n=args.top_n,
            config=config,
            strip_html=args.strip_html,
            counts_csv=args.counts_csv,
            choose_top_n=lambda max_n: prompt_top_n(max_n, input_fn),
        )
    except (OSError, ValueError) as e:
        logger.debug("tag cloud run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(
        f"✅ Top {result.top_n} of {result.distinct_words} words → {result.output_path}",
        file=sys.stderr,
    )
    if result.counts_csv is not None:
        print(f"✅ Wrote word counts → {result.counts_csv}", file=sys.stderr)


if __name__ == "__main__":
    main()
