"""
text/tokenize.py

What this file does:
- Defines the fixed separator character set.
- Splits a line into maximal runs of separator / non-separator characters.

How it fits:
- vocab/state.py counts the non-separator runs (words).
- Scanning a line from offset 0 and advancing by each token's length
  partitions the line exactly: "".join(iter_tokens(line)) == line.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, Iterator

# Whitespace, punctuation, digits and quotes. Kept verbatim so the rendered
# clouds match the reference stylesheet's output.
SEPARATOR_CHARS = " \t\n\r,-.!?[]';:/()0123456789_\"*`"

SEPARATORS: frozenset[str] = frozenset(SEPARATOR_CHARS)


def next_word_or_separator(
  text: str,
  position: int,
  separators: AbstractSet[str] = SEPARATORS,
) -> str:
  """
  Return the word or separator run starting at `position`.

  If text[position] is a separator, the result is the longest run of
  separator characters from there; otherwise the longest run of
  non-separator characters.
  """
  if not 0 <= position < len(text):
    raise ValueError(f"position {position} out of range for text of length {len(text)}")

  want_separator = text[position] in separators
  end = position
  while end < len(text) and (text[end] in separators) == want_separator:
    end += 1
  return text[position:end]


def iter_tokens(line: str, separators: AbstractSet[str] = SEPARATORS) -> Iterator[str]:
  position = 0
  while position < len(line):
    token = next_word_or_separator(line, position, separators)
    yield token
    position += len(token)


def is_separator_token(token: str, separators: AbstractSet[str] = SEPARATORS) -> bool:
  # tokens are homogeneous, so the first character decides
  return bool(token) and token[0] in separators


def iter_words(lines: Iterable[str], separators: AbstractSet[str] = SEPARATORS) -> Iterator[str]:
  """Yield every word token of every line, lowercased."""
  for line in lines:
    for token in iter_tokens(line, separators):
      if not is_separator_token(token, separators):
        yield token.lower()
