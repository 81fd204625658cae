"""Shared pytest fixtures for tag cloud tests."""

import os
import sys

import pytest

# Add src/ to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))


SAMPLE_TEXT = "the cat sat on the mat the cat ran"

SAMPLE_DOCUMENT = """\
It was the best of times, it was the worst of times;
it was the age of wisdom -- it was the age of foolishness...

"Times" were 1859's best (and worst)!
"""


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_file(tmp_path):
    """Small one-line document on disk."""
    path = tmp_path / "cats.txt"
    path.write_text(SAMPLE_TEXT + "\n", encoding="utf-8")
    return path


@pytest.fixture
def document_file(tmp_path):
    """Multi-line document with punctuation, digits, quotes and a blank line."""
    path = tmp_path / "tale.txt"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path
