"""
text/clean.py

Turns an HTML document into plain text before tokenization, so a tag cloud
can be built straight from a saved web page (--strip-html).
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_WS_RE = re.compile(r"\s+")


def clean_html(text: str) -> str:
    """Remove markup, scripts and styles; collapse whitespace."""
    if not isinstance(text, str):
        return ""

    soup = BeautifulSoup(text, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    text = soup.get_text(separator=" ")

    return _WS_RE.sub(" ", text).strip()
