"""
render/html.py

Emits the tag cloud page: a title, one stylesheet link and one span per word
carrying the CSS class "f<size>" and the raw count as a tooltip.
"""

from __future__ import annotations

from html import escape
from typing import List, Sequence

from ..cloud.layout import CloudWord


def render_span(w: CloudWord) -> str:
    return (
        f'<span style="cursor:default" class="{w.css_class}" '
        f'title="count: {w.count}">{escape(w.word, quote=False)}</span>'
    )


def render_tag_cloud(words: Sequence[CloudWord], source_name: str, css_href: str) -> str:
    heading = f"Top {len(words)} words in {escape(str(source_name), quote=False)}"

    lines: List[str] = [
        "<html>",
        "<head>",
        f"<title>{heading}</title>",
        f'<link href="{escape(css_href)}" rel="stylesheet" type="text/css">',
        "</head>",
        "<body>",
        f"<h2>{heading}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ]
    lines.extend(render_span(w) for w in words)
    lines += [
        "</p>",
        "</div>",
        "</body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"
