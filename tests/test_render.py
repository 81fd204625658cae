"""
Tests for render/html.py - tag cloud HTML output.
"""

from bs4 import BeautifulSoup

from tag_cloud.cloud.layout import CloudWord
from tag_cloud.render.html import render_span, render_tag_cloud

WORDS = [CloudWord("cat", 2, 29), CloudWord("mat", 1, 11), CloudWord("the", 3, 48)]


class TestRenderSpan:
    """Tests for render_span()."""

    def test_span_markup(self):
        """Given: a word, Then: class f<size> and count tooltip"""
        assert render_span(CloudWord("the", 3, 48)) == (
            '<span style="cursor:default" class="f48" title="count: 3">the</span>'
        )

    def test_word_is_escaped(self):
        """Given: a word with markup characters, Then: escaped"""
        assert ">a&amp;b&lt;c</span>" in render_span(CloudWord("a&b<c", 1, 11))


class TestRenderTagCloud:
    """Tests for render_tag_cloud()."""

    def test_structure(self):
        """Given: three words, Then: title, stylesheet, container and spans"""
        html = render_tag_cloud(WORDS, "cats.txt", "tagcloud.css")
        soup = BeautifulSoup(html, "html.parser")

        assert soup.title.string == "Top 3 words in cats.txt"
        assert soup.h2.string == "Top 3 words in cats.txt"
        link = soup.find("link")
        assert link["href"] == "tagcloud.css"
        assert link["rel"] == ["stylesheet"]

        box = soup.find("div", class_="cdiv").find("p", class_="cbox")
        spans = box.find_all("span")
        assert [s.string for s in spans] == ["cat", "mat", "the"]
        assert [s["class"] for s in spans] == [["f29"], ["f11"], ["f48"]]
        assert [s["title"] for s in spans] == ["count: 2", "count: 1", "count: 3"]

    def test_line_layout(self):
        """Given: words, Then: one line per element, one span per word"""
        lines = render_tag_cloud(WORDS, "x", "s.css").splitlines()
        assert lines[0] == "<html>"
        assert lines[-1] == "</html>"
        assert lines[2] == "<title>Top 3 words in x</title>"
        assert sum(1 for line in lines if line.startswith("<span")) == 3

    def test_source_name_escaped(self):
        """Given: a source name with markup, Then: escaped in title"""
        html = render_tag_cloud(WORDS[:1], "<b>.txt", "s.css")
        assert "<title>Top 1 words in &lt;b&gt;.txt</title>" in html
