"""Tests for HtmlRenderer."""

from __future__ import annotations

import pytest

from briefdown import parse
from briefdown.errors import RenderError
from briefdown.nodes import Blank, Divider, Document, Heading, List, Paragraph
from briefdown.renderers.html import HeadingInfo, HtmlRenderer


def _render(*blocks, **options) -> str:  # type: ignore[no-untyped-def]
    return HtmlRenderer(**options).render(Document(blocks=tuple(blocks)))


class TestBlocks:
    """Tests for block rendering."""

    def test_heading_with_id(self) -> None:
        assert _render(Heading(level=3, text="Apple Inc. (AAPL)")) == (
            '<h3 id="apple-inc-aapl">Apple Inc. (AAPL)</h3>\n'
        )

    def test_heading_without_id(self) -> None:
        assert _render(Heading(level=4, text="Summary"), heading_ids=False) == "<h4>Summary</h4>\n"

    def test_heading_with_empty_slug_has_no_id(self) -> None:
        assert _render(Heading(level=1, text="")) == "<h1></h1>\n"

    def test_duplicate_headings_get_unique_ids(self) -> None:
        html = _render(Heading(level=4, text="News"), Heading(level=4, text="News"))
        assert '<h4 id="news">' in html
        assert '<h4 id="news-1">' in html

    def test_paragraph(self) -> None:
        assert _render(Paragraph(text="Hello")) == "<p>Hello</p>\n"

    def test_unordered_list(self) -> None:
        assert _render(List(items=("a", "b"))) == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n"

    def test_ordered_list(self) -> None:
        assert _render(List(items=("a",), ordered=True)) == "<ol>\n<li>a</li>\n</ol>\n"

    def test_divider(self) -> None:
        assert _render(Divider()) == "<hr />\n"

    def test_blank(self) -> None:
        assert _render(Blank()) == '<div class="blank"></div>\n'

    def test_blank_suppressed(self) -> None:
        assert _render(Blank(), render_blank=False) == ""

    def test_empty_document(self) -> None:
        assert _render() == ""

    def test_foreign_block_raises(self) -> None:
        with pytest.raises(RenderError, match="str"):
            HtmlRenderer().render(Document(blocks=("not a block",)))  # type: ignore[arg-type]


class TestInline:
    """Tests for inline run rendering."""

    def test_bold_and_code(self) -> None:
        assert _render(Paragraph(text="**bold** and `code`")) == (
            "<p><strong>bold</strong> and <code>code</code></p>\n"
        )

    def test_items_are_decorated_individually(self) -> None:
        html = _render(List(items=("**Price:** $1", "`X`")))
        assert "<li><strong>Price:</strong> $1</li>" in html
        assert "<li><code>X</code></li>" in html

    def test_heading_inline(self) -> None:
        assert _render(Heading(level=2, text="**Top** pick"), heading_ids=False) == (
            "<h2><strong>Top</strong> pick</h2>\n"
        )

    def test_escaping(self) -> None:
        html = _render(Paragraph(text='<b>&"x"</b> `a<b`'))
        assert html == "<p>&lt;b&gt;&amp;&quot;x&quot;&lt;/b&gt; <code>a&lt;b</code></p>\n"

    def test_text_transformer(self) -> None:
        html = _render(Paragraph(text="buy **now**"), text_transformer=str.upper)
        assert html == "<p>BUY <strong>NOW</strong></p>\n"

    def test_transformer_output_is_escaped(self) -> None:
        html = _render(Paragraph(text="x"), text_transformer=lambda s: "<" + s)
        assert html == "<p>&lt;x</p>\n"


class TestHeadings:
    def test_get_headings_before_render(self) -> None:
        assert HtmlRenderer().get_headings() == []

    def test_get_headings(self) -> None:
        renderer = HtmlRenderer()
        renderer.render(parse("### **1.** Apple\ntext\n#### News\n#### News"))
        assert renderer.get_headings() == [
            HeadingInfo(level=3, text="1. Apple", slug="1-apple"),
            HeadingInfo(level=4, text="News", slug="news"),
            HeadingInfo(level=4, text="News", slug="news-1"),
        ]

    def test_headings_reset_between_renders(self) -> None:
        renderer = HtmlRenderer()
        renderer.render(parse("# One"))
        renderer.render(parse("# Two"))
        assert [h.text for h in renderer.get_headings()] == ["Two"]

    def test_custom_slugify(self) -> None:
        html = _render(Heading(level=1, text="Title"), slugify=lambda s: "fixed")
        assert html == '<h1 id="fixed">Title</h1>\n'


class TestSample:
    def test_sample_briefing(self) -> None:
        from briefdown.briefing import SAMPLE_BRIEFING

        html = HtmlRenderer().render(parse(SAMPLE_BRIEFING))
        assert html.startswith(
            '<h3 id="morning-briefing-stock-analysis-for-aapl-msft-googl">'
        )
        assert html.count("<hr />") == 4
        assert html.count("<ul>") == 6
        assert "<li><strong>Current Price:</strong> $174.58</li>" in html
        assert "<p><strong>Recent News:</strong></p>" in html
