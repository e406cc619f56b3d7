"""Tests for the high-level briefdown API."""


class TestParseFunction:
    """Tests for the parse() function."""

    def test_parse_heading(self) -> None:
        from briefdown import Heading, parse

        doc = parse("# Hello World")
        assert len(doc) == 1
        assert doc.blocks[0] == Heading(level=1, text="Hello World")

    def test_parse_keeps_source(self) -> None:
        from briefdown import parse

        assert parse("- a").source == "- a"

    def test_parse_empty(self) -> None:
        from briefdown import parse

        doc = parse("")
        assert doc.blocks == ()
        assert list(doc) == []

    def test_documents_are_immutable(self) -> None:
        import dataclasses

        import pytest

        from briefdown import parse

        doc = parse("text")
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.blocks = ()  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.blocks[0].text = "other"  # type: ignore[union-attr]


class TestRenderFunctions:
    def test_render(self) -> None:
        from briefdown import parse, render

        assert render(parse("### AAPL\n- **Price:** $174.58")) == (
            '<h3 id="aapl">AAPL</h3>\n<ul>\n<li><strong>Price:</strong> $174.58</li>\n</ul>\n'
        )

    def test_render_without_heading_ids(self) -> None:
        from briefdown import parse, render

        assert render(parse("## x"), heading_ids=False) == "<h2>x</h2>\n"

    def test_render_text(self) -> None:
        from briefdown import parse, render_text

        assert render_text(parse("## **x**\n1. `y`")) == "x\n1. y\n"


class TestBriefdown:
    def test_call(self) -> None:
        from briefdown import Briefdown

        assert Briefdown()("Hold `MSFT`") == "<p>Hold <code>MSFT</code></p>\n"

    def test_parse_many(self) -> None:
        from briefdown import Briefdown, Heading

        docs = Briefdown().parse_many(["# One", "# Two"])
        assert [doc.blocks[0] for doc in docs] == [
            Heading(level=1, text="One"),
            Heading(level=1, text="Two"),
        ]

    def test_render_text(self) -> None:
        from briefdown import Briefdown, RenderConfig

        bd = Briefdown(config=RenderConfig(divider_width=2))
        assert bd.render_text(bd.parse("---")) == "--\n"

    def test_conforms_to_renderer_protocol(self) -> None:
        from briefdown import DocumentRenderer, HtmlRenderer, TextRenderer, parse

        renderers: list[DocumentRenderer] = [HtmlRenderer(), TextRenderer()]
        for renderer in renderers:
            assert isinstance(renderer.render(parse("x")), str)


class TestPipeline:
    """Block segmentation followed by per-block inline decoration."""

    def test_end_to_end(self) -> None:
        from briefdown import Bold, Code, List, Plain, classify, inline_runs

        blocks = classify("- **a** b\n- `c`")
        assert blocks == (List(items=("**a** b", "`c`")),)
        assert inline_runs(blocks[0]) == ((Bold("a"), Plain(" b")), (Code("c"),))

    def test_public_names(self) -> None:
        import briefdown

        for name in briefdown.__all__:
            assert hasattr(briefdown, name), name
