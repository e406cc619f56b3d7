"""Tests for briefdown.utils."""

import logging

from briefdown.utils import escape_html, get_logger, slugify


class TestSlugify:
    def test_basic(self) -> None:
        assert slugify("Morning Briefing: Stock Analysis") == "morning-briefing-stock-analysis"

    def test_punctuation_and_parentheses(self) -> None:
        assert slugify("1. Apple Inc. (AAPL)") == "1-apple-inc-aapl"

    def test_unicode(self) -> None:
        assert slugify("Café Crème") == "café-crème"

    def test_empty(self) -> None:
        assert slugify("") == ""
        assert slugify("***") == ""

    def test_separator(self) -> None:
        assert slugify("a b", separator="_") == "a_b"


class TestEscapeHtml:
    def test_escapes(self) -> None:
        assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"

    def test_single_quote_kept(self) -> None:
        assert escape_html("Today's") == "Today's"


class TestLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("classifier").name == "briefdown.classifier"

    def test_prefix_not_duplicated(self) -> None:
        assert get_logger("briefdown.inline").name == "briefdown.inline"
        assert get_logger("briefdown").name == "briefdown"

    def test_is_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)

    def test_classifier_logs_summary(self, caplog) -> None:  # type: ignore[no-untyped-def]
        from briefdown import classify

        with caplog.at_level(logging.DEBUG, logger="briefdown"):
            classify("- a\n- b\n\nend")
        assert "classified 4 lines into 3 blocks" in caplog.text
