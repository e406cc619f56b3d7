"""
briefdown — structured rendering for AI-generated briefings

Turns the free-form text an analysis agent returns into a typed document
tree, then into HTML or plain text. The grammar is a small fixed subset of
Markdown (# to #### headings, --- dividers, - / * / 1. list items, **bold**
and `code`), and parsing never fails: anything unrecognised is plain text.

Quick Start:
    >>> from briefdown import parse, render
    >>> doc = parse("### AAPL\\n- **Price:** $174.58")
    >>> print(render(doc), end="")
    <h3 id="aapl">AAPL</h3>
    <ul>
    <li><strong>Price:</strong> $174.58</li>
    </ul>

    >>> # Or use the high-level processor
    >>> from briefdown import Briefdown
    >>> bd = Briefdown()
    >>> html = bd("**Recent News:**")

Installation:
    pip install briefdown            # zero runtime dependencies
"""

from collections.abc import Iterable

from briefdown.briefing import (
    DEFAULT_WATCHLIST,
    SAMPLE_BRIEFING,
    add_symbol,
    build_briefing_prompt,
    effective_watchlist,
    extract_report_text,
    normalize_symbol,
    remove_symbol,
)
from briefdown.classifier import BlockClassifier, classify
from briefdown.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from briefdown.errors import (
    AgentResponseError,
    BriefdownError,
    BriefingError,
    EmptyWatchlistError,
    RenderError,
)
from briefdown.inline import inline_runs, tokenize
from briefdown.lines import LINE_RULES, ClassifiedLine, LineKind, classify_line
from briefdown.nodes import (
    Blank,
    Block,
    Bold,
    Code,
    Divider,
    Document,
    Heading,
    InlineRun,
    List,
    Paragraph,
    Plain,
)
from briefdown.renderers.html import HeadingInfo, HtmlRenderer
from briefdown.renderers.protocol import DocumentRenderer
from briefdown.renderers.text import TextRenderer
from briefdown.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def parse(source: str) -> Document:
    """Parse briefing text into a Document.

    Args:
        source: Briefing text

    Returns:
        Document holding the classified blocks

    Example:
        >>> parse("#### h4").blocks
        (Heading(level=4, text='h4'),)
    """
    return Document(blocks=classify(source), source=source)


def render(doc: Document, *, heading_ids: bool | None = None) -> str:
    """Render a Document to HTML.

    Options left as None come from the active RenderConfig.

    Example:
        >>> render(parse("Hold; monitor `MSFT`"))
        '<p>Hold; monitor <code>MSFT</code></p>\\n'
    """
    return HtmlRenderer(heading_ids=heading_ids).render(doc)


def render_text(doc: Document) -> str:
    """Render a Document to plain text with all markers removed."""
    return TextRenderer().render(doc)


class Briefdown:
    """High-level processor combining the parser and the renderers.

    Usage:
        >>> bd = Briefdown(config=RenderConfig(heading_ids=False))
        >>> bd("## Conclusion")
        '<h2>Conclusion</h2>\\n'

        >>> doc = bd.parse("- a\\n1. b")
        >>> [block.ordered for block in doc]
        [False, True]

    Thread Safety:
        The config is applied through a ContextVar for the duration of each
        render call only. Safe to share across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, config: RenderConfig | None = None) -> None:
        """Initialize processor.

        Args:
            config: Render configuration (the active one at render time if None)
        """
        self._config = config

    def __call__(self, source: str) -> str:
        """Parse and render to HTML in one call."""
        return self.render(self.parse(source))

    def parse(self, source: str) -> Document:
        """Parse briefing text into a Document."""
        return parse(source)

    def parse_many(self, sources: Iterable[str]) -> list[Document]:
        """Parse several briefings.

        Example:
            >>> len(Briefdown().parse_many(["# One", "# Two"]))
            2
        """
        return [parse(source) for source in sources]

    def render(self, doc: Document) -> str:
        """Render a Document to HTML."""
        with render_config_context(self._config or get_render_config()):
            return HtmlRenderer().render(doc)

    def render_text(self, doc: Document) -> str:
        """Render a Document to plain text."""
        with render_config_context(self._config or get_render_config()):
            return TextRenderer().render(doc)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "render_text",
    "classify",
    "tokenize",
    "inline_runs",
    # Blocks
    "Block",
    "Blank",
    "Divider",
    "Document",
    "Heading",
    "List",
    "Paragraph",
    # Inline runs
    "InlineRun",
    "Bold",
    "Code",
    "Plain",
    # Classifier components
    "BlockClassifier",
    "ClassifiedLine",
    "LineKind",
    "LINE_RULES",
    "classify_line",
    # Renderers
    "DocumentRenderer",
    "HeadingInfo",
    "HtmlRenderer",
    "TextRenderer",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Briefing boundary
    "DEFAULT_WATCHLIST",
    "SAMPLE_BRIEFING",
    "add_symbol",
    "build_briefing_prompt",
    "effective_watchlist",
    "extract_report_text",
    "normalize_symbol",
    "remove_symbol",
    # Errors
    "BriefdownError",
    "BriefingError",
    "EmptyWatchlistError",
    "AgentResponseError",
    "RenderError",
    # High-level
    "Briefdown",
]
