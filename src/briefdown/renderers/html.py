"""HTML renderer for parsed briefings.

Emits semantic HTML only; styling is left to the page that embeds it.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can share a single HtmlRenderer instance.

Single-Pass Heading Decoration:
Heading IDs are generated during the walk and heading data is collected for a
table of contents at the same time.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from briefdown.config import get_render_config
from briefdown.errors import RenderError
from briefdown.inline import tokenize
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
from briefdown.utils.text import escape_html
from briefdown.utils.text import slugify as default_slugify


@dataclass(frozen=True, slots=True)
class HeadingInfo:
    """Heading metadata collected during rendering.

    Used to build a table of contents without re-parsing the HTML.
    """

    level: int
    text: str
    slug: str


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state, created fresh for each render() call."""

    headings: list[HeadingInfo] = field(default_factory=list)
    seen_slugs: set[str] = field(default_factory=set)


class HtmlRenderer:
    """Render a Document to HTML.

    Usage:
        >>> from briefdown import parse
        >>> HtmlRenderer(heading_ids=False).render(parse("### AAPL\\n- **Price:** $174.58"))
        '<h3>AAPL</h3>\\n<ul>\\n<li><strong>Price:</strong> $174.58</li>\\n</ul>\\n'

    Options left as None are taken from the active RenderConfig.

    """

    __slots__ = (
        "_heading_ids",
        "_render_blank",
        "_text_transformer",
        "_slugify",
        "_last_context",
    )

    def __init__(
        self,
        *,
        heading_ids: bool | None = None,
        render_blank: bool | None = None,
        text_transformer: Callable[[str], str] | None = None,
        slugify: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            heading_ids: Add slug id attributes to headings
            render_blank: Emit a spacer element for Blank blocks
            text_transformer: Optional callback to transform run text
            slugify: Optional custom slugify function for heading IDs
        """
        config = get_render_config()
        self._heading_ids = config.heading_ids if heading_ids is None else heading_ids
        self._render_blank = config.render_blank if render_blank is None else render_blank
        self._text_transformer = text_transformer or config.text_transformer
        self._slugify = slugify or default_slugify
        self._last_context: RenderContext | None = None

    def render(self, doc: Document) -> str:
        """Render document to an HTML string.

        Raises:
            RenderError: If the document holds an object that is not a Block
        """
        ctx = RenderContext()
        parts: list[str] = []
        for block in doc.blocks:
            self._render_block(block, parts, ctx)
        self._last_context = ctx
        return "".join(parts)

    def get_headings(self) -> list[HeadingInfo]:
        """Get heading info collected during the last render.

        Note:
            Reflects the most recent render() call on this instance. When an
            instance is shared across threads, read it right after render()
            in the same thread.
        """
        if self._last_context is None:
            return []
        return self._last_context.headings.copy()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, parts: list[str], ctx: RenderContext) -> None:
        match block:
            case Heading():
                self._render_heading(block, parts, ctx)
            case Paragraph():
                parts.append("<p>")
                self._render_runs(tokenize(block.text), parts)
                parts.append("</p>\n")
            case List():
                self._render_list(block, parts)
            case Divider():
                parts.append("<hr />\n")
            case Blank():
                if self._render_blank:
                    parts.append('<div class="blank"></div>\n')
            case _:
                raise RenderError(block)

    def _render_heading(self, heading: Heading, parts: list[str], ctx: RenderContext) -> None:
        """Render heading with an ID for anchoring."""
        runs = tokenize(heading.text)
        text = "".join(run.text for run in runs)
        slug = self._unique_slug(self._slugify(text), ctx)
        ctx.headings.append(HeadingInfo(level=heading.level, text=text, slug=slug))

        if self._heading_ids and slug:
            parts.append(f'<h{heading.level} id="{escape_html(slug)}">')
        else:
            parts.append(f"<h{heading.level}>")
        self._render_runs(runs, parts)
        parts.append(f"</h{heading.level}>\n")

    def _unique_slug(self, slug: str, ctx: RenderContext) -> str:
        if not slug:
            return slug
        original_slug = slug
        counter = 1
        while slug in ctx.seen_slugs:
            slug = f"{original_slug}-{counter}"
            counter += 1
        ctx.seen_slugs.add(slug)
        return slug

    def _render_list(self, lst: List, parts: list[str]) -> None:
        """Render ordered or unordered list, tokenizing each item on its own."""
        tag = "ol" if lst.ordered else "ul"
        parts.append(f"<{tag}>\n")
        for item in lst.items:
            parts.append("<li>")
            self._render_runs(tokenize(item), parts)
            parts.append("</li>\n")
        parts.append(f"</{tag}>\n")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_runs(self, runs: tuple[InlineRun, ...], parts: list[str]) -> None:
        for run in runs:
            match run:
                case Plain(text=text):
                    parts.append(escape_html(self._transform(text)))
                case Bold(text=text):
                    parts.append(f"<strong>{escape_html(self._transform(text))}</strong>")
                case Code(text=text):
                    parts.append(f"<code>{escape_html(self._transform(text))}</code>")
                case _:
                    raise RenderError(run)

    def _transform(self, text: str) -> str:
        if self._text_transformer is None:
            return text
        return self._text_transformer(text)
