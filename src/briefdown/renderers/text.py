"""Plain-text renderer — briefings without markup.

Markers are removed; structure is kept with bullets, numbers and a dash line
for dividers. Each block becomes one line (a list becomes one line per item),
and Blank blocks become empty lines, so the result follows the layout of the
source.

Example:
    >>> from briefdown import parse
    >>> TextRenderer().render(parse("### AAPL\\n- **Price:** $174.58\\n- Cap: `2.7T`"))
    'AAPL\\n• Price: $174.58\\n• Cap: 2.7T\\n'
"""

from collections.abc import Callable

from briefdown.config import get_render_config
from briefdown.errors import RenderError
from briefdown.inline import tokenize
from briefdown.nodes import Blank, Block, Divider, Document, Heading, List, Paragraph

BULLET = "•"


class TextRenderer:
    """Render a Document to plain text for e-mail bodies and terminals.

    Ordered lists are renumbered from 1 regardless of the numbers in the
    source, since the classifier keeps only item text.
    """

    __slots__ = ("_divider_width", "_render_blank", "_text_transformer")

    def __init__(
        self,
        *,
        divider_width: int | None = None,
        render_blank: bool | None = None,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        config = get_render_config()
        self._divider_width = config.divider_width if divider_width is None else divider_width
        self._render_blank = config.render_blank if render_blank is None else render_blank
        self._text_transformer = text_transformer or config.text_transformer

    def render(self, doc: Document) -> str:
        """Render document to plain text."""
        lines: list[str] = []
        for block in doc.blocks:
            self._render_block(block, lines)
        return "".join(f"{line}\n" for line in lines)

    def _render_block(self, block: Block, lines: list[str]) -> None:
        match block:
            case Heading(text=text) | Paragraph(text=text):
                lines.append(self._plain(text))
            case List(items=items, ordered=ordered):
                for number, item in enumerate(items, start=1):
                    prefix = f"{number}." if ordered else BULLET
                    lines.append(f"{prefix} {self._plain(item)}")
            case Divider():
                lines.append("-" * self._divider_width)
            case Blank():
                if self._render_blank:
                    lines.append("")
            case _:
                raise RenderError(block)

    def _plain(self, text: str) -> str:
        """Inline text with bold and code markers removed."""
        texts = [run.text for run in tokenize(text)]
        if self._text_transformer is not None:
            texts = [self._text_transformer(t) for t in texts]
        return "".join(texts)
