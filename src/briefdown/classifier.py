"""Line-oriented block classifier.

Turns a whole briefing into an ordered tuple of blocks in one forward pass:
1. Split the source on newlines
2. Classify each line (see briefdown.lines)
3. Either accumulate it into the open list or flush and emit a block

The only state carried between lines is the open list accumulator.

Thread Safety:
BlockClassifier instances are single-use. Create one per source string.
The classify() function does this for you and is safe to call from any thread.

"""

from __future__ import annotations

from briefdown.lines import ClassifiedLine, LineKind, classify_line
from briefdown.nodes import Blank, Block, Divider, Heading, List, Paragraph
from briefdown.utils.logger import get_logger

logger = get_logger(__name__)


class BlockClassifier:
    """Single-pass classifier with a list accumulator.

    Usage:
        >>> classifier = BlockClassifier("- a\\n- b\\n\\n1. c")
        >>> classifier.classify()
        (List(items=('a', 'b'), ordered=False), Blank(), List(items=('c',), ordered=True))

    Thread Safety:
        Instances are single-use. All state is instance-local.

    """

    __slots__ = ("_source", "_blocks", "_list_items", "_list_ordered")

    def __init__(self, source: str) -> None:
        """Initialize classifier with source text.

        Args:
            source: Briefing text, newline-delimited
        """
        self._source = source
        self._blocks: list[Block] = []
        self._list_items: list[str] = []
        self._list_ordered = False

    def classify(self) -> tuple[Block, ...]:
        """Classify every line and return the blocks in render order."""
        if not self._source:
            return ()

        lines = self._source.split("\n")
        for line in lines:
            self._consume(classify_line(line))
        self._flush()

        logger.debug("classified %d lines into %d blocks", len(lines), len(self._blocks))
        return tuple(self._blocks)

    def _consume(self, line: ClassifiedLine) -> None:
        if line.is_list_item:
            ordered = line.kind is LineKind.ORDERED_ITEM
            if self._list_items and self._list_ordered != ordered:
                self._flush()
            self._list_ordered = ordered
            self._list_items.append(line.text)
            return

        # Every other kind of line ends the open list.
        self._flush()
        match line.kind:
            case LineKind.HEADING:
                self._blocks.append(Heading(level=line.level, text=line.text))  # type: ignore[arg-type]
            case LineKind.DIVIDER:
                self._blocks.append(Divider())
            case LineKind.BLANK:
                self._blocks.append(Blank())
            case LineKind.PARAGRAPH:
                self._blocks.append(Paragraph(text=line.text))

    def _flush(self) -> None:
        """Emit the open list as one List block, if it holds any items."""
        if not self._list_items:
            return
        self._blocks.append(List(items=tuple(self._list_items), ordered=self._list_ordered))
        self._list_items = []
        self._list_ordered = False


def classify(document: str) -> tuple[Block, ...]:
    """Classify a briefing into blocks.

    Never raises: any string is a valid document. Text that carries no
    markers reduces to Paragraph and Blank blocks.

    Args:
        document: Briefing text

    Returns:
        Tuple of blocks in render order (empty for empty input)

    Example:
        >>> classify("#### h4")
        (Heading(level=4, text='h4'),)
    """
    return BlockClassifier(document).classify()
