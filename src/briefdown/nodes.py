"""Typed document nodes for briefdown.

All nodes are frozen dataclasses with slots for:
- Immutability: a parse result is never mutated after it is produced
- Pattern matching: renderers dispatch with exhaustive match statements
- Memory efficiency: __slots__ keeps briefing-sized trees small

Node Hierarchy:
Block (one structural unit, in render order)
├── Heading
├── Paragraph
├── List
├── Divider
└── Blank
InlineRun (one span of a block's text)
├── Plain
├── Bold
└── Code

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal, TypeAlias

# =============================================================================
# Inline Runs
# =============================================================================


@dataclass(frozen=True, slots=True)
class Plain:
    """Unmarked text, kept exactly as it appeared in the input."""

    text: str

    @property
    def source(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Bold:
    """Bold text.

    Markdown: **text**
    HTML: <strong>text</strong>

    """

    text: str

    @property
    def source(self) -> str:
        return f"**{self.text}**"


@dataclass(frozen=True, slots=True)
class Code:
    """Inline code.

    Markdown: `code`
    HTML: <code>code</code>

    """

    text: str

    @property
    def source(self) -> str:
        return f"`{self.text}`"


# Type alias for inline runs
InlineRun: TypeAlias = Plain | Bold | Code


# =============================================================================
# Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading:
    """ATX-style heading, levels 1 through 4.

    Markdown: ## Heading
    HTML: <h2>Heading</h2>

    """

    level: Literal[1, 2, 3, 4]
    text: str


@dataclass(frozen=True, slots=True)
class Paragraph:
    """One line of prose.

    Every non-blank line that carries no marker becomes its own paragraph.

    """

    text: str


@dataclass(frozen=True, slots=True)
class List:
    """Ordered or unordered list.

    Markdown: - item / * item or 1. item
    HTML: <ul>/<ol> with <li> children

    Items hold raw item text with the marker removed. Inline decoration is
    applied per item, never to the joined items.

    """

    items: tuple[str, ...]
    ordered: bool = False


@dataclass(frozen=True, slots=True)
class Divider:
    """Horizontal rule.

    Markdown: ---
    HTML: <hr />

    """


@dataclass(frozen=True, slots=True)
class Blank:
    """Vertical-space marker produced by an empty or whitespace-only line."""


# Type alias for block elements
Block: TypeAlias = Heading | Paragraph | List | Divider | Blank


@dataclass(frozen=True, slots=True)
class Document:
    """Root of a parsed briefing.

    Holds the classified blocks in render order, plus the source they were
    classified from.

    """

    blocks: tuple[Block, ...]
    source: str = ""

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)
