"""Inline tokenizer: splits block text into plain, bold and code runs.

Supported spans:
- **bold**
- `code`

Delimiters cannot be escaped and spans do not nest. An opener without a
closer later in the text stays in the surrounding plain text.

Performance:
Both patterns are searched again from every cursor position, and a search
that finds nothing scans the rest of the text. A long line with many spans of
one kind and none of the other therefore costs O(n^2). Briefings are a few
kilobytes, where this does not matter.

Thread Safety:
Pure functions over module-level compiled patterns.

"""

from __future__ import annotations

import re

from briefdown.nodes import (
    Blank,
    Block,
    Bold,
    Code,
    Divider,
    Heading,
    InlineRun,
    List,
    Paragraph,
    Plain,
)

# Shortest span with at least one character between the delimiters.
# `.` does not cross a newline.
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_CODE_RE = re.compile(r"`(.+?)`")


def tokenize(text: str) -> tuple[InlineRun, ...]:
    """Split text into inline runs.

    At each cursor position the earliest bold span and the earliest code span
    are located. The one that starts first wins; bold wins a tie.

    Joining ``run.source`` over the result always gives back ``text``.

    Args:
        text: Heading text, paragraph text or a single list item

    Returns:
        Tuple of runs in input order (empty for empty input)

    Example:
        >>> tokenize("**bold** and `code`")
        (Bold(text='bold'), Plain(text=' and '), Code(text='code'))
    """
    runs: list[InlineRun] = []
    pos = 0
    end = len(text)

    while pos < end:
        bold = _BOLD_RE.search(text, pos)
        code = _CODE_RE.search(text, pos)

        if bold is None and code is None:
            runs.append(Plain(text[pos:]))
            break

        if bold is not None and (code is None or bold.start() <= code.start()):
            found, node_type = bold, Bold
        else:
            found, node_type = code, Code

        if found.start() > pos:
            runs.append(Plain(text[pos : found.start()]))
        runs.append(node_type(found.group(1)))
        pos = found.end()

    return tuple(runs)


def inline_runs(block: Block) -> tuple[tuple[InlineRun, ...], ...]:
    """Tokenize the text carried by one block.

    Headings and paragraphs give one run tuple. Lists give one run tuple per
    item, each item tokenized on its own. Dividers and blanks carry no text.

    Example:
        >>> inline_runs(List(items=("**a**", "b")))
        ((Bold(text='a'),), (Plain(text='b'),))
    """
    match block:
        case Heading(text=text) | Paragraph(text=text):
            return (tokenize(text),)
        case List(items=items):
            return tuple(tokenize(item) for item in items)
        case Divider() | Blank():
            return ()
