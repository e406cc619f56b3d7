"""Line classification for the block classifier.

Each input line is matched against LINE_RULES in order; the first rule that
accepts the line decides its kind and payload. Markers overlap as prefixes
("####" also starts with "###", "##" and "#"), so the table runs from the
most specific marker to the least specific one and must stay ordered.

Thread Safety:
Rules are module-level constants and pure functions of one line.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TypeAlias
from dataclasses import dataclass
from enum import Enum, auto


class LineKind(Enum):
    """Kinds of line recognised by the classifier."""

    HEADING = auto()
    DIVIDER = auto()
    UNORDERED_ITEM = auto()
    ORDERED_ITEM = auto()
    BLANK = auto()
    PARAGRAPH = auto()


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A line tagged with its kind and marker-free payload.

    Attributes:
        kind: Which rule accepted the line
        text: Heading text, item text or paragraph text ("" for dividers
            and blanks)
        level: Heading level (1-4), 0 for every other kind

    """

    kind: LineKind
    text: str = ""
    level: int = 0

    @property
    def is_list_item(self) -> bool:
        return self.kind is LineKind.UNORDERED_ITEM or self.kind is LineKind.ORDERED_ITEM


LineRule: TypeAlias = Callable[[str], ClassifiedLine | None]


_UNORDERED_ITEM_RE = re.compile(r"[-*]\s")
_UNORDERED_MARKER_RE = re.compile(r"[-*]\s+")
_ORDERED_ITEM_RE = re.compile(r"\d+\.\s")
_ORDERED_MARKER_RE = re.compile(r"\d+\.\s+")
_LEADING_SPACE_RE = re.compile(r"\s*")


def _heading_rule(level: int) -> LineRule:
    """Build the rule for one heading level.

    The marker is removed along with at most one run of whitespace that
    directly follows it. The rest of the line is kept verbatim.
    """
    marker = "#" * level

    def rule(line: str) -> ClassifiedLine | None:
        if not line.startswith(marker):
            return None
        rest = line[level:]
        gap = _LEADING_SPACE_RE.match(rest)
        return ClassifiedLine(LineKind.HEADING, rest[gap.end() :], level)

    rule.__name__ = f"h{level}"
    return rule


def _divider_rule(line: str) -> ClassifiedLine | None:
    if line.startswith("---"):
        return ClassifiedLine(LineKind.DIVIDER)
    return None


def _unordered_item_rule(line: str) -> ClassifiedLine | None:
    if not _UNORDERED_ITEM_RE.match(line):
        return None
    marker = _UNORDERED_MARKER_RE.match(line)
    return ClassifiedLine(LineKind.UNORDERED_ITEM, line[marker.end() :])


def _ordered_item_rule(line: str) -> ClassifiedLine | None:
    if not _ORDERED_ITEM_RE.match(line):
        return None
    marker = _ORDERED_MARKER_RE.match(line)
    return ClassifiedLine(LineKind.ORDERED_ITEM, line[marker.end() :])


def _blank_rule(line: str) -> ClassifiedLine | None:
    if line.strip() == "":
        return ClassifiedLine(LineKind.BLANK)
    return None


def _paragraph_rule(line: str) -> ClassifiedLine:
    return ClassifiedLine(LineKind.PARAGRAPH, line)


# Priority order. The paragraph rule accepts everything and must stay last.
LINE_RULES: tuple[LineRule, ...] = (
    _heading_rule(4),
    _heading_rule(3),
    _heading_rule(2),
    _heading_rule(1),
    _divider_rule,
    _unordered_item_rule,
    _ordered_item_rule,
    _blank_rule,
    _paragraph_rule,
)


def classify_line(line: str) -> ClassifiedLine:
    """Classify a single line (without its newline).

    Args:
        line: One line of the document

    Returns:
        The result of the first rule in LINE_RULES that accepts the line.

    Example:
        >>> classify_line("#### Portfolio Overview")
        ClassifiedLine(kind=<LineKind.HEADING: 1>, text='Portfolio Overview', level=4)
    """
    for rule in LINE_RULES:
        result = rule(line)
        if result is not None:
            return result
    # Unreachable: the paragraph rule accepts every line.
    return _paragraph_rule(line)
