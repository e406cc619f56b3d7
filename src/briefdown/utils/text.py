"""Text helpers shared by the renderers.

Example:
    >>> from briefdown.utils.text import slugify
    >>> slugify("1. Apple Inc. (AAPL)")
    '1-apple-inc-aapl'
"""

from __future__ import annotations

import html
import re

_NON_WORD_RE = re.compile(r"[^\w\s-]")
_SEPARATOR_RUN_RE = re.compile(r"[-\s]+")


def slugify(text: str, separator: str = "-") -> str:
    """Convert heading text to an anchor slug.

    Keeps Unicode word characters, so "Café" stays "café". Bold and code
    markers are dropped along with other punctuation.

    Examples:
        >>> slugify("Morning Briefing: Stock Analysis")
        'morning-briefing-stock-analysis'
        >>> slugify("**Recent News:**")
        'recent-news'
        >>> slugify("!!!")
        ''
    """
    if not text:
        return ""
    text = _NON_WORD_RE.sub("", text.lower().strip())
    text = _SEPARATOR_RUN_RE.sub(separator, text)
    return text.strip(separator)


def escape_html(text: str) -> str:
    """Escape text for HTML element content and double-quoted attributes.

    Escapes &, <, > and ". Single quotes are left alone.

    Examples:
        >>> escape_html('P/E < 30 & "cheap"')
        'P/E &lt; 30 &amp; &quot;cheap&quot;'
    """
    return html.escape(text, quote=False).replace('"', "&quot;")
