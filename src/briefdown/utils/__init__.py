"""Utility modules for briefdown.

Provides:
- text: slugify, escape_html for the renderers
- logger: get_logger for logging
"""

from briefdown.utils.logger import get_logger
from briefdown.utils.text import escape_html, slugify

__all__ = [
    "escape_html",
    "get_logger",
    "slugify",
]
