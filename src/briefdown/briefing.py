"""Boundary helpers for the briefing agent.

The agent call itself, scheduling and preference storage live outside this
package. What is here is the pure part of that boundary:

- watchlist symbol validation
- the request message sent to the agent
- pulling the report text out of the agent's response

Example:
    >>> build_briefing_prompt(("AAPL", "MSFT"))[:60]
    'Analyze the following stocks for my morning briefing: AAPL, '
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping
from typing import Any

from briefdown.errors import AgentResponseError, EmptyWatchlistError
from briefdown.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_WATCHLIST: tuple[str, ...] = ("AAPL", "MSFT", "GOOGL", "AMZN", "TSLA")

ANALYSIS_FAILED_MESSAGE = "Analysis failed. Please try again."
NO_CONTENT_MESSAGE = "Analysis completed but no content returned."

_SYMBOL_RE = re.compile(r"[A-Z]{1,6}")

# Keys checked, in order, when the agent wraps its report in a result object.
_RESULT_TEXT_KEYS = ("text", "response", "raw_text")

SAMPLE_BRIEFING = """\
### Morning Briefing: Stock Analysis for AAPL, MSFT, GOOGL

#### Portfolio Overview Summary
Today's analysis focuses on three major tech stocks: Apple Inc. (AAPL), Microsoft Corporation (MSFT), and Alphabet Inc. (GOOGL). The technology sector has shown mixed performance recently, with ongoing concerns related to inflation and changing consumer behavior impacting investor sentiment.

---

### 1. Apple Inc. (AAPL)
- **Current Price:** $174.58
- **Daily Change:** +1.25%
- **52-week High/Low:** $198.23 / $124.17
- **Market Cap:** $2.7 trillion
- **P/E Ratio:** 29.5
- **Market Sentiment:** Bullish

**Recent News:**
Apple has announced a software update focusing on privacy features, which has been well received by users and analysts alike. The company continues to expand its service offerings, particularly in subscriptions and advertising.

**Actionable Insights:**
- **Recommendation:** Buy on dips; the recent price decline presents a potential entry point for long-term investors.

---

### 2. Microsoft Corporation (MSFT)
- **Current Price:** $342.12
- **Daily Change:** -0.55%
- **52-week High/Low:** $366.78 / $213.43
- **Market Cap:** $2.55 trillion
- **P/E Ratio:** 36.7
- **Market Sentiment:** Neutral

**Recent News:**
Microsoft has seen a recent decline in cloud service growth rates, which has raised concerns among investors. However, their integration of AI across services remains a bright spot.

**Actionable Insights:**
- **Recommendation:** Hold; monitor for signs of stabilization in cloud growth.

---

### 3. Alphabet Inc. (GOOGL)
- **Current Price:** $128.39
- **Daily Change:** +2.10%
- **52-week High/Low:** $145.64 / $83.45
- **Market Cap:** $1.66 trillion
- **P/E Ratio:** 24.1
- **Market Sentiment:** Bullish

**Recent News:**
Alphabet's latest quarterly earnings exceeded expectations thanks to strong ad revenue growth and improved performance in their cloud division.

**Actionable Insights:**
- **Recommendation:** Buy; given the robust growth in advertising and cloud services.

---

### Conclusion
The tech sector offers promising opportunities amid current volatility. Apple and Alphabet exhibit bullish trends supported by positive news, while Microsoft remains stable but neutral."""


# =============================================================================
# Watchlist
# =============================================================================


def normalize_symbol(raw: str) -> str | None:
    """Normalize user input to a ticker symbol.

    Returns:
        The trimmed, uppercased symbol, or None unless it is 1-6 letters A-Z.

    Examples:
        >>> normalize_symbol(" nvda ")
        'NVDA'
        >>> normalize_symbol("BRK.B") is None
        True
    """
    symbol = raw.strip().upper()
    if _SYMBOL_RE.fullmatch(symbol) is None:
        return None
    return symbol


def add_symbol(watchlist: Iterable[str], raw: str) -> tuple[str, ...]:
    """Return the watchlist with ``raw`` appended.

    Invalid symbols and symbols already on the list leave it unchanged.
    """
    current = tuple(watchlist)
    symbol = normalize_symbol(raw)
    if symbol is None or symbol in current:
        return current
    return (*current, symbol)


def remove_symbol(watchlist: Iterable[str], symbol: str) -> tuple[str, ...]:
    """Return the watchlist without ``symbol``."""
    return tuple(s for s in watchlist if s != symbol)


def effective_watchlist(watchlist: Iterable[str]) -> tuple[str, ...]:
    """The symbols to show: the watchlist, or the defaults when it is empty."""
    current = tuple(watchlist)
    return current or DEFAULT_WATCHLIST


# =============================================================================
# Agent request and response
# =============================================================================


def build_briefing_prompt(symbols: Iterable[str], email: str | None = None) -> str:
    """Build the message that asks the agent for a briefing.

    Args:
        symbols: Watchlist symbols, in display order
        email: Address the agent should send the report to, if any

    Raises:
        EmptyWatchlistError: If ``symbols`` is empty
    """
    symbols = tuple(symbols)
    if not symbols:
        raise EmptyWatchlistError()

    message = (
        f"Analyze the following stocks for my morning briefing: {', '.join(symbols)}. "
        "Provide current price movements, key metrics, market sentiment, recent news, "
        "and actionable insights for each stock. "
        "Format as a comprehensive portfolio briefing."
    )
    if email:
        message += f" Send the report to {email}."
    return message


def extract_report_text(result: Mapping[str, Any]) -> str:
    """Pull the report text out of an agent call result.

    The agent is not consistent about where it puts the report. Checked in
    order: ``response`` as a string, ``response.result`` as a string, the
    ``text``, ``response`` and ``raw_text`` keys of ``response.result``, a
    JSON dump of ``response.result``, ``response.message``, and finally the
    top-level ``raw_response``.

    Args:
        result: Decoded agent call result with a ``success`` flag

    Returns:
        The report text, or a placeholder when the call succeeded without
        content.

    Raises:
        AgentResponseError: If the call did not succeed
    """
    response = result.get("response")
    if not result.get("success"):
        message = result.get("error")
        if not message and isinstance(response, Mapping):
            message = response.get("message")
        raise AgentResponseError(str(message or ANALYSIS_FAILED_MESSAGE))

    text = _response_text(response)
    if not text and result.get("raw_response"):
        logger.debug("agent response carried no report text, using raw_response")
        text = str(result["raw_response"])
    return text or NO_CONTENT_MESSAGE


def _response_text(response: Any) -> str:
    if isinstance(response, str):
        return response
    if not isinstance(response, Mapping):
        return ""

    payload = response.get("result")
    if payload:
        if isinstance(payload, str):
            return payload
        if isinstance(payload, Mapping):
            for key in _RESULT_TEXT_KEYS:
                if payload.get(key):
                    return str(payload[key])
        logger.debug("agent result has no text field, dumping it as JSON")
        try:
            return json.dumps(payload, indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            return str(payload)

    message = response.get("message")
    return str(message) if message else ""
