"""Exception classes for briefdown.

Parsing never raises: every string is a valid briefing. These exceptions
cover the boundary helpers and the renderers.
"""

from __future__ import annotations


class BriefdownError(Exception):
    """Base exception for all briefdown errors.

    Subclass this for specific error categories.
    """

    pass


class BriefingError(BriefdownError):
    """Error while preparing a briefing request or reading its response."""

    pass


class EmptyWatchlistError(BriefingError):
    """Raised when a briefing is requested for an empty watchlist."""

    def __init__(self, message: str = "Add at least one stock to your watchlist first.") -> None:
        super().__init__(message)


class AgentResponseError(BriefingError):
    """Raised when the agent reports a failed analysis.

    The message is the one the agent supplied, or a generic fallback when it
    supplied none, and is meant to be shown to the user as is.
    """

    def __init__(self, message: str) -> None:
        """Initialize with a user-facing message.

        Args:
            message: Description of the failure
        """
        self.message = message
        super().__init__(message)


class RenderError(BriefdownError):
    """Error during rendering.

    Raised when a renderer is handed an object that is not one of the
    document's block or inline node types.
    """

    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"Cannot render node of type {type(node).__name__!r}")
