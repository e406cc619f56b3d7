"""DocumentRenderer protocol — stable interface for briefdown renderers.

Any renderer that implements ``render(doc) -> str`` conforms to this protocol.

Example:
    from briefdown.renderers.protocol import DocumentRenderer

    def publish(renderer: DocumentRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from briefdown.nodes import Document


class DocumentRenderer(Protocol):
    """Protocol for document renderers.

    The built-in ``HtmlRenderer`` and ``TextRenderer`` conform to it.

    """

    def render(self, doc: Document) -> str:
        """Render a Document to a string."""
        ...
