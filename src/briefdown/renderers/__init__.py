"""briefdown renderers.

Renderers turn a parsed Document into an output format.

Available Renderers:
- HtmlRenderer: semantic HTML for the briefing view
- TextRenderer: marker-free plain text for e-mail bodies and terminals

Thread Safety:
Per-render state lives in objects created inside each render() call.
Renderer instances can be shared across threads.

"""

from briefdown.renderers.html import HeadingInfo, HtmlRenderer
from briefdown.renderers.protocol import DocumentRenderer
from briefdown.renderers.text import TextRenderer

__all__ = ["DocumentRenderer", "HeadingInfo", "HtmlRenderer", "TextRenderer"]
