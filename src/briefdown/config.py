"""ContextVar-based render configuration for briefdown.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Renderers read the active config when they are constructed; explicit keyword
arguments passed to a renderer take precedence over it.

Parsing has no options: the block and inline grammar is fixed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from briefdown.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(heading_ids=False)):
        html = render(parse(text))

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        heading_ids: Add slug id attributes to HTML headings
        render_blank: Emit a spacer for Blank blocks
        divider_width: Width of the dash line the text renderer uses for dividers
        text_transformer: Optional callback applied to the text of every
            inline run before it is escaped and written

    """

    heading_ids: bool = True
    render_blank: bool = True
    divider_width: int = 40
    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from a dictionary.

        Only keys that are RenderConfig fields are used; unknown keys are
        ignored.

        Example:
            >>> config = RenderConfig.from_dict({"heading_ids": False, "theme": "dark"})
            >>> config.heading_ids
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the active render configuration for this thread/context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the render configuration for the current context.

    Only affects the current thread's context.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(render_blank=False)):
        ...     get_render_config().render_blank
        False
        >>> get_render_config().render_blank
        True

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
