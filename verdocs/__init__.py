"""
verdocs package.

Renders versioned Markdown documentation into HTML pages.
"""

__version__ = "0.1.0"

__all__ = [
    "Handler",
    "HandlerConfig",
    "RenderedPage",
    "TemplateError",
    "VerdocsError",
    "handle",
    "load_config",
    "render_markdown",
    "resolve_path",
]

from .config import HandlerConfig, load_config  # noqa: E402
from .handler import Handler, RenderedPage, TemplateError, VerdocsError, handle  # noqa: E402
from .paths import resolve_path  # noqa: E402
from .renderer import render_markdown  # noqa: E402
