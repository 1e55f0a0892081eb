from __future__ import annotations

import html
import logging
import re
import xml.etree.ElementTree as etree

import markdown as _markdown
from markdown.extensions import Extension
from markdown.extensions.toc import slugify_unicode
from markdown.inlinepatterns import InlineProcessor
from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)


class _BackslashBreakProcessor(InlineProcessor):
    def handleMatch(self, m, data):
        return etree.Element("br"), m.start(0), m.end(0)


class BackslashBreakExtension(Extension):
    """A backslash at the end of a line forces a hard line break."""

    def extendMarkdown(self, md):
        # Above "escape" (180) so the trailing backslash is not eaten first.
        md.inlinePatterns.register(_BackslashBreakProcessor(r"\\\n", md), "backslash_break", 185)


MARKDOWN_EXTENSIONS = [
    "tables",
    "fenced_code",
    "def_list",
    "attr_list",
    "smarty",
    "toc",
    "codehilite",
    "pymdownx.betterem",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.smartsymbols",
    BackslashBreakExtension(),
]

EXTENSION_CONFIGS = {
    'smarty': {
        'smart_dashes': True,
        'smart_quotes': True,
        'smart_ellipses': True,
    },
    'codehilite': {
        'guess_lang': True,
        'noclasses': False,
    },
    # ~~text~~ only; a single ~ is left alone
    'pymdownx.tilde': {
        'subscript': False,
    },
    # keep non-ASCII letters in heading ids
    'toc': {
        'slugify': slugify_unicode,
    },
    'pymdownx.betterem': {
        'smart_enable': 'all',
    },
    'pymdownx.smartsymbols': {
        'fractions': True,
    },
}


def render_markdown(text: str) -> str:
    """Render Markdown to an XHTML fragment using the fixed docs dialect."""
    try:
        body = _markdown.markdown(
            text,
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs=EXTENSION_CONFIGS,
            output_format="xhtml",
        )
    except Exception:
        logger.exception("markdown rendering failed, showing source as preformatted text")
        body = f"<pre>{html.escape(text, quote=False)}</pre>"
    # Simple task list post-processing: turn [ ] / [x] at list starts into checkboxes
    body = re.sub(r"<li>\s*\[ \]\s+", "<li><input type='checkbox' disabled='disabled' /> ", body)
    body = re.sub(r"<li>\s*\[x\]\s+", "<li><input type='checkbox' checked='checked' disabled='disabled' /> ", body, flags=re.IGNORECASE)
    return body


def pygments_css(dark: bool) -> str:
    style = 'monokai' if dark else 'default'
    try:
        return HtmlFormatter(style=style).get_style_defs('.codehilite')
    except ClassNotFound:
        return HtmlFormatter().get_style_defs('.codehilite')
