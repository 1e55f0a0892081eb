from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from .config import HandlerConfig
from .renderer import render_markdown
from .storage import read_text
from .templates import DEFAULT_CONTENT
from .utils import join_path, strip_ext

logger = logging.getLogger(__name__)

SOURCE_DIR = "_source"


class ContentLoader:
    def __init__(self, config: HandlerConfig):
        self.config = config

    def source_path(self, version: str, p: str) -> Optional[Path]:
        """Markdown file backing ``p``; None if it would leave the documents root."""
        if version == self.config.default_version_name:
            version = ""
        rel = join_path(version, SOURCE_DIR, strip_ext(p).lstrip("/"))
        if rel == ".." or rel.startswith("../") or rel.startswith("/"):
            logger.warning("refusing content path outside the documents root: %r", p)
            return None
        return self.config.storage_path(rel + ".md")

    def load(self, version: str, p: str) -> Tuple[str, bool]:
        """Render the document for ``p``; the flag is False when the placeholder was used."""
        source = self.source_path(version, p)
        if source is None:
            return render_markdown(DEFAULT_CONTENT), False
        result = read_text(source)
        if result.absent:
            logger.debug("no content at %s, using placeholder", source)
            return render_markdown(DEFAULT_CONTENT), False
        return render_markdown(result.value), True

    def get_content(self, version: str, p: str) -> str:
        html, _ = self.load(version, p)
        return html
