from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from .config import HandlerConfig
from .storage import LoadResult, read_text, read_yaml

logger = logging.getLogger(__name__)

SIDEBAR_FILE = "sidebar.yml"


class SidebarStore:
    def __init__(self, config: HandlerConfig):
        self.config = config

    def sidebar_path(self, version: str) -> Path:
        name = SIDEBAR_FILE
        if version != self.config.default_version_name:
            name = f"{version}/{name}"
        return self.config.storage_path(name)

    def get_sidebar(self, version: str) -> str:
        """Raw sidebar YAML for client-side rendering, "" when absent."""
        return read_text(self.sidebar_path(version)).value

    def load(self, version: str) -> LoadResult:
        result = read_yaml(self.sidebar_path(version))
        tree: Dict[str, Dict[str, str]] = {}
        for category, entries in result.value.items():
            if not isinstance(entries, dict):
                logger.debug("skipping sidebar category %r: not a mapping", category)
                continue
            tree[str(category)] = {
                str(name): "" if target is None else str(target)
                for name, target in entries.items()
            }
        return LoadResult(result.status, tree, result.error)

    def parse_sidebar(self, version: str) -> Dict[str, Dict[str, str]]:
        return self.load(version).value
