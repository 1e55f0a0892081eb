from __future__ import annotations

import logging
from typing import Dict, Optional

from .config import HandlerConfig
from .storage import LoadResult, read_yaml
from .templates import DEFAULT_VERSION_TITLE

logger = logging.getLogger(__name__)

VERSIONS_FILE = "versions.yml"


class VersionStore:
    """Version catalog backed by ``versions.yml``, re-read on every call."""

    def __init__(self, config: HandlerConfig):
        self.config = config

    def load(self) -> LoadResult:
        result = read_yaml(self.config.storage_path(VERSIONS_FILE))
        catalog = {
            str(k): "" if v is None else str(v)
            for k, v in result.value.items()
            if not isinstance(v, (dict, list))
        }
        return LoadResult(result.status, catalog, result.error)

    def get_version(self, identifier: str) -> Optional[Dict[str, str]]:
        """Return the catalog, ``{}`` if there is none, or None if ``identifier`` is unknown.

        A non-empty catalog always carries a ``"default"`` entry.
        """
        result = self.load()
        if result.absent:
            return {}
        versions = result.value
        if identifier not in versions:
            logger.debug("version %r not in catalog", identifier)
            return None
        versions.setdefault("default", DEFAULT_VERSION_TITLE)
        return versions
