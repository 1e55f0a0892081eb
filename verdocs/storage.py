"""
Flat-file access for the documents root.

Every read goes to disk; nothing is cached. Reads never raise for missing or
malformed files: the outcome is reported through ``LoadResult`` so callers can
tell an absent file from a corrupt one and still fall back to an empty value.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .utils import normalize_newlines

logger = logging.getLogger(__name__)

OK = "ok"
ABSENT = "absent"
CORRUPT = "corrupt"


@dataclass(frozen=True)
class LoadResult:
    status: str
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == OK

    @property
    def absent(self) -> bool:
        return self.status == ABSENT

    @property
    def corrupt(self) -> bool:
        return self.status == CORRUPT


def is_file(p: Path) -> bool:
    try:
        return p.is_file()
    except OSError:
        return False


def read_text(p: Path) -> LoadResult:
    if not is_file(p):
        logger.debug("no file at %s", p)
        return LoadResult(ABSENT, "")
    try:
        data = p.read_bytes()
    except OSError as e:
        logger.warning("could not read %s: %s", p, e)
        return LoadResult(CORRUPT, "", str(e))
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning("%s is not valid UTF-8, decoding with replacement", p)
        return LoadResult(CORRUPT, normalize_newlines(data.decode("utf-8", errors="replace")), str(e))
    return LoadResult(OK, normalize_newlines(text))


def read_yaml(p: Path) -> LoadResult:
    """Parse a YAML file into a mapping; anything else reads as ``{}``."""
    raw = read_text(p)
    if not raw.ok:
        return LoadResult(raw.status, {}, raw.error)
    try:
        data = yaml.safe_load(raw.value)
    except yaml.YAMLError as e:
        logger.warning("malformed YAML in %s: %s", p, e)
        return LoadResult(CORRUPT, {}, str(e))
    if data is None:
        return LoadResult(OK, {})
    if not isinstance(data, dict):
        logger.warning("%s does not hold a mapping (got %s)", p, type(data).__name__)
        return LoadResult(CORRUPT, {}, f"expected a mapping, got {type(data).__name__}")
    return LoadResult(OK, data)
