from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .utils import join_path

logger = logging.getLogger(__name__)

INDEX_NAME = "index.html"

VersionLookup = Callable[[str], Optional[Mapping[str, str]]]


@dataclass(frozen=True)
class DocumentPath:
    version: str
    directory: str
    base_name: str

    @property
    def content_path(self) -> str:
        return join_path(self.directory, self.base_name)


def _strip_version(dname: str, version: str) -> str:
    # Only a leading segment equal to the version is removed.
    segments = dname.strip("/").split("/")
    if segments and segments[0] == version:
        segments = segments[1:]
    return "/" + "/".join(segments) if segments else "/"


def resolve_path(name: str, lookup: VersionLookup, default_version: str) -> DocumentPath:
    """Split a request path into version, directory and base file name.

    The first directory segment selects the version when ``lookup`` returns a
    non-empty catalog for it; otherwise the default version applies and the
    whole path is content-relative. A trailing slash is ignored when taking the
    base name, so ``guide/`` names the document ``guide/guide`` while ``v2/``
    is the index of version ``v2``.
    """
    if not name:
        return DocumentPath(default_version, "", INDEX_NAME)

    # trailing slashes do not empty the last segment
    base = posixpath.basename(name.rstrip("/"))
    fname, _ = posixpath.splitext(base)
    dname = posixpath.dirname(name) or "/"

    candidate = dname.strip("/").split("/", 1)[0]
    version = default_version
    directory = dname
    if lookup(candidate):
        version = candidate
        directory = _strip_version(dname, version)

    base_name = INDEX_NAME
    if version != fname and base not in ("", "/"):
        base_name = base

    logger.debug("resolved %r to version=%r dir=%r base=%r", name, version, directory, base_name)
    return DocumentPath(version, directory, base_name)
