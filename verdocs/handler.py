"""
Request handling: resolve a path, gather version, sidebar and content, and
render the page.

Trust boundary: sidebar YAML and rendered Markdown come from documentation
authors and are inserted into the page without escaping. Do not point the
documents root at untrusted input.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlsplit

from jinja2 import Environment, TemplateSyntaxError
from markupsafe import Markup

from .config import HandlerConfig
from .content import ContentLoader
from .paths import DocumentPath, resolve_path
from .sidebar import SidebarStore
from .templates import PAGE_TEMPLATE
from .theme import build_css
from .utils import join_path
from .versions import VersionStore

logger = logging.getLogger(__name__)

ACCENT = "#0066cc"


class VerdocsError(Exception):
    pass


class TemplateError(VerdocsError):
    pass


@dataclass(frozen=True)
class NavItem:
    label: str
    href: str
    active: bool


@dataclass(frozen=True)
class RenderedPage:
    body: bytes
    document: DocumentPath
    found: bool


def _url_prefix(*parts: str) -> str:
    return join_path("/", *parts).rstrip("/") + "/"


def _href(base_path: str, target: str) -> str:
    # absolute and protocol-relative URLs are left as written
    if urlsplit(target).scheme or target.startswith("//"):
        return target
    return base_path + target.lstrip("/")


def _nav(tree: Dict[str, Dict[str, str]], base_path: str, current: str) -> List[Tuple[str, List[NavItem]]]:
    sections = []
    for category, entries in tree.items():
        items = []
        for label, target in entries.items():
            items.append(NavItem(label, _href(base_path, target), target.lstrip("/") == current))
        sections.append((category, items))
    return sections


class Handler:
    def __init__(self, config: Optional[HandlerConfig] = None):
        self.config = config or HandlerConfig()
        self.versions = VersionStore(self.config)
        self.sidebars = SidebarStore(self.config)
        self.contents = ContentLoader(self.config)
        self.css = build_css(dark=self.config.dark_theme, accent=ACCENT)
        env = Environment(autoescape=True)
        try:
            self.template = env.from_string(PAGE_TEMPLATE)
        except TemplateSyntaxError as e:
            raise TemplateError(f"page template does not compile: {e}") from e

    # convenience accessors mirroring the stores
    def get_version(self, version: str) -> Optional[Dict[str, str]]:
        return self.versions.get_version(version)

    def get_sidebar(self, version: str) -> str:
        return self.sidebars.get_sidebar(version)

    def parse_sidebar(self, version: str) -> Dict[str, Dict[str, str]]:
        return self.sidebars.parse_sidebar(version)

    def get_content(self, version: str, p: str) -> str:
        return self.contents.get_content(version, p)

    def resolve(self, name: str) -> DocumentPath:
        return resolve_path(name, self.versions.get_version, self.config.default_version_name)

    def render(self, name: str) -> RenderedPage:
        default = self.config.default_version_name
        doc = self.resolve(name)
        version = doc.version

        versions = self.versions.get_version(version) or {}
        sidebar = self.sidebars.get_sidebar(version)
        sidebar_tree = self.sidebars.parse_sidebar(version)
        content_file = doc.content_path
        content, found = self.contents.load(version, content_file)

        current_version_title = versions.get(version or default, "")
        if version == default:
            version = ""

        base_path = _url_prefix(self.config.prefix_uri, version)
        content_file_name = content_file.lstrip("/")
        page = self.template.render(
            css=Markup(self.css),
            sidebar=Markup(sidebar),
            content=Markup(content),
            nav=_nav(sidebar_tree, base_path, content_file_name),
            versions=versions,
            current_version=version,
            current_version_title=current_version_title,
            prefix_uri=_url_prefix(self.config.prefix_uri),
            basePath=base_path,
            contentFileName=content_file_name,
            default_version_name=default,
        )
        logger.info("rendered %r (version=%r, found=%s)", name, doc.version, found)
        return RenderedPage(page.encode("utf-8"), doc, found)

    def handle(self, name: str) -> bytes:
        return self.render(name).body


def handle(name: str, config: Optional[HandlerConfig] = None) -> bytes:
    return Handler(config).handle(name)
