from pathlib import Path

import pytest

from verdocs.config import HandlerConfig
from verdocs.handler import Handler


def write(root: Path, rel: str, text: str) -> Path:
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


@pytest.fixture()
def docs_root(tmp_path):
    root = tmp_path / "docs"
    root.mkdir()
    return root


@pytest.fixture()
def config(docs_root):
    return HandlerConfig(docs_dir=str(docs_root))


@pytest.fixture()
def versioned_root(docs_root):
    write(docs_root, "versions.yml", 'v2: "Version 2"\n')
    write(docs_root, "sidebar.yml", "Start:\n  Home: index.html\n")
    write(docs_root, "_source/index.md", "# Welcome\n\nDefault docs.\n")
    write(docs_root, "v2/sidebar.yml", "Guide:\n  Intro: intro.html\n  Guide: guide.html\n")
    write(docs_root, "v2/_source/guide.md", "# Guide\n\nSecond *edition*.\n")
    return docs_root


@pytest.fixture()
def handler(config):
    return Handler(config)
