import pytest

from verdocs.cli import main
from verdocs.config import load_config


@pytest.fixture()
def env_root(versioned_root, monkeypatch):
    monkeypatch.setenv("VERDOCS_DOCS_DIR", str(versioned_root))
    monkeypatch.delenv("VERDOCS_DEFAULT_VERSION", raising=False)
    monkeypatch.delenv("VERDOCS_PREFIX_URI", raising=False)
    return versioned_root


def test_load_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("VERDOCS_DOCS_DIR", str(tmp_path))
    monkeypatch.setenv("VERDOCS_DEFAULT_VERSION", "latest")
    monkeypatch.setenv("VERDOCS_PREFIX_URI", " manual ")
    config = load_config()
    assert config.docs_dir == str(tmp_path)
    assert config.default_version_name == "latest"
    assert config.prefix_uri == "manual"


def test_load_config_defaults(monkeypatch):
    for k in ("VERDOCS_DOCS_DIR", "VERDOCS_DEFAULT_VERSION", "VERDOCS_PREFIX_URI"):
        monkeypatch.delenv(k, raising=False)
    config = load_config()
    assert config.default_version_name == "default"
    assert config.docs_dir == "storage/docs"
    assert config.prefix_uri == "docs"


def test_render_to_file(env_root, tmp_path):
    out = tmp_path / "out" / "guide.html"
    assert main(["verdocs", "render", "v2/guide.md", str(out)]) == 0
    assert "Version 2" in out.read_text(encoding="utf-8")


def test_render_missing_page_exits_nonzero(env_root, tmp_path):
    out = tmp_path / "missing.html"
    assert main(["verdocs", "-v", "render", "nowhere.md", str(out)]) == 1
    assert "Page not found" in out.read_text(encoding="utf-8")


def test_usage(capsys):
    assert main(["verdocs"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_unknown_command(capsys):
    assert main(["verdocs", "explode"]) == 2


def test_load_config_dark_theme(monkeypatch):
    monkeypatch.setenv("VERDOCS_DARK_THEME", "yes")
    assert load_config().dark_theme is True
    monkeypatch.setenv("VERDOCS_DARK_THEME", "0")
    assert load_config().dark_theme is False
    monkeypatch.delenv("VERDOCS_DARK_THEME")
    assert load_config().dark_theme is False
