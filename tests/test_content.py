from verdocs.content import ContentLoader

from conftest import write


def test_default_version_content_lives_at_root(config, docs_root):
    write(docs_root, "_source/index.md", "# Welcome\n")
    loader = ContentLoader(config)
    assert loader.source_path("default", "index.html") == docs_root / "_source" / "index.md"
    html, found = loader.load("default", "index.html")
    assert found
    assert '<h1 id="welcome">Welcome</h1>' in html


def test_versioned_content_and_extension_swap(config, docs_root):
    write(docs_root, "v2/_source/guide.md", "# Guide\n")
    loader = ContentLoader(config)
    assert loader.source_path("v2", "/guide.md") == docs_root / "v2" / "_source" / "guide.md"
    assert 'id="guide"' in loader.get_content("v2", "/guide.md")


def test_nested_content_path(config, docs_root):
    write(docs_root, "_source/api/auth.md", "# Auth\n")
    html, found = ContentLoader(config).load("default", "api/auth.html")
    assert found
    assert "Auth" in html


def test_missing_content_renders_placeholder(config):
    html, found = ContentLoader(config).load("default", "nowhere.html")
    assert not found
    assert "Page not found" in html


def test_content_outside_docs_root_is_refused(config, docs_root, tmp_path):
    write(tmp_path, "secret.md", "# Secret\n")
    loader = ContentLoader(config)
    assert loader.source_path("default", "../../secret.md") is None
    html, found = loader.load("default", "../../secret.md")
    assert not found
    assert "Secret" not in html


def test_undecodable_content_is_rendered_not_fatal(config, docs_root):
    p = docs_root / "_source" / "broken.md"
    p.parent.mkdir(parents=True)
    p.write_bytes(b"# Broken \xff\xfe\n")
    html, found = ContentLoader(config).load("default", "broken.html")
    assert found
    assert "Broken" in html
