import pytest
from fastapi.testclient import TestClient

from api.docs_server import create_app
from verdocs.config import HandlerConfig


@pytest.fixture()
def client(versioned_root):
    return TestClient(create_app(HandlerConfig(docs_dir=str(versioned_root))))


def test_health_ok(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_root_redirects_to_prefix(client):
    r = client.get("/", follow_redirects=False)
    assert r.status_code in (302, 307)
    assert r.headers["location"] == "/docs/"


def test_index_page(client):
    r = client.get("/docs/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert 'id="welcome"' in r.text


def test_versioned_page(client):
    r = client.get("/docs/v2/guide.md")
    assert r.status_code == 200
    assert "Version 2" in r.text


def test_missing_page_is_404_with_placeholder(client):
    r = client.get("/docs/v2/missing.md")
    assert r.status_code == 404
    assert "Page not found" in r.text


def test_bare_prefix_reaches_docs_index(client):
    r = client.get("/docs")
    assert r.status_code == 200
    assert 'id="welcome"' in r.text
    assert "SwaggerUIBundle" not in r.text


def test_no_openapi_routes(client):
    assert client.get("/openapi.json").status_code == 404
    assert client.get("/redoc").status_code == 404


def test_oauth2_redirect_name_is_a_document(client, versioned_root):
    (versioned_root / "_source" / "oauth2-redirect.md").write_text("# Callback\n", encoding="utf-8")
    r = client.get("/docs/oauth2-redirect")
    assert r.status_code == 200
    assert 'id="callback"' in r.text
