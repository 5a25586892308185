from datetime import timedelta

from fastapi.testclient import TestClient

from mdow.domains.documents import services
from mdow.domains.documents.entities import utcnow
from mdow.domains.rendering import generate_qr_svg
from mdow.main import create_app


def _share(client, content):
    response = client.post("/share", data={"content": content})
    assert response.status_code == 200
    location = response.headers["HX-Redirect"]
    assert location.startswith("/view/")
    return location


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_editor_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "mdow 🌾" in response.text
    assert 'id="markdown-input"' in response.text
    assert "Enter your markdown..." in response.text


def test_editor_page_prefilled(client):
    response = client.get("/", params={"content": "hello <world>"})
    assert response.status_code == 200
    assert "hello &lt;world&gt;</textarea>" in response.text


def test_preview_renders_sanitized_markdown(client):
    response = client.post("/preview", data={"content": "# Hi\n\n<script>alert(1)</script>~~gone~~"})
    assert response.status_code == 200
    assert 'id="markdown-preview"' in response.text
    assert "<h1>Hi</h1>" in response.text
    assert "<s>gone</s>" in response.text
    assert "<script>alert(1)</script>" not in response.text
    assert 'type="hidden" name="content"' in response.text


def test_preview_without_content(client):
    response = client.post("/preview")
    assert response.status_code == 200
    assert 'id="markdown-preview"' in response.text


def test_edit_returns_textarea(client):
    response = client.post("/edit", data={"content": "# draft"})
    assert response.status_code == 200
    assert 'id="markdown-input"' in response.text
    assert "# draft</textarea>" in response.text


def test_share_and_view(client):
    location = _share(client, "# Report\n\nbody text")
    assert len(location.rsplit("/", 1)[1]) == 7

    response = client.get(location)
    assert response.status_code == 200
    assert "<title>Report</title>" in response.text
    assert "<h1>Report</h1>" in response.text
    assert f"created on {utcnow():%Y-%m-%d}" in response.text
    assert "/?content=%23%20Report" in response.text
    assert generate_qr_svg(f"https://mdow.test{location}") in response.text


def test_view_without_heading_uses_default_title(client):
    response = client.get(_share(client, "plain"))
    assert "<title>mdow</title>" in response.text


def test_view_unknown_document(client):
    response = client.get("/view/missing")
    assert response.status_code == 404
    assert "Document not found or expired" in response.text


def test_view_expired_document(client, monkeypatch):
    location = _share(client, "# Soon gone")

    monkeypatch.setattr(services, "utcnow", lambda: utcnow() + timedelta(days=31))
    response = client.get(location)
    assert response.status_code == 404


def test_unknown_path(client):
    response = client.get("/no/such/page")
    assert response.status_code == 404
    assert "404 - Page Not Found" in response.text


def test_method_not_allowed_keeps_json(client):
    response = client.get("/share")
    assert response.status_code == 405
    assert response.json()["detail"] == "Method Not Allowed"


def test_debug_lists_recent_documents(client):
    location = _share(client, "debug me")
    doc_id = location.rsplit("/", 1)[1]

    response = client.get("/debug")
    assert response.status_code == 200
    assert f"ID: {doc_id}" in response.text
    assert "Content: debug me" in response.text


def test_debug_disabled_by_default(settings):
    settings = settings.model_copy(update={"debug_routes": False})
    with TestClient(create_app(settings)) as client:
        assert client.get("/debug").status_code == 404
