"""Integration tests for the HTTP layer with a fake Claude client."""

import pytest
from fastapi.testclient import TestClient
from starlette.datastructures import UploadFile

from conftest import connection_error, make_response, status_error
from doctranslate.config import settings
from doctranslate.dependencies import get_translation_client
from doctranslate.main import app


@pytest.fixture
def api(make_client):
    """TestClient factory whose translation client answers as configured."""

    def _api(response=None, error=None):
        translation_client = make_client(response=response, error=error)
        app.dependency_overrides[get_translation_client] = lambda: translation_client
        return TestClient(app), translation_client

    yield _api
    app.dependency_overrides.clear()


def _upload(client, filename, data, **form):
    return client.post(
        "/api/v1/translate",
        files={"file": (filename, data)},
        data=form,
    )


class TestTranslateEndpoint:
    def test_txt_upload_returns_translation(self, api):
        client, translation_client = api(response=make_response(("text", "Good morning")))

        r = _upload(client, "greeting.txt", "Καλημέρα".encode("utf-8"),
                    source_language="el", target_language="en", style="casual")

        assert r.status_code == 200
        body = r.json()
        assert body["translation"] == "Good morning"
        assert body["filename"] == "greeting.txt"
        assert body["model"] == "claude-test"

        prompt = translation_client.client.messages.calls[0]["messages"][0]["content"]
        assert "from Greek to English" in prompt
        assert prompt.endswith("Text to translate:\nΚαλημέρα")

    def test_form_flags_reach_the_prompt(self, api):
        client, translation_client = api(response=make_response(("text", "ok")))

        _upload(client, "a.txt", b"hello", literal="true", with_examples="true")

        prompt = translation_client.client.messages.calls[0]["messages"][0]["content"]
        assert "word-for-word" in prompt
        assert "Include relevant examples" in prompt
        assert "deeper analysis" not in prompt

    def test_pdf_upload_is_sent_as_document(self, api):
        client, translation_client = api(response=make_response(("text", "ok")))

        r = _upload(client, "paper.pdf", b"%PDF-1.4")

        assert r.status_code == 200
        content = translation_client.client.messages.calls[0]["messages"][0]["content"]
        assert content[0]["source"]["media_type"] == "application/pdf"
        assert content[1]["type"] == "text"

    def test_unsupported_file_is_rejected(self, api):
        client, translation_client = api(response=make_response(("text", "ok")))

        r = _upload(client, "photo.png", b"\x89PNG")

        assert r.status_code == 400
        assert "TXT, PDF or DOCX" in r.json()["detail"]
        assert translation_client.client.messages.calls == []

    def test_oversize_upload_is_rejected_without_full_read(self, api, monkeypatch):
        """Upload bodies are never read past the configured limit."""
        client, translation_client = api(response=make_response(("text", "ok")))
        monkeypatch.setattr(settings, "upload_max_bytes", 10)

        read_sizes = []
        original_read = UploadFile.read

        async def recording_read(self, size=-1):
            read_sizes.append(size)
            return await original_read(self, size)

        monkeypatch.setattr(UploadFile, "read", recording_read)

        r = _upload(client, "big.txt", b"x" * 100)

        assert r.status_code == 400
        assert r.json()["detail"] == "File exceeds 10 bytes limit"
        assert all(0 <= size <= 11 for size in read_sizes)
        assert translation_client.client.messages.calls == []

    def test_api_error_maps_to_bad_gateway(self, api):
        client, _ = api(error=status_error(429))

        r = _upload(client, "a.txt", b"hello")

        assert r.status_code == 502
        assert r.json()["detail"] == "API Error: Too Many Requests"

    def test_network_failure_hides_cause(self, api):
        client, _ = api(error=connection_error())

        r = _upload(client, "a.txt", b"hello")

        assert r.status_code == 502
        assert r.json()["detail"] == "Translation failed. Please try again."

    def test_download_returns_text_attachment(self, api):
        client, _ = api(response=make_response(("text", "Bonjour "), ("text", "le monde")))

        r = _upload(client, "a.txt", b"hello", download="true")

        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/plain")
        disposition = r.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="translation_')
        assert disposition.endswith('.txt"')
        assert r.text == "Bonjour le monde"


class TestOtherRoutes:
    def test_health(self):
        r = TestClient(app).get("/api/v1/health")
        assert r.status_code == 200
        body = r.json()
        assert body["version"] == "0.1.0"
        assert body["status"] in ("healthy", "degraded")
        assert body["api_key_configured"] is (body["status"] == "healthy")

    def test_index_page(self):
        r = TestClient(app).get("/")
        assert r.status_code == 200
        assert "text/html" in r.headers["content-type"]
        assert 'id="translateBtn"' in r.text
