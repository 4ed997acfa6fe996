"""Tests for the FastAPI REST API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from formatkit.api.app import create_app


@pytest.fixture
def client() -> TestClient:
    app = create_app()
    return TestClient(app)


class TestHealthEndpoint:
    def test_health(self, client: TestClient):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"


class TestFormatEndpoint:
    def test_format_json(self, client: TestClient, person_json: str):
        resp = client.post(
            "/api/v1/format",
            json={"source": person_json, "language": "json", "indent": 2},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is True
        assert data["error_message"] is None
        assert data["formatted_text"] == '{\n  "name": "John",\n  "age": 30\n}'

    def test_tab_indent(self, client: TestClient):
        resp = client.post(
            "/api/v1/format",
            json={"source": '{"a":1}', "language": "json", "indent": "tab"},
        )
        assert resp.json()["formatted_text"] == '{\n    "a": 1\n}'

    def test_invalid_document_is_not_http_error(self, client: TestClient):
        resp = client.post(
            "/api/v1/format",
            json={"source": "<a><b></a></b>", "language": "xml"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is False
        assert data["formatted_text"] == "<a><b></a></b>"
        assert data["error_message"].startswith("Invalid XML syntax")

    def test_bad_indent(self, client: TestClient):
        resp = client.post(
            "/api/v1/format",
            json={"source": "{}", "language": "json", "indent": 0},
        )
        assert resp.status_code == 400

    def test_unknown_language(self, client: TestClient):
        resp = client.post(
            "/api/v1/format",
            json={"source": "x", "language": "yaml"},
        )
        assert resp.status_code == 422


class TestValidateEndpoint:
    def test_valid(self, client: TestClient):
        resp = client.post("/api/v1/validate", json={"source": "<a/>", "language": "xml"})
        assert resp.status_code == 200
        assert resp.json() == {"is_valid": True, "error_message": None}

    def test_invalid(self, client: TestClient):
        resp = client.post("/api/v1/validate", json={"source": "{a:1}", "language": "json"})
        data = resp.json()
        assert data["is_valid"] is False
        assert data["error_message"]

    def test_html_always_valid(self, client: TestClient):
        resp = client.post(
            "/api/v1/validate",
            json={"source": "<div><span></div></span>", "language": "html"},
        )
        assert resp.json()["is_valid"] is True


class TestMinifyEndpoint:
    def test_minify_json(self, client: TestClient):
        resp = client.post(
            "/api/v1/minify",
            json={"source": '{\n  "a": [1, 2]\n}', "language": "json"},
        )
        assert resp.status_code == 200
        assert resp.json() == {"minified": '{"a":[1,2]}'}


class TestCatalogEndpoints:
    def test_languages(self, client: TestClient):
        resp = client.get("/api/v1/languages")
        assert resp.status_code == 200
        rows = {row["language"]: row["strategy"] for row in resp.json()}
        assert rows == {
            "json": "parser",
            "typescript": "heuristic",
            "xml": "parser",
            "css": "heuristic",
            "html": "heuristic",
        }

    def test_sample(self, client: TestClient):
        resp = client.get("/api/v1/samples/xml")
        assert resp.status_code == 200
        data = resp.json()
        assert data["language"] == "xml"
        assert data["source"].startswith("<?xml")

    def test_sample_unknown_language(self, client: TestClient):
        assert client.get("/api/v1/samples/cobol").status_code == 422
