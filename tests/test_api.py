"""
FastAPI endpoint tests for the Numeral Converter API.

Uses httpx + FastAPI TestClient, no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from numeral_converter.config import Settings
from numeral_converter.converter import NumeralConverter

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_converter() -> None:
    """Initialise the converter once for all API tests (bypasses lifespan)."""
    api._converter = NumeralConverter()
    api._settings = Settings()
    yield  # type: ignore[misc]
    api._converter = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["default_scale"] == "long"
        assert data["vocabulary_size"] > 40

    def test_uninitialised_returns_503(self, monkeypatch) -> None:
        monkeypatch.setattr(api, "_converter", None)
        assert client.get("/health").status_code == 503


class TestConvertEndpoint:
    def test_converts_valid_phrase(self) -> None:
        resp = client.post("/convert", json={"phrase": "cento e vinte e dois"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["result"] == "122"
        assert data["value"] == 122
        assert data["is_valid"] is True
        assert data["error"] is None
        assert data["normalized"] == "Cento E Vinte E Dois"

    def test_invalid_phrase_is_not_an_http_error(self) -> None:
        resp = client.post("/convert", json={"phrase": "cento e e dois"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["result"] == "InvalidNumber"
        assert data["value"] is None
        assert data["is_valid"] is False
        assert data["error"]["code"] == "DOUBLED_SEPARATOR"
        assert data["error"]["position"] == 2

    def test_short_scale_flag(self) -> None:
        data = client.post("/convert", json={"phrase": "um bilião", "short_scale": True}).json()
        assert data["value"] == 1_000_000_000
        assert data["scale"] == "short"

    def test_defaults_to_long_scale(self) -> None:
        data = client.post("/convert", json={"phrase": "um bilião"}).json()
        assert data["value"] == 1_000_000_000_000
        assert data["scale"] == "long"

    def test_empty_phrase_is_invalid_not_422(self) -> None:
        data = client.post("/convert", json={"phrase": ""}).json()
        assert data["error"]["code"] == "EMPTY_PHRASE"


class TestRequestValidation:
    def test_missing_phrase_returns_422(self) -> None:
        resp = client.post("/convert", json={})
        assert resp.status_code == 422

    def test_missing_body_returns_422(self) -> None:
        resp = client.post("/convert")
        assert resp.status_code == 422

    def test_too_long_phrase_returns_422(self) -> None:
        resp = client.post("/convert", json={"phrase": "um " * 300})
        assert resp.status_code == 422


class TestBatchEndpoint:
    def test_mixed_batch(self) -> None:
        resp = client.post(
            "/convert/batch", json={"phrases": ["mil", "e mil", "dois milhões"]}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert [r["result"] for r in data["results"]] == ["1000", "InvalidNumber", "2000000"]
        assert data["valid_count"] == 2
        assert data["invalid_count"] == 1

    def test_batch_short_scale(self) -> None:
        data = client.post(
            "/convert/batch",
            json={"phrases": ["dois mil milhões"], "short_scale": True},
        ).json()
        assert data["results"][0]["error"]["code"] == "THOUSAND_SCALE_COMBINATION"

    def test_empty_batch_returns_422(self) -> None:
        resp = client.post("/convert/batch", json={"phrases": []})
        assert resp.status_code == 422
