"""
FastAPI endpoint tests for the Roman Numeral Validator API.

Uses httpx + FastAPI TestClient, no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from roman_validator.parser import RomanNumeralParser

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_parser() -> None:
    """Initialise the parser once for all API tests (bypasses lifespan)."""
    api._parser = RomanNumeralParser()
    yield  # type: ignore[misc]
    api._parser = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["max_value"] == 9999

    def test_uninitialised_returns_503(self, monkeypatch) -> None:
        monkeypatch.setattr(api, "_parser", None)
        assert client.get("/health").status_code == 503


class TestParseEndpoint:
    def test_valid_numeral(self) -> None:
        resp = client.post("/parse", json={"numeral": "MCMLIX"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is True
        assert data["value"] == 1959
        assert data["error"] is None

    def test_case_and_whitespace(self) -> None:
        data = client.post("/parse", json={"numeral": "  mmxxi "}).json()
        assert data["value"] == 2021
        assert data["normalized"] == "MMXXI"

    def test_invalid_numeral_is_not_http_error(self) -> None:
        resp = client.post("/parse", json={"numeral": "XXL"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is False
        assert data["value"] is None
        assert data["error"]["code"] == "OUT_OF_SEQUENCE"
        assert data["error"]["character"] == "L"
        assert data["error"]["position"] == 2
        assert data["error"]["consumed"] == "XX"

    def test_empty_numeral(self) -> None:
        data = client.post("/parse", json={"numeral": ""}).json()
        assert data["error"]["code"] == "EMPTY_INPUT"

    def test_missing_body_returns_422(self) -> None:
        assert client.post("/parse", json={}).status_code == 422

    def test_overlong_numeral_returns_422(self) -> None:
        resp = client.post("/parse", json={"numeral": "M" * 100})
        assert resp.status_code == 422


class TestBatchEndpoint:
    def test_counts_errors(self) -> None:
        resp = client.post("/parse/batch", json={"numerals": ["XIV", "Z", "IIII"]})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is False
        assert data["error_count"] == 2
        assert [r["value"] for r in data["results"]] == [14, None, None]

    def test_empty_list_returns_422(self) -> None:
        assert client.post("/parse/batch", json={"numerals": []}).status_code == 422


class TestFormatEndpoint:
    def test_format(self) -> None:
        data = client.post("/format", json={"value": 1994}).json()
        assert data == {"value": 1994, "numeral": "MCMXCIV"}

    def test_format_lowercase(self) -> None:
        data = client.post("/format", json={"value": 4, "lowercase": True}).json()
        assert data["numeral"] == "iv"

    def test_out_of_range_returns_422(self) -> None:
        assert client.post("/format", json={"value": 4000}).status_code == 422
        assert client.post("/format", json={"value": 0}).status_code == 422
