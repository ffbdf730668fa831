"""Tests for API endpoints."""

from __future__ import annotations

import base64

from fastapi.testclient import TestClient

from geopattern.main import app
from tests.conftest import GITHUB_HASH


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["generators_registered"] == 16


def test_generators_in_selection_order():
    response = client.get("/api/generators")
    assert response.status_code == 200
    names = [g["name"] for g in response.json()["generators"]]
    assert names[0] == "octagons"
    assert names[9] == "squares"
    assert len(names) == 16


def test_generate():
    response = client.post("/api/generate", json={"input": "GitHub"})
    assert response.status_code == 200
    data = response.json()
    assert data["color"] == "#455e8a"
    assert data["generator"] == "squares"
    assert data["hash"] == GITHUB_HASH
    assert data["svg"].startswith('<svg xmlns="http://www.w3.org/2000/svg"')
    assert base64.b64decode(data["data_uri"].split(",", 1)[1]).decode() == data["svg"]


def test_generate_with_options():
    response = client.post(
        "/api/generate",
        json={"input": "GitHub", "generator": "plaid", "color": "#ff7f00"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["generator"] == "plaid"
    assert data["color"] == "#ff7f00"


def test_generate_explicit_hash():
    response = client.post("/api/generate", json={"hash": GITHUB_HASH})
    assert response.status_code == 200
    assert response.json()["color"] == "#455e8a"


def test_generate_unknown_generator():
    response = client.post("/api/generate", json={"input": "GitHub", "generator": "stars"})
    assert response.status_code == 422
    assert "stars" in response.json()["detail"]


def test_generate_invalid_hash():
    response = client.post("/api/generate", json={"input": "GitHub", "hash": "nope"})
    assert response.status_code == 422


def test_generate_invalid_color():
    response = client.post("/api/generate", json={"input": "GitHub", "base_color": "#12"})
    assert response.status_code == 422


def test_pattern_svg():
    response = client.get("/api/pattern.svg", params={"input": "GitHub", "generator": "sineWaves"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.text[200:250] == ' stroke-width="10px" d="M0 48 C 35 0, 65 0, 100 48'
