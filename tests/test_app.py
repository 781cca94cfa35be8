"""Tests for the downsampling HTTP API."""

import pytest
from fastapi.testclient import TestClient

from downsampler.app import app
from downsampler.config import settings


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    return TestClient(app)


def _points(n):
    return [{"x": float(i), "y": float((i * 7) % 11)} for i in range(n)]


def test_health(client):
    """Test health endpoint reports status and default budget."""
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["default_max_points"] == settings.default_max_points


def test_sample_points(client):
    """Test points are reduced to max_points with endpoints kept."""
    points = _points(500)

    response = client.post("/sample", json={"points": points, "max_points": 50})

    assert response.status_code == 200
    body = response.json()
    assert len(body["points"]) == 50
    assert body["points"][0] == points[0]
    assert body["points"][-1] == points[-1]
    assert body["stats"]["input_points"] == 500
    assert body["stats"]["output_points"] == 50
    assert body["stats"]["target_points"] == 50
    assert body["stats"]["passthrough"] is False


def test_sample_points_passthrough(client):
    """Test a series within budget comes back unchanged."""
    points = _points(20)

    response = client.post("/sample", json={"points": points, "max_points": 50})

    body = response.json()
    assert body["points"] == points
    assert body["stats"]["passthrough"] is True


def test_sample_points_default_budget(client):
    """Test the configured default applies when max_points is omitted."""
    points = _points(settings.default_max_points + 100)

    response = client.post("/sample", json={"points": points})

    assert response.status_code == 200
    assert response.json()["stats"]["output_points"] == settings.default_max_points


def test_sample_points_sort(client):
    """Test sort=true orders points by x before sampling."""
    points = _points(100)[::-1]

    response = client.post("/sample", json={"points": points, "max_points": 10, "sort": True})

    xs = [p["x"] for p in response.json()["points"]]
    assert xs == sorted(xs)
    assert xs[0] == 0.0
    assert xs[-1] == 99.0


@pytest.mark.parametrize("max_points", [2, 0, -5, 10_000_000])
def test_sample_points_budget_out_of_bounds(client, max_points):
    """Test budgets outside the configured bounds are rejected."""
    response = client.post("/sample", json={"points": _points(10), "max_points": max_points})

    assert response.status_code == 422


def test_sample_points_invalid_body(client):
    """Test malformed points fail request validation."""
    response = client.post("/sample", json={"points": [{"x": 1.0}]})

    assert response.status_code == 422


def test_sample_interleaved(client):
    """Test flat buffers are reduced pairwise."""
    data = [v for p in _points(300) for v in (p["x"], p["y"])]

    response = client.post("/sample/interleaved", json={"data": data, "max_points": 30})

    assert response.status_code == 200
    body = response.json()
    assert len(body["data"]) == 60
    assert body["data"][:2] == data[:2]
    assert body["data"][-2:] == data[-2:]
    assert body["stats"]["output_points"] == 30


def test_sample_interleaved_odd_length(client):
    """Test an unpaired trailing value is rejected."""
    response = client.post("/sample/interleaved", json={"data": [0.0, 1.0, 2.0]})

    assert response.status_code == 400
