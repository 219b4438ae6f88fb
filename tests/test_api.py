"""Tests for the FastAPI endpoints."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from artistly.settings import get_settings


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def no_delay(monkeypatch):
    monkeypatch.setattr(get_settings(), "submit_delay_seconds", 0.0)


def test_meta_endpoints(client):
    assert client.get("/meta/categories").json()["values"][0] == "Singers"
    assert len(client.get("/meta/price-ranges").json()["values"]) == 5
    assert "Punjabi" in client.get("/meta/languages").json()["values"]
    assert client.get("/meta/locations").json()["values"] == ["Karnataka", "Maharashtra", "NCR", "Rajasthan", "Tamil Nadu"]


def test_home(client):
    body = client.get("/home").json()
    assert len(body["featured"]) == 2


def test_search_artists_by_category(client):
    resp = client.post("/artists/search", json={"category": "DJs"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["count"] == 1
    assert body["artists"][0]["name"] == "DJ Arjun"


def test_search_artists_empty_body_returns_all(client):
    body = client.post("/artists/search", json={}).json()
    assert body["count"] == 6
    assert body["has_active_filters"] is False


def test_dashboard(client):
    body = client.get("/dashboard").json()
    assert body["stats"]["monthly_revenue"] == 120000
    assert body["stats"]["pending_requests"] == 2


def test_quote_request(client):
    resp = client.post("/artists/3/quote")
    assert resp.status_code == 200
    assert resp.json()["persisted"] is False
    assert client.post("/artists/999/quote").status_code == 404


def test_status_update(client):
    resp = client.post("/bookings/1/status", json={"status": "accepted"})
    assert resp.status_code == 200
    assert resp.json()["accepted"] is True
    assert client.get("/dashboard").json()["stats"]["pending_requests"] == 2


def test_status_update_rejects_unknown_status(client):
    assert client.post("/bookings/1/status", json={"status": "cancelled"}).status_code == 422


def test_onboard(client, no_delay):
    payload = {
        "name": "Asha Rao",
        "bio": "Playback singer and live performer with a decade of stage experience across India.",
        "categories": ["Singers"],
        "languages": ["Hindi"],
        "price_range": "₹25,000 - ₹50,000",
        "location": "Hyderabad, Telangana",
        "email": "asha@example.com",
        "phone": "+91 98765 43210",
        "experience": "5-10",
    }
    resp = client.post("/onboard", json=payload)
    assert resp.status_code == 200
    assert resp.json()["status"] == "submitted"


def test_onboard_validation_error(client, no_delay):
    assert client.post("/onboard", json={"name": "A"}).status_code == 422


def test_export(client):
    resp = client.get("/export/bookings")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    lines = resp.text.strip().splitlines()
    assert lines[0].startswith("id,artist_id,artist_name")
    assert len(lines) == 6

    artists = client.get("/export/artists").text
    assert "Singers; Musicians" in artists
