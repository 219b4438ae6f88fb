"""Tests for the onboarding application model and submission."""

import asyncio
import time

import pytest
from pydantic import ValidationError

from artistly.onboarding import ArtistApplication, submit_application
from artistly.settings import get_settings


def valid_payload(**overrides):
    payload = {
        "name": "Asha Rao",
        "bio": "Playback singer and live performer with a decade of stage experience across India.",
        "categories": ["Singers"],
        "languages": ["Hindi", "English"],
        "price_range": "₹25,000 - ₹50,000",
        "location": "Hyderabad, Telangana",
        "email": "asha@example.com",
        "phone": "+91 98765 43210",
        "experience": "5-10",
        "portfolio": "",
    }
    payload.update(overrides)
    return payload


def _messages(exc: ValidationError):
    return {str(e["loc"][0]): e["msg"] for e in exc.errors()}


def test_valid_application():
    app = ArtistApplication(**valid_payload(portfolio="https://youtube.com/@asha"))
    assert app.name == "Asha Rao"


def test_empty_application_reports_every_required_field():
    with pytest.raises(ValidationError) as info:
        ArtistApplication()
    fields = set(_messages(info.value))
    assert {"name", "bio", "categories", "languages", "price_range", "location", "email", "phone", "experience"} <= fields
    assert "portfolio" not in fields


@pytest.mark.parametrize(
    "field,value,message",
    [
        ("name", "A", "Name must be at least 2 characters"),
        ("bio", "too short", "Bio must be at least 50 characters"),
        ("bio", "x" * 501, "Bio must be less than 500 characters"),
        ("email", "not-an-email", "Please enter a valid email"),
        ("phone", "12345", "Please enter a valid phone number"),
        ("portfolio", "ftp://files", "Please enter a valid portfolio URL"),
        ("portfolio", "youtube.com/@asha", "Please enter a valid portfolio URL"),
        ("portfolio", "https://", "Please enter a valid portfolio URL"),
    ],
)
def test_field_messages(field, value, message):
    with pytest.raises(ValidationError) as info:
        ArtistApplication(**valid_payload(**{field: value}))
    assert message in _messages(info.value)[field]


def test_submit_waits_fixed_delay_and_returns_receipt():
    app = ArtistApplication(**valid_payload())
    started = time.monotonic()
    receipt = asyncio.run(submit_application(app, delay_seconds=0.05))
    assert time.monotonic() - started >= 0.04
    assert receipt.status == "submitted"
    assert receipt.title == "Application Submitted!"
    assert receipt.name == "Asha Rao"
    assert len(receipt.next_steps) == 3


def test_submit_uses_configured_delay(monkeypatch):
    monkeypatch.setattr(get_settings(), "submit_delay_seconds", 0.0)
    receipt = asyncio.run(submit_application(ArtistApplication(**valid_payload())))
    assert receipt.status == "submitted"


@pytest.mark.parametrize("url", ["http://localhost:8000/reel", "https://www.instagram.com/asha.live/"])
def test_portfolio_accepts_http_urls(url):
    assert ArtistApplication(**valid_payload(portfolio=url)).portfolio == url
