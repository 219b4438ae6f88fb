"""Shared fixtures for Artistly tests."""

import pytest

from artistly.data import Artist, BookingRequest, load_catalog_data


@pytest.fixture
def data_ctx():
    return load_catalog_data()


@pytest.fixture
def two_artists():
    return [
        Artist(
            id="a1",
            name="Priya Sharma",
            categories=("Singers",),
            bio="Classical vocalist.",
            price_range="₹25,000 - ₹50,000",
            location="Mumbai, Maharashtra",
        ),
        Artist(
            id="a2",
            name="DJ Arjun",
            categories=("DJs",),
            bio="Bollywood and EDM sets.",
            price_range="₹50,000 - ₹1,00,000",
            location="Delhi, NCR",
        ),
    ]


def make_booking(id: str, status: str, budget: str) -> BookingRequest:
    return BookingRequest(
        id=id,
        artist_id="1",
        artist_name="Priya Sharma",
        event_date="2024-07-15",
        event_type="Wedding",
        location="Mumbai, Maharashtra",
        budget=budget,
        status=status,
        created_at="2024-06-20",
    )


@pytest.fixture
def booking_factory():
    return make_booking
