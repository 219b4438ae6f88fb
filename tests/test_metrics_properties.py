"""
Property-based tests for booking aggregation and the dashboard payload.
"""

from dataclasses import replace

from hypothesis import given, settings, strategies as st

from artistly.data import BOOKING_STATUSES, BookingRequest
from artistly.metrics_dashboard import (
    aggregate_bookings,
    booking_actions,
    compute_dashboard,
    parse_amount,
    status_counts,
)
from artistly.settings import get_settings

amounts = st.integers(min_value=0, max_value=10_000_000)

budgets = st.one_of(
    st.builds(lambda v: f"₹{v:,}", amounts),
    st.builds(lambda v: f"${v:,}", amounts),
    st.just("TBD"),
    st.just(""),
)

bookings = st.builds(
    BookingRequest,
    id=st.uuids().map(str),
    artist_id=st.just("1"),
    artist_name=st.just("Priya Sharma"),
    event_date=st.just("2024-07-15"),
    event_type=st.sampled_from(["Wedding", "Corporate Event", "Anniversary"]),
    location=st.just("Mumbai, Maharashtra"),
    budget=budgets,
    status=st.sampled_from(BOOKING_STATUSES),
    created_at=st.just("2024-06-20"),
)


@given(records=st.lists(bookings, max_size=30))
@settings(max_examples=100)
def test_total_count_matches_length(records):
    assert aggregate_bookings(records)["total_count"] == len(records)


@given(records=st.lists(bookings, max_size=30))
@settings(max_examples=100)
def test_accepted_sum_matches_parsed_amounts(records):
    expected = sum(parse_amount(r.budget) for r in records if r.status == "accepted")
    result = aggregate_bookings(records)
    assert result["accepted_revenue_sum"] == expected
    assert result["pending_count"] == sum(1 for r in records if r.status == "pending")


@given(records=st.lists(bookings, min_size=1, max_size=30), new_budget=budgets, data=st.data())
@settings(max_examples=100)
def test_non_accepted_amounts_do_not_affect_sum(records, new_budget, data):
    idx = data.draw(st.integers(min_value=0, max_value=len(records) - 1))
    target = records[idx]
    if target.status == "accepted":
        target = replace(target, status=data.draw(st.sampled_from(["pending", "rejected"])))
        records = records[:idx] + [target] + records[idx + 1 :]

    before = aggregate_bookings(records)["accepted_revenue_sum"]
    changed = records[:idx] + [replace(target, budget=new_budget)] + records[idx + 1 :]
    assert aggregate_bookings(changed)["accepted_revenue_sum"] == before


def test_empty_input_gives_zeros():
    assert aggregate_bookings([]) == {"total_count": 0, "pending_count": 0, "accepted_revenue_sum": 0}


def test_revenue_scenario(booking_factory):
    records = [
        booking_factory("1", "accepted", "₹40,000"),
        booking_factory("2", "accepted", "₹75,000"),
        booking_factory("3", "pending", "₹35,000"),
    ]
    assert aggregate_bookings(records) == {"total_count": 3, "pending_count": 1, "accepted_revenue_sum": 115000}


def test_parse_amount():
    assert parse_amount("₹1,00,000") == 100000
    assert parse_amount("₹40,000") == 40000
    assert parse_amount("TBD") == 0
    assert parse_amount("") == 0
    assert parse_amount(None) == 0


def test_aggregate_accepts_plain_dicts():
    records = [{"status": "accepted", "budget": "₹10,000"}, {"status": "rejected", "budget": "₹5,000"}]
    assert aggregate_bookings(records) == {"total_count": 2, "pending_count": 0, "accepted_revenue_sum": 10000}


def test_status_counts_include_every_status(booking_factory):
    counts = status_counts([booking_factory("1", "pending", "₹1")])
    assert counts == {"pending": 1, "accepted": 0, "rejected": 0}


def test_booking_actions():
    assert booking_actions("pending") == ["accept", "reject"]
    assert booking_actions("accepted") == ["view"]
    assert booking_actions("rejected") == ["view"]


def test_dashboard_payload_from_mock_data(data_ctx):
    payload = compute_dashboard(data_ctx)
    stats = payload["stats"]
    assert stats["total_artists"] == 6
    assert stats["total_bookings"] == 5
    assert stats["pending_requests"] == 2
    assert stats["monthly_revenue"] == 120000
    assert stats["monthly_revenue_display"] == "₹1,20,000"
    assert payload["status_counts"] == {"pending": 2, "accepted": 2, "rejected": 1}
    assert set(payload["charts"]) == {"status_breakdown", "accepted_revenue"}

    first = payload["bookings"][0]
    assert first["status_label"] == "Pending"
    assert first["actions"] == ["accept", "reject"]

    priya = payload["artists"][0]
    assert priya["status_label"] == "Featured"
    assert priya["languages_display"] == "Hindi, English +1"


def test_dashboard_payload_empty():
    payload = compute_dashboard({"artists": [], "bookings": []})
    assert payload["stats"]["total_bookings"] == 0
    assert payload["bookings"] == []
    assert payload["charts"] == {}


def test_dashboard_revenue_uses_configured_currency_symbol(data_ctx, monkeypatch):
    monkeypatch.setattr(get_settings(), "currency_symbol", "Rs.")
    assert compute_dashboard(data_ctx)["stats"]["monthly_revenue_display"] == "Rs.1,20,000"
