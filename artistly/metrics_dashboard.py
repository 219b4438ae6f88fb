from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List

import pandas as pd

from artistly.charts import revenue_chart, status_chart, to_vega_spec
from artistly.data import (
    BOOKING_STATUSES,
    DEFAULT_AVATAR,
    bookings_frame,
    format_currency,
    format_event_date,
    languages_summary,
)
from artistly.settings import get_settings

STATUS_LABELS = {"pending": "Pending", "accepted": "Accepted", "rejected": "Rejected"}

_NON_DIGITS = re.compile(r"\D")


def parse_amount(amount: object) -> int:
    """Integer value of a formatted amount like "₹40,000"; 0 when it has no digits."""
    if amount is None:
        return 0
    digits = _NON_DIGITS.sub("", str(amount))
    if not digits:
        return 0
    return int(digits)


def aggregate_bookings(records: Iterable[object]) -> Dict[str, int]:
    frame = bookings_frame(records)
    if frame.empty:
        return {"total_count": 0, "pending_count": 0, "accepted_revenue_sum": 0}

    status = frame["status"].astype(str)
    accepted = frame.loc[status.eq("accepted"), "budget"].map(parse_amount)
    return {
        "total_count": int(len(frame)),
        "pending_count": int(status.eq("pending").sum()),
        "accepted_revenue_sum": int(sum(accepted.tolist())),
    }


def status_counts(records: Iterable[object]) -> Dict[str, int]:
    frame = bookings_frame(records)
    counts = frame["status"].value_counts().reindex(list(BOOKING_STATUSES), fill_value=0)
    return {str(k): int(v) for k, v in counts.items()}


def booking_actions(status: str) -> List[str]:
    if status == "pending":
        return ["accept", "reject"]
    return ["view"]


def _booking_rows(frame: pd.DataFrame) -> List[Dict[str, Any]]:
    if frame.empty:
        return []
    rows = frame.copy()
    rows["event_date_display"] = rows["event_date"].apply(format_event_date)
    rows["status_label"] = rows["status"].map(STATUS_LABELS).fillna("Unknown")
    rows["actions"] = rows["status"].apply(booking_actions)
    return rows.to_dict(orient="records")


def _artist_rows(artists: List[Any]) -> List[Dict[str, Any]]:
    return [
        {
            "id": a.id,
            "name": a.name,
            "image": a.image or DEFAULT_AVATAR,
            "categories": list(a.categories),
            "location": a.location,
            "price_range": a.price_range,
            "languages_display": languages_summary(a.languages, 2),
            "status_label": "Featured" if a.featured else "Active",
        }
        for a in artists
    ]


def compute_dashboard(ctx: Dict[str, Any]) -> Dict[str, Any]:
    artists = list(ctx.get("artists", []) or [])
    bookings = list(ctx.get("bookings", []) or [])
    frame = bookings_frame(bookings)

    totals = aggregate_bookings(bookings)
    stats = {
        "total_artists": len(artists),
        "total_bookings": totals["total_count"],
        "pending_requests": totals["pending_count"],
        "monthly_revenue": totals["accepted_revenue_sum"],
        "monthly_revenue_display": format_currency(totals["accepted_revenue_sum"], get_settings().currency_symbol),
    }

    counts = status_counts(bookings)
    charts: Dict[str, Any] = {}
    if not frame.empty:
        counts_df = pd.DataFrame({"status": list(counts), "count": list(counts.values())})
        charts["status_breakdown"] = to_vega_spec(status_chart(counts_df))

        accepted = frame[frame["status"].eq("accepted")].copy()
        if not accepted.empty:
            accepted["amount"] = accepted["budget"].map(parse_amount)
            by_type = (
                accepted.groupby("event_type")["amount"]
                .sum()
                .reset_index()
                .sort_values("amount", ascending=False)
            )
            charts["accepted_revenue"] = to_vega_spec(revenue_chart(by_type))

    return {
        "stats": stats,
        "status_counts": counts,
        "bookings": _booking_rows(frame),
        "artists": _artist_rows(artists),
        "charts": charts,
    }
