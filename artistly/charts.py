from __future__ import annotations

from typing import Any, Dict

import altair as alt
import pandas as pd

alt.data_transformers.disable_max_rows()

STATUS_COLORS = {"pending": "#ca8a04", "accepted": "#16a34a", "rejected": "#dc2626"}


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def status_chart(status_counts: pd.DataFrame) -> alt.Chart:
    """Bar chart of booking requests per status; expects `status` and `count` columns."""
    return (
        alt.Chart(status_counts)
        .mark_bar()
        .encode(
            x=alt.X("status:N", title="Status", sort=list(STATUS_COLORS), axis=alt.Axis(grid=False)),
            y=alt.Y("count:Q", title="Requests", axis=alt.Axis(format="d", gridDash=[4, 4], domain=False, ticks=False)),
            color=alt.Color(
                "status:N",
                scale=alt.Scale(domain=list(STATUS_COLORS), range=list(STATUS_COLORS.values())),
                legend=None,
            ),
            tooltip=[alt.Tooltip("status", title="Status"), alt.Tooltip("count:Q", title="Requests")],
        )
        .properties(height=240)
    )


def revenue_chart(revenue: pd.DataFrame) -> alt.Chart:
    """Accepted revenue per event type; expects `event_type` and `amount` columns."""
    hover = alt.selection_point(fields=["event_type"], on="mouseover", empty="all")
    return (
        alt.Chart(revenue)
        .mark_bar()
        .encode(
            x=alt.X("event_type:N", title="Event Type", axis=alt.Axis(grid=False)),
            y=alt.Y("amount:Q", title="Accepted Revenue", axis=alt.Axis(format=",.0f", gridDash=[4, 4], domain=False, ticks=False)),
            color="event_type:N",
            opacity=alt.condition(hover, alt.value(1), alt.value(0.6)),
            tooltip=[alt.Tooltip("event_type", title="Event Type"), alt.Tooltip("amount:Q", title="Revenue", format=",.0f")],
        )
        .add_params(hover)
        .properties(height=240)
    )
