import asyncio
import logging
from contextlib import contextmanager
from typing import Dict, List, Optional

import pandas as pd
import streamlit as st
from pydantic import ValidationError

from artistly.actions import ActionHooks
from artistly.data import CATEGORIES, EXPERIENCE_LEVELS, LANGUAGES, PRICE_RANGES, export_frame, load_catalog_data
from artistly.filters import ALL_CATEGORIES, ALL_LOCATIONS, ANY_PRICE, normalize_criteria
from artistly.metrics_catalog import compute_catalog
from artistly.metrics_dashboard import compute_dashboard
from artistly.metrics_home import compute_home
from artistly.onboarding import ArtistApplication, submit_application
from artistly.settings import configure_logging

configure_logging()
logger = logging.getLogger("artistly.app")

FILTER_DEFAULTS = {
    "search_text": "",
    "category": ALL_CATEGORIES,
    "price_range": ANY_PRICE,
    "location": ALL_LOCATIONS,
}


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .app-top-bar {padding: 6px 0 4px;border-bottom: 1px solid #e5e7eb;margin-bottom: 10px;}
        .app-top-bar .breadcrumb {color: #6b7280;font-size: 0.9rem;margin-bottom: 2px;}
        .app-top-bar .page-title {font-size: 1.4rem;font-weight: 700;color: #111827;}
        .card {border: 1px solid #e5e7eb;border-radius: 12px;padding: 16px;background: #ffffff;
               box-shadow: 0 1px 2px rgba(0,0,0,0.04); margin-bottom: 12px;}
        .card-header {display: flex;justify-content: space-between;align-items: center;margin-bottom: 8px;}
        .card-title {font-weight: 600;font-size: 1.0rem;color: #111827;}
        .chip-row {display: flex;flex-wrap: wrap;gap: 6px;margin-top: 6px;}
        .chip {background: #f3f4f6;border: 1px solid #e5e7eb;border-radius: 14px;padding: 4px 10px;font-size: 0.85rem;color: #374151;}
        .featured {background: linear-gradient(90deg,#9333ea,#db2777);color: #fff;border: none;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str):
    container = st.container()
    container.markdown(
        f"""
        <div class="card">
          <div class="card-header">
            <div class="card-title">{title}</div>
          </div>
        """,
        unsafe_allow_html=True,
    )
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def chips_html(labels: List[str], css: str = "chip") -> str:
    return "".join([f"<span class='{css}'>{txt}</span>" for txt in labels])


def render_page_header(title: str, breadcrumb: str, chip_labels: Optional[List[str]] = None, export_df: Optional[pd.DataFrame] = None, export_name: str = "export.csv"):
    inject_base_styles()
    c1, c2 = st.columns([8, 2])
    with c1:
        st.markdown(
            f"<div class='app-top-bar'><div class='breadcrumb'>{breadcrumb}</div><div class='page-title'>{title}</div></div>",
            unsafe_allow_html=True,
        )
    with c2:
        if export_df is not None and not export_df.empty:
            st.download_button(
                "Export CSV",
                data=export_df.to_csv(index=False).encode("utf-8"),
                file_name=export_name,
                mime="text/csv",
            )
    if chip_labels:
        st.markdown(f"<div class='chip-row'>{chips_html(chip_labels)}</div>", unsafe_allow_html=True)


def render_artist_card(artist: Dict[str, object], key_prefix: str):
    with st.container(border=True):
        if artist.get("image"):
            st.image(str(artist["image"]), use_container_width=True)
        badges = list(artist["categories"])
        if artist.get("featured"):
            st.markdown(chips_html(["Featured"], css="chip featured"), unsafe_allow_html=True)
        st.markdown(f"**{artist['name']}**")
        st.markdown(f"<div class='chip-row'>{chips_html(badges)}</div>", unsafe_allow_html=True)
        st.caption(str(artist["bio"]))
        st.write(f"📍 {artist['location']}")
        st.write(f"💰 {artist['price_range']}")
        st.write(f"🗣️ {artist['languages_display']}")
        if st.button("Ask for Quote", key=f"{key_prefix}_quote_{artist['id']}", use_container_width=True):
            result = hooks.on_quote_request(str(artist["id"]))
            st.toast(result.message)


def render_artist_grid(artists: List[Dict[str, object]], key_prefix: str, per_row: int = 3):
    for start in range(0, len(artists), per_row):
        cols = st.columns(per_row)
        for col, artist in zip(cols, artists[start : start + per_row]):
            with col:
                render_artist_card(artist, key_prefix)


# ---------- UI setup ----------
st.set_page_config(page_title="Artistly", layout="wide")
inject_base_styles()

data_ctx = load_catalog_data()
hooks = ActionHooks(data_ctx["artists"], data_ctx["bookings"])

for _key, _default in FILTER_DEFAULTS.items():
    st.session_state.setdefault(_key, _default)

with st.sidebar:
    st.markdown("### Artistly")
    nav_choice = st.radio("Navigate", ["Home", "Browse Artists", "Join as Artist", "Manager Dashboard"], index=0)
    st.markdown("---")
    st.caption("Book performers for weddings, corporate events and celebrations across India.")


def clear_filters():
    for key, default in FILTER_DEFAULTS.items():
        st.session_state[key] = default


# ----- Page renderers -----

def render_home_page():
    payload = compute_home(data_ctx)
    st.title("Book Amazing Artists for Your Events")
    st.markdown(
        "Connect with talented performers across India. From singers to dancers, "
        "speakers to DJs - find the perfect artist for your next event."
    )

    with card("Browse by Category"):
        cols = st.columns(len(payload["categories"]))
        for col, cat in zip(cols, payload["categories"]):
            col.metric(cat["name"], cat["count_label"], help=f"{cat['listed']} listed right now")
            col.caption(cat["description"])

    with card("Featured Artists"):
        if payload["featured"]:
            render_artist_grid(payload["featured"], key_prefix="home")
        else:
            st.info("No featured artists right now.")

    with card("How It Works"):
        cols = st.columns(len(payload["how_it_works"]))
        for col, step in zip(cols, payload["how_it_works"]):
            col.markdown(f"**{step['step']} · {step['title']}**")
            col.caption(step["description"])


def render_artists_page():
    render_page_header("Browse Artists", "Home / Browse Artists", export_df=export_frame(data_ctx["artists_df"]), export_name="artists.csv")

    with card("Search and Filters"):
        st.text_input("Search", key="search_text", placeholder="Search by artist name, category, or keywords...")
        fcols = st.columns([3, 3, 3, 2])
        fcols[0].selectbox("Category", [ALL_CATEGORIES] + CATEGORIES, key="category")
        fcols[1].selectbox("Price Range", [ANY_PRICE] + PRICE_RANGES, key="price_range")
        fcols[2].selectbox("Location", [ALL_LOCATIONS] + list(data_ctx["locations"]), key="location")

        criteria = normalize_criteria({key: st.session_state[key] for key in FILTER_DEFAULTS})
        payload = compute_catalog(criteria, data_ctx)
        if payload["has_active_filters"]:
            fcols[3].button("Clear Filters", on_click=clear_filters)
            st.markdown(f"<div class='chip-row'>{chips_html(payload['active_filters'])}</div>", unsafe_allow_html=True)

    st.subheader(payload["heading"])
    st.caption(payload["subtitle"])
    if payload["artists"]:
        render_artist_grid(payload["artists"], key_prefix="browse")
    else:
        st.info("No artists found. Try adjusting your search criteria or clearing the filters.")
        st.button("Clear All Filters", on_click=clear_filters)


def render_onboard_page():
    render_page_header("Join as an Artist", "Home / Join as Artist")
    receipt = st.session_state.get("onboard_receipt")
    if receipt is not None:
        st.success(f"**{receipt.title}**  \n{receipt.message}")
        for step in receipt.next_steps:
            st.write(f"• {step}")
        if st.button("Submit another application"):
            st.session_state.pop("onboard_receipt", None)
            st.rerun()
        return

    with st.form("onboard_form"):
        st.markdown("#### Personal Information")
        pcols = st.columns(2)
        name = pcols[0].text_input("Full Name *", placeholder="Enter your full name")
        email = pcols[1].text_input("Email Address *", placeholder="your.email@example.com")
        phone = pcols[0].text_input("Phone Number *", placeholder="+91 98765 43210")
        location = pcols[1].text_input("Location *", placeholder="City, State")
        bio = st.text_area("Artist Bio *", placeholder="Tell us about your artistic journey (50-500 characters)", max_chars=500)

        st.markdown("#### Professional Details")
        categories = st.multiselect("Performance Categories *", CATEGORIES)
        dcols = st.columns(2)
        experience = dcols[0].selectbox(
            "Years of Experience *",
            [""] + list(EXPERIENCE_LEVELS),
            format_func=lambda v: EXPERIENCE_LEVELS.get(v, "Select experience level"),
        )
        price_range = dcols[1].selectbox("Price Range *", [""] + PRICE_RANGES, format_func=lambda v: v or "Select price range")
        portfolio = st.text_input("Portfolio/Website URL", placeholder="https://your-portfolio.com or YouTube channel")

        st.markdown("#### Languages & Preferences")
        languages = st.multiselect("Languages Spoken *", LANGUAGES)

        submitted = st.form_submit_button("Submit Application", type="primary")

    if not submitted:
        return
    try:
        application = ArtistApplication(
            name=name,
            bio=bio,
            categories=categories,
            languages=languages,
            price_range=price_range,
            location=location,
            email=email,
            phone=phone,
            experience=experience,
            portfolio=portfolio,
        )
    except ValidationError as exc:
        for err in exc.errors():
            field = ".".join(str(p) for p in err["loc"])
            st.error(f"{field}: {str(err['msg']).removeprefix('Value error, ')}")
        return

    with st.spinner("Submitting Application..."):
        st.session_state["onboard_receipt"] = asyncio.run(submit_application(application))
    st.rerun()


def render_dashboard_page():
    payload = compute_dashboard(data_ctx)
    render_page_header("Manager Dashboard", "Home / Manager Dashboard", export_df=export_frame(data_ctx["bookings_df"]), export_name="bookings.csv")
    stats = payload["stats"]

    with card("Overview"):
        cols = st.columns(4)
        cols[0].metric("Total Artists", stats["total_artists"])
        cols[1].metric("Total Bookings", stats["total_bookings"])
        cols[2].metric("Pending Requests", stats["pending_requests"])
        cols[3].metric("Monthly Revenue", stats["monthly_revenue_display"], help="Sum of accepted booking budgets.")

    chart_cols = st.columns(2)
    if "status_breakdown" in payload["charts"]:
        with chart_cols[0]:
            with card("Requests by Status"):
                st.vega_lite_chart(payload["charts"]["status_breakdown"], use_container_width=True)
    if "accepted_revenue" in payload["charts"]:
        with chart_cols[1]:
            with card("Accepted Revenue by Event Type"):
                st.vega_lite_chart(payload["charts"]["accepted_revenue"], use_container_width=True)

    bookings_tab, artists_tab = st.tabs(["Booking Requests", "Managed Artists"])
    with bookings_tab:
        if not payload["bookings"]:
            st.info("No booking requests yet.")
        header = st.columns([3, 3, 2, 3, 2, 2, 3])
        for col, label in zip(header, ["Artist", "Event Type", "Date", "Location", "Budget", "Status", "Actions"]):
            col.markdown(f"**{label}**")
        for row in payload["bookings"]:
            cols = st.columns([3, 3, 2, 3, 2, 2, 3])
            cols[0].write(row["artist_name"])
            cols[1].write(row["event_type"])
            cols[2].write(row["event_date_display"])
            cols[3].write(row["location"])
            cols[4].write(row["budget"])
            cols[5].write(row["status_label"])
            with cols[6]:
                if "accept" in row["actions"]:
                    a, r = st.columns(2)
                    if a.button("Accept", key=f"accept_{row['id']}"):
                        st.toast(hooks.on_status_update(row["id"], "accepted").message)
                    if r.button("Reject", key=f"reject_{row['id']}"):
                        st.toast(hooks.on_status_update(row["id"], "rejected").message)
                else:
                    st.button("View", key=f"view_{row['id']}")
    with artists_tab:
        artists_df = pd.DataFrame(payload["artists"])
        if artists_df.empty:
            st.info("No managed artists.")
        else:
            artists_df["categories"] = artists_df["categories"].apply(", ".join)
            st.dataframe(
                artists_df[["image", "name", "categories", "location", "price_range", "languages_display", "status_label"]],
                column_config={
                    "image": st.column_config.ImageColumn(""),
                    "name": "Name",
                    "categories": "Categories",
                    "location": "Location",
                    "price_range": "Price Range",
                    "languages_display": "Languages",
                    "status_label": "Status",
                },
                hide_index=True,
                use_container_width=True,
            )


if nav_choice == "Home":
    render_home_page()
elif nav_choice == "Browse Artists":
    render_artists_page()
elif nav_choice == "Join as Artist":
    render_onboard_page()
else:
    render_dashboard_page()
