from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from functools import lru_cache
from typing import Dict, Iterable, List, Literal, Optional, Tuple

import pandas as pd

from artistly.filters import location_options


BookingStatus = Literal["pending", "accepted", "rejected"]
BOOKING_STATUSES: Tuple[str, ...] = ("pending", "accepted", "rejected")

CATEGORIES = [
    "Singers",
    "Dancers",
    "Speakers",
    "DJs",
    "Musicians",
    "Comedians",
    "Magicians",
]

LANGUAGES = [
    "English",
    "Hindi",
    "Tamil",
    "Telugu",
    "Kannada",
    "Malayalam",
    "Bengali",
    "Marathi",
    "Gujarati",
    "Punjabi",
]

PRICE_RANGES = [
    "Under ₹10,000",
    "₹10,000 - ₹25,000",
    "₹25,000 - ₹50,000",
    "₹50,000 - ₹1,00,000",
    "Above ₹1,00,000",
]

EXPERIENCE_LEVELS = {
    "0-1": "0-1 years (Beginner)",
    "2-5": "2-5 years (Intermediate)",
    "5-10": "5-10 years (Experienced)",
    "10+": "10+ years (Expert)",
}

DEFAULT_AVATAR = "https://images.unsplash.com/photo-1511671782779-c97d3d27a1d4?w=40&h=40&fit=crop"

ARTIST_COLUMNS = ["id", "name", "categories", "bio", "price_range", "location", "languages", "image", "featured"]
BOOKING_COLUMNS = [
    "id",
    "artist_id",
    "artist_name",
    "event_date",
    "event_type",
    "location",
    "budget",
    "status",
    "created_at",
]


@dataclass(frozen=True)
class Artist:
    id: str
    name: str
    categories: Tuple[str, ...]
    bio: str
    price_range: str
    location: str
    languages: Tuple[str, ...] = ()
    image: Optional[str] = None
    featured: bool = False


@dataclass(frozen=True)
class BookingRequest:
    id: str
    artist_id: str
    artist_name: str
    event_date: str
    event_type: str
    location: str
    budget: str
    status: BookingStatus
    created_at: str


MOCK_ARTISTS: Tuple[Artist, ...] = (
    Artist(
        id="1",
        name="Priya Sharma",
        categories=("Singers", "Musicians"),
        bio="Classical and Bollywood vocalist with 10+ years of experience. Perfect for weddings and cultural events.",
        price_range="₹25,000 - ₹50,000",
        location="Mumbai, Maharashtra",
        languages=("Hindi", "English", "Marathi"),
        image="https://images.unsplash.com/photo-1494790108755-2616c96da99d?w=400&h=400&fit=crop&crop=face",
        featured=True,
    ),
    Artist(
        id="2",
        name="DJ Arjun",
        categories=("DJs",),
        bio="Professional DJ specializing in Bollywood, EDM, and Punjabi beats. 500+ successful events.",
        price_range="₹50,000 - ₹1,00,000",
        location="Delhi, NCR",
        languages=("Hindi", "English", "Punjabi"),
        image="https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=400&h=400&fit=crop&crop=face",
        featured=True,
    ),
    Artist(
        id="3",
        name="Kavya Dance Troupe",
        categories=("Dancers",),
        bio="Contemporary and classical dance performances. Award-winning choreography team.",
        price_range="₹10,000 - ₹25,000",
        location="Bangalore, Karnataka",
        languages=("English", "Kannada", "Tamil"),
        image="https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=400&h=400&fit=crop&crop=face",
    ),
    Artist(
        id="4",
        name="Rohit Kumar",
        categories=("Comedians", "Speakers"),
        bio="Stand-up comedian and motivational speaker. Corporate events specialist.",
        price_range="₹25,000 - ₹50,000",
        location="Pune, Maharashtra",
        languages=("Hindi", "English", "Marathi"),
        image="https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=400&h=400&fit=crop&crop=face",
    ),
    Artist(
        id="5",
        name="Sitar Strings",
        categories=("Musicians",),
        bio="Traditional Indian classical music ensemble featuring sitar, tabla, and harmonium.",
        price_range="₹10,000 - ₹25,000",
        location="Jaipur, Rajasthan",
        languages=("Hindi", "English"),
        image="https://images.unsplash.com/photo-1566492031773-4f4e44671d66?w=400&h=400&fit=crop&crop=face",
    ),
    Artist(
        id="6",
        name="Magic Mike",
        categories=("Magicians",),
        bio="Professional magician and illusionist. Perfect for birthday parties and corporate events.",
        price_range="Under ₹10,000",
        location="Chennai, Tamil Nadu",
        languages=("English", "Tamil", "Telugu"),
        image="https://images.unsplash.com/photo-1560250097-0b93528c311a?w=400&h=400&fit=crop&crop=face",
    ),
)

MOCK_BOOKINGS: Tuple[BookingRequest, ...] = (
    BookingRequest("1", "1", "Priya Sharma", "2024-07-15", "Wedding", "Mumbai, Maharashtra", "₹40,000", "pending", "2024-06-20"),
    BookingRequest("2", "2", "DJ Arjun", "2024-07-22", "Corporate Event", "Delhi, NCR", "₹75,000", "accepted", "2024-06-18"),
    BookingRequest("3", "3", "Kavya Dance Troupe", "2024-07-10", "Cultural Program", "Bangalore, Karnataka", "₹20,000", "rejected", "2024-06-15"),
    BookingRequest("4", "4", "Rohit Kumar", "2024-08-05", "Birthday Party", "Pune, Maharashtra", "₹35,000", "pending", "2024-06-22"),
    BookingRequest("5", "1", "Priya Sharma", "2024-08-12", "Anniversary", "Mumbai, Maharashtra", "₹45,000", "accepted", "2024-06-19"),
)


def _as_row(record: object) -> Dict[str, object]:
    if is_dataclass(record) and not isinstance(record, type):
        return asdict(record)
    return dict(record)  # type: ignore[call-overload]


def artists_frame(artists: Iterable[Artist]) -> pd.DataFrame:
    return pd.DataFrame([_as_row(a) for a in artists], columns=ARTIST_COLUMNS)


def bookings_frame(bookings: Iterable[object]) -> pd.DataFrame:
    return pd.DataFrame([_as_row(b) for b in bookings], columns=BOOKING_COLUMNS)


def export_frame(frame: Optional[pd.DataFrame]) -> pd.DataFrame:
    """Copy of ``frame`` ready for CSV: tuple columns joined with "; "."""
    if frame is None or not hasattr(frame, "to_csv"):
        return pd.DataFrame()
    out = frame.copy()
    for col in ("categories", "languages"):
        if col in out.columns:
            out[col] = out[col].apply(lambda v: "; ".join(v) if isinstance(v, (list, tuple)) else v)
    return out


def format_currency(value: object, symbol: str = "₹") -> str:
    """Format an amount with Indian digit grouping, e.g. 115000 -> ₹1,15,000."""
    if value is None or pd.isna(value):
        return "N/A"
    amount = int(round(float(value)))
    sign = "-" if amount < 0 else ""
    digits = str(abs(amount))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])
    return f"{sign}{symbol}{digits}"


def format_event_date(value: object) -> str:
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return str(value)
    return ts.strftime("%d %b %Y")


def languages_summary(languages: Iterable[str], limit: int, suffix: str = "") -> str:
    langs = list(languages)
    text = ", ".join(langs[:limit])
    if len(langs) > limit:
        text += f" +{len(langs) - limit}{suffix}"
    return text


@lru_cache(maxsize=1)
def load_catalog_data() -> Dict[str, object]:
    artists: List[Artist] = list(MOCK_ARTISTS)
    bookings: List[BookingRequest] = list(MOCK_BOOKINGS)
    return {
        "artists": artists,
        "bookings": bookings,
        "artists_df": artists_frame(artists),
        "bookings_df": bookings_frame(bookings),
        "locations": location_options(artists),
        "categories": list(CATEGORIES),
        "languages": list(LANGUAGES),
        "price_ranges": list(PRICE_RANGES),
    }
