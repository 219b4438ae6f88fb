from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

import pandas as pd

if TYPE_CHECKING:
    from artistly.data import Artist


ALL_CATEGORIES = "All Categories"
ANY_PRICE = "Any Price"
ALL_LOCATIONS = "All Locations"

_SENTINELS = {ALL_CATEGORIES, ANY_PRICE, ALL_LOCATIONS}


@dataclass(frozen=True)
class CatalogCriteria:
    search_text: str = ""
    category: str = ""
    price_range: str = ""
    location: str = ""


def _clean(value: object) -> str:
    if value is None:
        return ""
    s = str(value).strip()
    if s in _SENTINELS:
        return ""
    return s


def normalize_criteria(raw: Optional[dict]) -> CatalogCriteria:
    raw = raw or {}
    return CatalogCriteria(
        search_text=_clean(raw.get("search_text")),
        category=_clean(raw.get("category")),
        price_range=_clean(raw.get("price_range")),
        location=_clean(raw.get("location")),
    )


def has_active_filters(criteria: CatalogCriteria) -> bool:
    return bool(criteria.search_text or criteria.category or criteria.price_range or criteria.location)


def active_filter_labels(criteria: CatalogCriteria) -> List[str]:
    labels: List[str] = []
    if criteria.search_text:
        labels.append(f'Search: "{criteria.search_text}"')
    if criteria.category:
        labels.append(f"Category: {criteria.category}")
    if criteria.price_range:
        labels.append(f"Price: {criteria.price_range}")
    if criteria.location:
        labels.append(f"Location: {criteria.location}")
    return labels


def location_token(location: str) -> str:
    """Region part of a "City, Region" string, or the whole string when there is no region."""
    parts = str(location).split(",")
    region = parts[1].strip() if len(parts) > 1 else ""
    return region or parts[0].strip()


def location_options(entries: Iterable["Artist"]) -> List[str]:
    tokens = {location_token(e.location) for e in entries}
    return sorted(t for t in tokens if t)


def _entries_frame(entries: Sequence["Artist"]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "name": [str(e.name) for e in entries],
            "bio": [str(e.bio) for e in entries],
            "categories": [tuple(e.categories) for e in entries],
            "price_range": [str(e.price_range) for e in entries],
            "location": [str(e.location) for e in entries],
        }
    )


def filter_entries(entries: Sequence["Artist"], criteria: CatalogCriteria | dict) -> List["Artist"]:
    """Return the entries matching every active criterion, in input order.

    Search text is a case-insensitive substring match against name, bio and
    each category. Category is an exact membership test, price range an exact
    equality and location a substring containment on the full location.
    Every criterion is trimmed first, whether it comes as a dict or as a
    ``CatalogCriteria`` built directly.
    """
    crit = normalize_criteria(asdict(criteria) if isinstance(criteria, CatalogCriteria) else criteria)
    entries = list(entries)
    if not entries:
        return []

    frame = _entries_frame(entries)
    mask = pd.Series(True, index=frame.index)

    query = crit.search_text.lower()
    if query:
        mask &= (
            frame["name"].str.lower().str.contains(query, regex=False, na=False)
            | frame["bio"].str.lower().str.contains(query, regex=False, na=False)
            | frame["categories"].apply(lambda cats: any(query in str(c).lower() for c in cats))
        )
    if crit.category:
        mask &= frame["categories"].apply(lambda cats: crit.category in cats)
    if crit.price_range:
        mask &= frame["price_range"].eq(crit.price_range)
    if crit.location:
        mask &= frame["location"].str.contains(crit.location, regex=False, na=False)

    return [entries[i] for i in frame.index[mask.to_numpy(dtype=bool)]]
