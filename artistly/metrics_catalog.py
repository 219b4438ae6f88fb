from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from artistly.data import Artist, languages_summary
from artistly.filters import (
    CatalogCriteria,
    active_filter_labels,
    filter_entries,
    has_active_filters,
    location_options,
    normalize_criteria,
)


def artist_card(artist: Artist) -> Dict[str, Any]:
    card = asdict(artist)
    card["categories"] = list(artist.categories)
    card["languages"] = list(artist.languages)
    card["languages_display"] = languages_summary(artist.languages, 3, suffix=" more")
    return card


def results_heading(count: int) -> str:
    return f"{count} Artist{'' if count == 1 else 's'} Found"


def compute_catalog(criteria: CatalogCriteria | dict, ctx: Dict[str, Any]) -> Dict[str, Any]:
    crit = criteria if isinstance(criteria, CatalogCriteria) else normalize_criteria(criteria)
    artists = list(ctx.get("artists", []) or [])
    matches = filter_entries(artists, crit)
    active = has_active_filters(crit)

    locations = ctx.get("locations")
    if locations is None:
        locations = location_options(artists)

    return {
        "criteria": asdict(crit),
        "count": len(matches),
        "heading": results_heading(len(matches)),
        "subtitle": "Filtered results" if active else "Showing all available artists",
        "has_active_filters": active,
        "active_filters": active_filter_labels(crit),
        "artists": [artist_card(a) for a in matches],
        "locations": list(locations),
    }
