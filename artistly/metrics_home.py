from __future__ import annotations

from typing import Any, Dict, List

from artistly.metrics_catalog import artist_card

HOME_CATEGORIES: List[Dict[str, str]] = [
    {"name": "Singers", "description": "Vocal artists for every occasion", "count_label": "250+ Artists"},
    {"name": "Dancers", "description": "Professional dance performances", "count_label": "180+ Artists"},
    {"name": "DJs", "description": "Electronic music specialists", "count_label": "150+ Artists"},
    {"name": "Musicians", "description": "Instrumental & band performances", "count_label": "200+ Artists"},
]

HOW_IT_WORKS: List[Dict[str, str]] = [
    {
        "step": "01",
        "title": "Browse & Filter",
        "description": "Search through our curated list of verified artists. Filter by category, location, and budget to find your perfect match.",
    },
    {
        "step": "02",
        "title": "Request Quote",
        "description": "Connect directly with artists and request customized quotes for your event. Share your requirements and get personalized proposals.",
    },
    {
        "step": "03",
        "title": "Book & Enjoy",
        "description": "Finalize the booking, coordinate the details, and enjoy an amazing performance that makes your event truly memorable.",
    },
]


def compute_home(ctx: Dict[str, Any]) -> Dict[str, Any]:
    artists = list(ctx.get("artists", []) or [])
    featured = [a for a in artists if a.featured]

    categories = []
    for cat in HOME_CATEGORIES:
        listed = sum(1 for a in artists if cat["name"] in a.categories)
        categories.append({**cat, "listed": listed})

    return {
        "featured": [artist_card(a) for a in featured],
        "categories": categories,
        "how_it_works": HOW_IT_WORKS,
    }
