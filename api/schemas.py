from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from artistly.onboarding import ArtistApplication

__all__ = ["ArtistApplication", "CatalogCriteriaModel", "StatusUpdateModel"]


class CatalogCriteriaModel(BaseModel):
    search_text: str = ""
    category: str = ""
    price_range: str = ""
    location: str = ""


class StatusUpdateModel(BaseModel):
    status: Literal["pending", "accepted", "rejected"]
