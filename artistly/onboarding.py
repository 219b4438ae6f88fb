from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from artistly.settings import get_settings

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_PORTFOLIO_URL = TypeAdapter(AnyHttpUrl)

REVIEW_MESSAGE = "We'll review your profile and get back to you within 24-48 hours."
NEXT_STEPS = [
    "Check your email for confirmation",
    "Keep your phone handy for verification",
    "Start preparing your portfolio",
]


class ArtistApplication(BaseModel):
    model_config = ConfigDict(validate_default=True)

    name: str = ""
    bio: str = ""
    categories: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    price_range: str = ""
    location: str = ""
    profile_image: Optional[str] = None
    email: str = ""
    phone: str = ""
    experience: str = ""
    portfolio: str = ""

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters")
        return v

    @field_validator("bio")
    @classmethod
    def _bio(cls, v: str) -> str:
        if len(v) < 50:
            raise ValueError("Bio must be at least 50 characters")
        if len(v) > 500:
            raise ValueError("Bio must be less than 500 characters")
        return v

    @field_validator("categories")
    @classmethod
    def _categories(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("Please select at least one category")
        return v

    @field_validator("languages")
    @classmethod
    def _languages(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("Please select at least one language")
        return v

    @field_validator("price_range")
    @classmethod
    def _price_range(cls, v: str) -> str:
        if not v:
            raise ValueError("Please select a price range")
        return v

    @field_validator("location")
    @classmethod
    def _location(cls, v: str) -> str:
        if len(v) < 2:
            raise ValueError("Please enter your location")
        return v

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        if not _EMAIL_RE.match(v):
            raise ValueError("Please enter a valid email")
        return v

    @field_validator("phone")
    @classmethod
    def _phone(cls, v: str) -> str:
        if len(v) < 10:
            raise ValueError("Please enter a valid phone number")
        return v

    @field_validator("experience")
    @classmethod
    def _experience(cls, v: str) -> str:
        if not v:
            raise ValueError("Please enter your experience")
        return v

    @field_validator("portfolio")
    @classmethod
    def _portfolio(cls, v: str) -> str:
        if not v:
            return v
        try:
            _PORTFOLIO_URL.validate_python(v)
        except ValidationError:
            raise ValueError("Please enter a valid portfolio URL") from None
        return v


@dataclass(frozen=True)
class SubmissionReceipt:
    status: str
    title: str
    message: str
    name: str
    next_steps: List[str] = field(default_factory=lambda: list(NEXT_STEPS))


async def submit_application(application: ArtistApplication, *, delay_seconds: Optional[float] = None) -> SubmissionReceipt:
    """Simulate sending an application: log it, wait a fixed delay, report success."""
    delay = get_settings().submit_delay_seconds if delay_seconds is None else delay_seconds
    logger.info("Artist onboarding data: %s", application.model_dump())
    await asyncio.sleep(max(0.0, float(delay)))
    logger.info("Application submitted for %s", application.name)
    return SubmissionReceipt(
        status="submitted",
        title="Application Submitted!",
        message=REVIEW_MESSAGE,
        name=application.name,
    )
