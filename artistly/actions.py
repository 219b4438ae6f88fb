"""Quote-request and status-update hooks.

Nothing here mutates the dataset: the default handlers only log the command,
and every result reports ``persisted=False``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from artistly.data import BOOKING_STATUSES, Artist, BookingRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuoteRequest:
    artist_id: str


@dataclass(frozen=True)
class StatusUpdate:
    request_id: str
    status: str


@dataclass(frozen=True)
class ActionResult:
    action: str
    target_id: str
    accepted: bool
    persisted: bool = False
    message: str = ""


QuoteHandler = Callable[[QuoteRequest], None]
StatusHandler = Callable[[StatusUpdate], None]


def log_quote_request(command: QuoteRequest) -> None:
    logger.info("Quote requested for artist: %s", command.artist_id)


def log_status_update(command: StatusUpdate) -> None:
    logger.info("Updating request %s to %s", command.request_id, command.status)


class ActionHooks:
    def __init__(
        self,
        artists: Optional[Iterable[Artist]] = None,
        bookings: Optional[Iterable[BookingRequest]] = None,
        *,
        quote_handler: Optional[QuoteHandler] = None,
        status_handler: Optional[StatusHandler] = None,
    ) -> None:
        self._artist_ids = None if artists is None else {a.id for a in artists}
        self._request_ids = None if bookings is None else {b.id for b in bookings}
        self._quote_handler = quote_handler or log_quote_request
        self._status_handler = status_handler or log_status_update

    def on_quote_request(self, artist_id: str) -> ActionResult:
        artist_id = str(artist_id)
        if self._artist_ids is not None and artist_id not in self._artist_ids:
            logger.warning("Quote requested for unknown artist: %s", artist_id)
            return ActionResult("quote_request", artist_id, accepted=False, message=f"Unknown artist {artist_id}")
        self._quote_handler(QuoteRequest(artist_id))
        return ActionResult("quote_request", artist_id, accepted=True, message="Quote request received")

    def on_status_update(self, request_id: str, status: str) -> ActionResult:
        if status not in BOOKING_STATUSES:
            raise ValueError(f"Unsupported booking status: {status!r}")
        request_id = str(request_id)
        if self._request_ids is not None and request_id not in self._request_ids:
            logger.warning("Status update for unknown request: %s", request_id)
            return ActionResult("status_update", request_id, accepted=False, message=f"Unknown request {request_id}")
        self._status_handler(StatusUpdate(request_id, status))
        return ActionResult("status_update", request_id, accepted=True, message=f"Request {request_id} marked {status}")
