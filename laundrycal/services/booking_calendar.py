"""
Application service that turns a user's bookings into a calendar feed.

The service coordinates fetching bookings via a booking client adapter and
delegates slot parsing, event building and serialization to the domain
layer. The booking client and the clock are injected so the whole pipeline
can be exercised in tests without network access or real time.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterator, List, Optional, Protocol

import pendulum

from ..domain.calendar_renderer import CalendarRenderer
from ..domain.event_builder import EventResult, build_events, iter_event_results
from ..domain.models import BookingRecord, CalendarEvent

logger = logging.getLogger(__name__)

STAMP_TIMEZONE = "UTC"


class BookingClientProtocol(Protocol):
    """Protocol describing the booking client behaviour needed by the service."""

    def get_my_bookings(self, user_id: int) -> List[BookingRecord]:
        """Return the user's bookings in API order."""


class BookingCalendarService:
    """
    Orchestrates booking retrieval and calendar rendering.

    Dependency inversion toward a protocol makes it easy to plug in the real
    booking API adapter or the mock implementation in tests.
    """

    def __init__(
        self,
        booking_client: BookingClientProtocol,
        renderer: Optional[CalendarRenderer] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._booking_client = booking_client
        self._renderer = renderer or CalendarRenderer()
        self._clock = clock or (lambda: pendulum.now(STAMP_TIMEZONE))

    def fetch_bookings(self, user_id: int) -> List[BookingRecord]:
        """Fetch the user's bookings."""
        return self._booking_client.get_my_bookings(user_id)

    def build_events(
        self,
        user_id: int,
        now: Optional[datetime] = None,
    ) -> List[CalendarEvent]:
        """
        Fetch bookings and build one event per booking.

        Raises:
            BookingAPIError: If bookings cannot be fetched
            TimeSlotParseError: On the first malformed booking
        """
        records = self.fetch_bookings(user_id)
        return build_events(records, self._stamp(now))

    def iter_event_results(
        self,
        user_id: int,
        now: Optional[datetime] = None,
    ) -> Iterator[EventResult]:
        """Fetch bookings and build events, reporting failures per booking."""
        records = self.fetch_bookings(user_id)
        return iter_event_results(records, self._stamp(now))

    def render_calendar(self, user_id: int, now: Optional[datetime] = None) -> str:
        """Fetch bookings and render them as an iCalendar document."""
        events = self.build_events(user_id, now=now)
        logger.info("Rendering %d event(s) for user %s", len(events), user_id)
        return self._renderer.render(events)

    def _stamp(self, now: Optional[datetime]) -> datetime:
        """Creation timestamp as a naive datetime, UTC unless the clock says otherwise."""
        current = now if now is not None else self._clock()
        if current.tzinfo is not None:
            current = current.replace(tzinfo=None)
        return current
