"""
Maps booking records onto calendar events.

Every booking becomes one event starting at its parsed slot, with a single
display alarm placed at the booking's reminder date and time. The alarm is
expressed as a whole-hour offset from the event start.
"""

from datetime import date, datetime
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from .exceptions import ParseErrorKind, TimeSlotParseError
from .models import (
    Alarm,
    BookingRecord,
    CalendarEvent,
    EventStatus,
    TimeSlotDescription,
    whole_hours,
)
from .time_slot import parse_time_of_day, parse_time_slot

SlotParser = Callable[[str, date], TimeSlotDescription]

EventResult = Tuple[BookingRecord, Optional[CalendarEvent], Optional[TimeSlotParseError]]


def build_event(
    record: BookingRecord,
    slot: TimeSlotDescription,
    now: datetime,
) -> CalendarEvent:
    """
    Build the calendar event for one booking.

    Args:
        record: The booking to map
        slot: The booking's parsed time slot
        now: Creation timestamp stamped on the event

    Raises:
        TimeSlotParseError: If the reminder time of day is malformed
    """
    reminder_time = parse_time_of_day(record.hour_reminder, ParseErrorKind.ALARM_TIME)
    alarm_at = datetime.combine(record.date_reminder, reminder_time)

    alarm = Alarm(
        description=record.laundry_room,
        trigger_hours=whole_hours(alarm_at - slot.start),
    )

    status = EventStatus.TENTATIVE if record.is_queue else EventStatus.CONFIRMED

    return CalendarEvent(
        uid=str(record.booking_id),
        created=now,
        start=slot.start,
        summary=record.laundry_room,
        location=record.laundry_room,
        status=status,
        duration_hours=slot.duration_hours(),
        alarm=alarm,
    )


def build_events(
    records: Iterable[BookingRecord],
    now: datetime,
    parser: SlotParser = parse_time_slot,
) -> List[CalendarEvent]:
    """
    Build events for a batch of bookings, in input order.

    The first malformed booking aborts the whole batch.
    """
    events: List[CalendarEvent] = []

    for record in records:
        slot = parser(record.time_slots_desc, record.date_book)
        events.append(build_event(record, slot, now))

    return events


def iter_event_results(
    records: Iterable[BookingRecord],
    now: datetime,
    parser: SlotParser = parse_time_slot,
) -> Iterator[EventResult]:
    """
    Lazily build events one booking at a time.

    Yields ``(record, event, error)`` where exactly one of ``event`` and
    ``error`` is set, so a single malformed booking does not hide the rest.
    """
    for record in records:
        try:
            slot = parser(record.time_slots_desc, record.date_book)
            event = build_event(record, slot, now)
        except TimeSlotParseError as exc:
            yield record, None, exc
            continue

        yield record, event, None
