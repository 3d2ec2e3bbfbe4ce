"""
Parser for the free-text slot descriptions sent by the booking API.

A description looks like ``"15:00 - 16:00"`` or ``"15:00 - 16:00 (23/8)"``:
a start time, an end time and an optional ``(day/month)`` hint for slots
that end on a later date than they start. Pure domain logic, no I/O.
"""

from datetime import date, datetime, time

import pendulum

from .exceptions import ParseErrorKind, TimeSlotParseError
from .models import TimeSlotDescription

TIME_OF_DAY_FORMAT = "H:mm"

SEPARATOR_TOKEN = "-"

UINT32_MAX = 0xFFFFFFFF


def parse_time_of_day(value: str, kind: ParseErrorKind) -> time:
    """
    Parse a 24-hour ``HH:MM`` string.

    Raises:
        TimeSlotParseError: with the given ``kind`` if the value is malformed
    """
    try:
        parsed = pendulum.from_format(value, TIME_OF_DAY_FORMAT)
    except ValueError as exc:
        raise TimeSlotParseError(kind, value) from exc
    return time(hour=parsed.hour, minute=parsed.minute)


def parse_time_slot(description: str, anchor_date: date) -> TimeSlotDescription:
    """
    Resolve a slot description against the booking date.

    Args:
        description: Schedule fragment, e.g. ``"15:00 - 16:00 (1/1)"``
        anchor_date: The booking date the slot starts on

    Returns:
        TimeSlotDescription with the start timestamp and signed duration

    Raises:
        TimeSlotParseError: If any part of the description is malformed
    """
    tokens = [token for token in description.split() if token != SEPARATOR_TOKEN]

    start_time = parse_time_of_day(_token_at(tokens, 0), ParseErrorKind.START_TIME)
    end_time = parse_time_of_day(_token_at(tokens, 1), ParseErrorKind.END_TIME)

    if len(tokens) > 2:
        end_date = _resolve_end_date(tokens[2], anchor_date)
    else:
        end_date = anchor_date

    start = _combine(anchor_date, start_time)
    end = _combine(end_date, end_time)

    return TimeSlotDescription(start=start, duration=end - start)


def _token_at(tokens: list, index: int) -> str:
    return tokens[index] if index < len(tokens) else ""


def _combine(day: date, moment: time) -> datetime:
    return datetime(day.year, day.month, day.day, moment.hour, moment.minute)


def _resolve_end_date(hint: str, anchor_date: date) -> date:
    """
    Turn a ``(D/M)`` hint into a date on or after the anchor date.

    The hint carries no year. It is placed in the anchor's year and moved
    exactly twelve months forward when that lands before the anchor.
    """
    parts = hint.replace("(", "").replace(")", "").split("/")

    day = _parse_numeral(parts[0], ParseErrorKind.DAY)
    month = _parse_numeral(
        parts[1] if len(parts) > 1 else "",
        ParseErrorKind.MONTH,
    )

    try:
        end_date = pendulum.date(anchor_date.year, month, day)
    except ValueError as exc:
        raise TimeSlotParseError(ParseErrorKind.END_DATE, hint) from exc

    if end_date >= anchor_date:
        return end_date

    if end_date.year >= date.max.year:
        raise TimeSlotParseError(ParseErrorKind.OVERFLOW, hint)

    try:
        return end_date.add(months=12)
    except (ValueError, OverflowError) as exc:
        raise TimeSlotParseError(ParseErrorKind.OVERFLOW, hint) from exc


def _parse_numeral(value: str, kind: ParseErrorKind) -> int:
    """Parse an unsigned 32-bit decimal numeral with an optional leading plus."""
    digits = value[1:] if value.startswith("+") else value
    if not (digits.isascii() and digits.isdigit()):
        raise TimeSlotParseError(kind, value)

    number = int(digits)
    if number > UINT32_MAX:
        raise TimeSlotParseError(kind, value)

    return number
