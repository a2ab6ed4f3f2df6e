"""Helpers for comparing record dates by calendar day."""

from datetime import date, datetime


def calendar_day(value: date | datetime | str) -> date:
    """Reduce a date, datetime or ISO string to its calendar day.

    Strings may be a bare day ("2024-01-05") or carry a time of day
    ("2024-01-05T08:30:00"); the time is ignored. The day is the one
    written in the string, whatever its UTC offset.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text.replace("Z", "+00:00")).date()


def date_sort_key(value: date | datetime | str) -> datetime:
    """Sort key for stored dates, including time of day when present.

    Ordering uses the wall-clock time as written. A UTC offset is dropped,
    not converted, so "2024-01-05T09:00+05:00" sorts after
    "2024-01-05T08:00+00:00" even though it is the earlier moment.
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    text = value.strip()
    if len(text) == 10:
        return datetime.combine(date.fromisoformat(text), datetime.min.time())
    return datetime.fromisoformat(text.replace("Z", "+00:00")).replace(tzinfo=None)


def in_range(
    value: date | datetime | str,
    start: date | datetime | str,
    end: date | datetime | str,
) -> bool:
    """Check whether a date's calendar day lies in [start, end], inclusive."""
    return calendar_day(start) <= calendar_day(value) <= calendar_day(end)
