from __future__ import annotations

from datetime import date, timedelta

from ..common.datetime_utils import as_calendar_date, parse_iso_date
from ..core.exceptions import InvalidRangeError
from .model import DateRange, DateRangeInfo

SUNDAY = 6


def is_sunday(value: date) -> bool:
    return value.weekday() == SUNDAY


def _coerce(value: date | str, field_name: str) -> date:
    if isinstance(value, date):
        return as_calendar_date(value)
    try:
        return parse_iso_date(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidRangeError(f"Invalid {field_name} date: {value!r} (expected YYYY-MM-DD)")


def enumerate_range(start: date | str, end: date | str) -> DateRange:
    """Enumerate every calendar day in [start, end] and count its Sundays.

    Both bounds are inclusive. Raises InvalidRangeError when a bound does not
    parse or when start falls after end.
    """
    start_d = _coerce(start, "start")
    end_d = _coerce(end, "end")
    if start_d > end_d:
        raise InvalidRangeError(f"Start date {start_d} is after end date {end_d}")

    days = [start_d + timedelta(days=offset) for offset in range((end_d - start_d).days + 1)]
    sundays = sum(1 for d in days if is_sunday(d))

    return DateRange(
        start=start_d,
        end=end_d,
        days=tuple(days),
        info=DateRangeInfo(total_days=len(days), sunday_count=sundays),
    )
