from __future__ import annotations

from datetime import date, datetime, time


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into a wall-clock time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def format_hhmm(value: time) -> str:
    return value.strftime("%H:%M")


def today_local() -> date:
    """Current local calendar date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return date.today()


def as_calendar_date(value: date) -> date:
    """Drop any time-of-day so datetimes compare equal to date keys."""
    return value.date() if isinstance(value, datetime) else value
