from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DateRangeInfo:
    """Calendar metadata for an inclusive date range."""

    total_days: int
    sunday_count: int

    @property
    def working_days(self) -> int:
        return self.total_days - self.sunday_count


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date
    days: tuple[date, ...]
    info: DateRangeInfo
