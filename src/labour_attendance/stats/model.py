from __future__ import annotations

from dataclasses import dataclass

from ..calendar_range.model import DateRangeInfo


@dataclass(frozen=True)
class WorkerStats:
    """Aggregate counts for one worker over one date range."""

    name: str
    present_days: int
    absent_days: int
    late_days: int
    working_days: int
    sunday_count: int


@dataclass(frozen=True)
class StatsResult:
    """Statistics for a roster snapshot.

    start/end keep the literal strings the caller asked for; they are printed
    verbatim in reports and file names.
    """

    start: str
    end: str
    range: DateRangeInfo
    stats: tuple[WorkerStats, ...]
