from __future__ import annotations

from datetime import date
from typing import Sequence

from ..calendar_range.model import DateRange
from ..calendar_range.service import enumerate_range, is_sunday
from ..common.datetime_utils import format_iso_date
from ..workers.model import Worker
from .model import StatsResult, WorkerStats


def _as_text(value: date | str) -> str:
    return format_iso_date(value) if isinstance(value, date) else str(value)


def worker_stats(worker: Worker, date_range: DateRange) -> WorkerStats:
    present = absent = late = 0
    for day in date_range.days:
        rec = worker.record_for(day)
        if rec and rec.is_present:
            present += 1
            if rec.is_late:
                late += 1
        elif not is_sunday(day):
            absent += 1

    return WorkerStats(
        name=worker.name,
        present_days=present,
        absent_days=absent,
        late_days=late,
        working_days=date_range.info.working_days,
        sunday_count=date_range.info.sunday_count,
    )


def compute_stats(roster: Sequence[Worker], start: date | str, end: date | str) -> StatsResult:
    """Per-worker present/absent/late counts over [start, end].

    Sundays without a Present record are not counted as absences. A Present
    record on a Sunday still counts as present and is checked for lateness.
    Raises InvalidRangeError for an unparseable or inverted range.
    """
    date_range = enumerate_range(start, end)
    return StatsResult(
        start=_as_text(start),
        end=_as_text(end),
        range=date_range.info,
        stats=tuple(worker_stats(w, date_range) for w in roster),
    )
