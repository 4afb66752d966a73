from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from types import MappingProxyType
from typing import Mapping

from ..common.datetime_utils import as_calendar_date
from ..core.constants import ON_TIME
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one worker's attendance on one date."""

    status: AttendanceStatus = AttendanceStatus.ABSENT
    arrival_time: time = ON_TIME

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT

    @property
    def is_late(self) -> bool:
        return self.is_present and self.arrival_time != ON_TIME


@dataclass(frozen=True)
class Worker:
    """Domain entity: a named worker and their sparse per-date records.

    A date with no record is treated as Absent.
    """

    name: str
    records: Mapping[date, AttendanceRecord] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copy so snapshots never alias each other.
        object.__setattr__(self, "records", MappingProxyType({as_calendar_date(d): rec for d, rec in self.records.items()}))

    def record_for(self, on: date) -> AttendanceRecord | None:
        return self.records.get(as_calendar_date(on))

    def with_record(self, on: date, record: AttendanceRecord) -> "Worker":
        records = dict(self.records)
        records[as_calendar_date(on)] = record
        return Worker(name=self.name, records=records)


Roster = tuple[Worker, ...]


@dataclass(frozen=True)
class DailyAttendanceRow:
    """Read-model for the per-date attendance board."""

    index: int
    name: str
    status: AttendanceStatus
    arrival_time: time
    is_late: bool
