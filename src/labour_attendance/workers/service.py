from __future__ import annotations

import logging
from datetime import date, time
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_non_empty
from ..core.constants import ON_TIME
from ..core.enums import AttendanceStatus
from ..core.exceptions import DuplicateNameError, InvalidTimeError, WorkerIndexError
from .model import AttendanceRecord, DailyAttendanceRow, Roster, Worker
from .repository import RosterRepository

logger = logging.getLogger(__name__)


def _check_index(roster: Sequence[Worker], index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(roster):
        raise WorkerIndexError(f"No worker at index {index!r} (roster size {len(roster)})")
    return index


def _coerce_time(value: time | str) -> time:
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    try:
        return parse_hhmm(str(value))
    except ValueError:
        raise InvalidTimeError(f"Invalid time {value!r} (expected HH:MM)")


def _replace(roster: Sequence[Worker], index: int, worker: Worker) -> Roster:
    return tuple(worker if i == index else w for i, w in enumerate(roster))


def add_worker(roster: Sequence[Worker], name: str) -> Roster:
    name = require_non_empty(name, "Worker name")
    if any(w.name == name for w in roster):
        raise DuplicateNameError(f"Worker {name!r} already exists")
    return tuple(roster) + (Worker(name=name),)


def remove_worker(roster: Sequence[Worker], index: int) -> Roster:
    _check_index(roster, index)
    return tuple(w for i, w in enumerate(roster) if i != index)


def set_status(roster: Sequence[Worker], index: int, on: date) -> Roster:
    """Toggle Present/Absent for one worker on one date.

    A datetime is reduced to its calendar date.
    A missing record starts as Absent at 09:00, so the first toggle marks the
    worker Present. The arrival time is never touched.
    """
    worker = roster[_check_index(roster, index)]
    current = worker.record_for(on) or AttendanceRecord()
    updated = AttendanceRecord(status=current.status.toggled(), arrival_time=current.arrival_time)
    return _replace(roster, index, worker.with_record(on, updated))


def set_arrival_time(roster: Sequence[Worker], index: int, on: date, arrival: time | str) -> Roster:
    worker = roster[_check_index(roster, index)]
    arrival_t = _coerce_time(arrival)
    current = worker.record_for(on)
    status = current.status if current else AttendanceStatus.ABSENT
    updated = AttendanceRecord(status=status, arrival_time=arrival_t)
    return _replace(roster, index, worker.with_record(on, updated))


def daily_sheet(roster: Sequence[Worker], on: date) -> list[DailyAttendanceRow]:
    rows = []
    for i, w in enumerate(roster):
        rec = w.record_for(on)
        status = rec.status if rec else AttendanceStatus.ABSENT
        arrival = rec.arrival_time if rec else ON_TIME
        rows.append(
            DailyAttendanceRow(
                index=i,
                name=w.name,
                status=status,
                arrival_time=arrival,
                is_late=arrival != ON_TIME,
            )
        )
    return rows


class AttendanceBook:
    """Caller-owned container for the current roster snapshot.

    Each method applies one pure transition, swaps in the new snapshot and
    saves it through the repository. A rejected transition leaves the
    snapshot untouched and saves nothing.
    """

    def __init__(
        self,
        repository: RosterRepository,
        *,
        roster: Optional[Roster] = None,
        on_change: Optional[Callable[[Roster], None]] = None,
    ):
        self._repository = repository
        self._roster: Roster = tuple(roster) if roster is not None else repository.load()
        self._on_change = on_change

    @property
    def roster(self) -> Roster:
        return self._roster

    def _commit(self, roster: Roster) -> Roster:
        # Snapshot only advances once the save succeeded.
        self._repository.save(roster)
        self._roster = roster
        if self._on_change:
            self._on_change(roster)
        return roster

    def add_worker(self, name: str) -> Roster:
        roster = self._commit(add_worker(self._roster, name))
        logger.info("Added worker %r (roster size %d)", roster[-1].name, len(roster))
        return roster

    def remove_worker(self, index: int) -> Roster:
        _check_index(self._roster, index)
        name = self._roster[index].name
        roster = self._commit(remove_worker(self._roster, index))
        logger.info("Removed worker %r", name)
        return roster

    def set_status(self, index: int, on: date) -> Roster:
        return self._commit(set_status(self._roster, index, on))

    def set_arrival_time(self, index: int, on: date, arrival: time | str) -> Roster:
        return self._commit(set_arrival_time(self._roster, index, on, arrival))

    def daily_sheet(self, on: date) -> list[DailyAttendanceRow]:
        return daily_sheet(self._roster, on)
