"""Convert rosters to and from the persisted JSON payload.

Payload shape::

    [{"name": "Asha", "records": {"2024-01-03": {"status": "Present", "time": "09:00"}}}]

Loading never fails as a whole: malformed entries are repaired or dropped.
"""

from __future__ import annotations

import logging
from typing import Any

from ..common.datetime_utils import format_hhmm, format_iso_date, parse_hhmm, parse_iso_date
from ..core.constants import ON_TIME, UNNAMED_WORKER
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, Roster, Worker

logger = logging.getLogger(__name__)


def roster_to_payload(roster: Roster) -> list[dict]:
    return [
        {
            "name": w.name,
            "records": {
                format_iso_date(d): {"status": rec.status.value, "time": format_hhmm(rec.arrival_time)}
                for d, rec in sorted(w.records.items())
            },
        }
        for w in roster
    ]


def _record_from_payload(raw: Any) -> AttendanceRecord:
    if not isinstance(raw, dict):
        return AttendanceRecord()

    try:
        status = AttendanceStatus(raw.get("status"))
    except ValueError:
        status = AttendanceStatus.ABSENT

    arrival = ON_TIME
    if isinstance(raw.get("time"), str) and raw["time"].strip():
        try:
            arrival = parse_hhmm(raw["time"])
        except ValueError:
            logger.warning("Ignoring malformed arrival time %r", raw["time"])

    return AttendanceRecord(status=status, arrival_time=arrival)


def _worker_from_payload(raw: Any) -> Worker:
    if not isinstance(raw, dict):
        logger.warning("Replacing malformed worker entry %r", raw)
        return Worker(name=UNNAMED_WORKER)

    name = raw.get("name")
    if not isinstance(name, str) or not name:
        name = UNNAMED_WORKER

    raw_records = raw.get("records")
    if not isinstance(raw_records, dict):
        raw_records = {}

    records = {}
    for key, value in raw_records.items():
        try:
            on = parse_iso_date(str(key))
        except ValueError:
            logger.warning("Dropping record with malformed date %r for worker %r", key, name)
            continue
        records[on] = _record_from_payload(value)

    return Worker(name=name, records=records)


def roster_from_payload(payload: Any) -> Roster:
    if not isinstance(payload, list):
        if payload is not None:
            logger.warning("Stored roster is not a list; starting empty")
        return ()
    return tuple(_worker_from_payload(item) for item in payload)
