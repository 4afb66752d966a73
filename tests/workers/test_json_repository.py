from __future__ import annotations

import json
from datetime import date, time

from labour_attendance.core.constants import STORAGE_KEY, UNNAMED_WORKER
from labour_attendance.core.enums import AttendanceStatus
from labour_attendance.workers.codec import roster_from_payload, roster_to_payload
from labour_attendance.workers.json_repository import JsonFileRosterRepository
from labour_attendance.workers.service import add_worker, set_arrival_time, set_status


def test_payload_shape():
    roster = add_worker((), "Asha")
    roster = set_status(roster, 0, date(2024, 1, 3))
    roster = set_arrival_time(roster, 0, date(2024, 1, 4), "10:30")

    assert roster_to_payload(roster) == [
        {
            "name": "Asha",
            "records": {
                "2024-01-03": {"status": "Present", "time": "09:00"},
                "2024-01-04": {"status": "Absent", "time": "10:30"},
            },
        }
    ]


def test_load_repairs_malformed_entries():
    payload = [
        {"name": "Asha", "records": {"2024-01-03": {"status": "Present", "time": "10:30"}}},
        {"records": "oops"},
        "garbage",
        {"name": "", "records": None},
        {"name": "Ravi", "records": {"bad-date": {"status": "Present"}, "2024-01-05": {"status": "Maybe", "time": "xx"}}},
    ]

    roster = roster_from_payload(payload)

    assert [w.name for w in roster] == ["Asha", UNNAMED_WORKER, UNNAMED_WORKER, UNNAMED_WORKER, "Ravi"]
    assert roster[0].records[date(2024, 1, 3)].arrival_time == time(10, 30)
    assert dict(roster[1].records) == {}
    ravi = roster[4].records
    assert list(ravi) == [date(2024, 1, 5)]
    assert ravi[date(2024, 1, 5)].status == AttendanceStatus.ABSENT
    assert ravi[date(2024, 1, 5)].arrival_time == time(9, 0)


def test_non_list_payload_loads_empty():
    assert roster_from_payload({"name": "Asha"}) == ()
    assert roster_from_payload(None) == ()


def test_missing_file_loads_empty(tmp_path):
    repo = JsonFileRosterRepository(tmp_path / "nope.json")
    assert repo.load() == ()


def test_invalid_json_loads_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")

    assert JsonFileRosterRepository(path).load() == ()


def test_save_then_load(tmp_path):
    path = tmp_path / "data" / "store.json"
    repo = JsonFileRosterRepository(path)
    roster = set_status(add_worker((), "Asha"), 0, date(2024, 1, 3))

    repo.save(roster)
    loaded = JsonFileRosterRepository(path).load()

    assert [w.name for w in loaded] == ["Asha"]
    assert loaded[0].records[date(2024, 1, 3)].status == AttendanceStatus.PRESENT


def test_save_keeps_other_keys(tmp_path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

    JsonFileRosterRepository(path).save(add_worker((), "Asha"))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["theme"] == "dark"
    assert data[STORAGE_KEY][0]["name"] == "Asha"
