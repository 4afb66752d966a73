from __future__ import annotations

import json

import pytest

from labour_attendance.core.constants import STORAGE_KEY
from labour_attendance.main import create_app


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"DATA_FILE": str(tmp_path / "attendance.json"), "STORAGE_KEY": STORAGE_KEY})
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def test_add_toggle_and_report(client, app):
    assert client.post("/api/workers", json={"name": "Asha"}).status_code == 201
    client.post("/api/workers/0/toggle", json={"date": "2024-01-03"})
    client.post("/api/workers/0/toggle", json={"date": "2024-01-04"})
    client.put("/api/workers/0/time", json={"date": "2024-01-04", "time": "10:30"})

    resp = client.get("/api/reports/stats?start=2024-01-01&end=2024-01-07")
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["working_days"] == 6
    assert body["sundays"] == 1
    assert body["stats"] == [
        {"name": "Asha", "present": 2, "absent": 4, "late": 1, "working_days": 6, "sundays": 1}
    ]

    with open(app.config["DATA_FILE"], encoding="utf-8") as f:
        stored = json.load(f)[STORAGE_KEY]
    assert stored[0]["records"]["2024-01-04"] == {"status": "Present", "time": "10:30"}


def test_duplicate_worker_rejected(client):
    client.post("/api/workers", json={"name": "Asha"})
    resp = client.post("/api/workers", json={"name": " Asha "})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert len(client.get("/api/workers").get_json()["workers"]) == 1


def test_empty_worker_name_rejected(client):
    assert client.post("/api/workers", json={"name": "   "}).status_code == 400


def test_remove_unknown_worker_is_404(client):
    assert client.delete("/api/workers/3").status_code == 404


def test_daily_attendance(client):
    client.post("/api/workers", json={"name": "Asha"})
    client.put("/api/workers/0/time", json={"date": "2024-01-03", "time": "09:20"})

    body = client.get("/api/attendance?date=2024-01-03").get_json()

    assert body["rows"] == [{"index": 0, "name": "Asha", "status": "Absent", "time": "09:20", "is_late": True}]


def test_invalid_range_rejected(client):
    resp = client.get("/api/reports/stats?start=2024-01-07&end=2024-01-01")
    assert resp.status_code == 400


def test_pdf_download(client):
    client.post("/api/workers", json={"name": "Asha"})

    resp = client.get("/api/reports/pdf?start=2024-01-01&end=2024-01-07")

    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert "attendance_2024-01-01_to_2024-01-07.pdf" in resp.headers["Content-Disposition"]
    assert resp.data.startswith(b"%PDF")


@pytest.mark.parametrize("payload", [["Asha"], "Asha", 3])
def test_non_object_body_rejected(client, payload):
    client.post("/api/workers", json={"name": "Asha"})

    assert client.post("/api/workers", json=payload).status_code == 400
    assert client.post("/api/workers/0/toggle", json=payload).status_code == 400
    assert client.put("/api/workers/0/time", json=payload).status_code == 400
    assert len(client.get("/api/workers").get_json()["workers"]) == 1


def test_stats_on_last_calendar_day(client):
    resp = client.get("/api/reports/stats?start=9999-12-31&end=9999-12-31")

    assert resp.status_code == 200
    assert resp.get_json()["total_days"] == 1
