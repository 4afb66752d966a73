from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_hhmm, format_iso_date, parse_iso_date, today_local
from ..core.exceptions import ValidationError
from ..container import Container
from .codec import roster_to_payload


def register(app: Flask, container: Container) -> None:
    book = container.attendance_book

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _date_arg(value: str | None) -> date:
        if not value:
            return today_local()
        try:
            return parse_iso_date(str(value))
        except ValueError:
            raise ValidationError(f"Invalid date {value!r} (expected YYYY-MM-DD)")

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _roster_response(status: int = 200):
        return jsonify({"success": True, "workers": roster_to_payload(book.roster)}), status

    @app.route("/api/workers", methods=["GET"], endpoint="list_workers")
    def list_workers():
        return _roster_response()

    @app.route("/api/workers", methods=["POST"], endpoint="add_worker")
    def add_worker():
        data = _json_body()
        name = data.get("name")
        book.add_worker(name if isinstance(name, str) else "")
        return _roster_response(201)

    @app.route("/api/workers/<int:index>", methods=["DELETE"], endpoint="remove_worker")
    def remove_worker(index: int):
        book.remove_worker(index)
        return _roster_response()

    @app.route("/api/workers/<int:index>/toggle", methods=["POST"], endpoint="toggle_worker")
    def toggle_worker(index: int):
        data = _json_body()
        book.set_status(index, _date_arg(data.get("date")))
        return _roster_response()

    @app.route("/api/workers/<int:index>/time", methods=["PUT"], endpoint="set_worker_time")
    def set_worker_time(index: int):
        data = _json_body()
        arrival = data.get("time")
        if not isinstance(arrival, str):
            return _error("Missing time (HH:MM)", 400)
        book.set_arrival_time(index, _date_arg(data.get("date")), arrival)
        return _roster_response()

    @app.route("/api/attendance", methods=["GET"], endpoint="daily_attendance")
    def daily_attendance():
        on = _date_arg(request.args.get("date"))
        rows = [
            {
                "index": r.index,
                "name": r.name,
                "status": r.status.value,
                "time": format_hhmm(r.arrival_time),
                "is_late": r.is_late,
            }
            for r in book.daily_sheet(on)
        ]
        return jsonify({"success": True, "date": format_iso_date(on), "rows": rows})
