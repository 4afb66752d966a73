from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _range_args():
        start = (request.args.get("start") or "").strip()
        end = (request.args.get("end") or "").strip()
        return start, end

    @app.route("/api/reports/stats", methods=["GET"], endpoint="report_stats")
    def report_stats():
        start, end = _range_args()
        if not start or not end:
            return jsonify({"success": False, "message": "Missing start/end parameters"}), 400

        report = container.report_service.build(container.attendance_book.roster, start, end)
        result = report.result
        return jsonify(
            {
                "success": True,
                "start": result.start,
                "end": result.end,
                "total_days": result.range.total_days,
                "working_days": result.range.working_days,
                "sundays": result.range.sunday_count,
                "stats": [
                    {
                        "name": s.name,
                        "present": s.present_days,
                        "absent": s.absent_days,
                        "late": s.late_days,
                        "working_days": s.working_days,
                        "sundays": s.sunday_count,
                    }
                    for s in result.stats
                ],
            }
        )

    @app.route("/api/reports/pdf", methods=["GET"], endpoint="report_pdf")
    def report_pdf():
        start, end = _range_args()
        if not start or not end:
            return jsonify({"success": False, "message": "Missing start/end parameters"}), 400

        filename, data = container.report_service.export_pdf(container.attendance_book.roster, start, end)
        return send_file(
            io.BytesIO(data),
            mimetype="application/pdf",
            as_attachment=True,
            download_name=filename,
        )
