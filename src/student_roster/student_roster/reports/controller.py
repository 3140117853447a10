from __future__ import annotations

import csv
import io
from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.api import error_response
from ..common.validators import require_date
from ..container import Container
from ..core.exceptions import ValidationError

CSV_FIELDS = [
    "student_id",
    "name",
    "email",
    "class_name",
    "total_classes",
    "present_classes",
    "absent_classes",
    "attendance_percentage",
]


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service
    reports = container.report_service

    def _text(body: str, status: int = 200):
        return app.response_class(body, status=status, mimetype="text/plain")

    def _today_arg():
        value = request.args.get("today")
        return require_date(value) if value else None

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"ok": True, "students": len(roster.get_all_students())})

    @app.route("/api/stats", methods=["GET"], endpoint="stats")
    def stats():
        try:
            data = reports.stats(_today_arg())
        except ValidationError as e:
            return error_response(str(e), 400)
        return jsonify({"success": True, **asdict(data)})

    @app.route("/api/reports/student/<student_id>", methods=["GET"], endpoint="student_report")
    def student_report(student_id: str):
        status = 200 if roster.get_student_by_id(student_id) else 404
        return _text(reports.individual_report(student_id), status)

    @app.route("/api/reports/class/<class_name>", methods=["GET"], endpoint="class_report")
    def class_report(class_name: str):
        status = 200 if roster.get_students_by_class(class_name) else 404
        return _text(reports.class_report(class_name), status)

    @app.route("/api/reports/overall", methods=["GET"], endpoint="overall_report")
    def overall_report():
        try:
            return _text(reports.overall_stats(_today_arg()))
        except ValidationError as e:
            return error_response(str(e), 400)

    @app.route("/api/reports/roster.csv", methods=["GET"], endpoint="roster_report_csv")
    def roster_report_csv():
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in reports.summary_rows():
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        filename = f"attendance_roster_{roster.get_current_date().replace('-', '')}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
