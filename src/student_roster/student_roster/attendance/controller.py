from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import error_response, json_body
from ..common.validators import require_bool, require_date, require_non_empty
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    def _date_or_today(value) -> str:
        if value is None or value == "":
            return roster.get_current_date()
        return require_date(value)

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        try:
            data = json_body()
            student_id = require_non_empty(data.get("student_id"), "Student ID")
            date = _date_or_today(data.get("date"))
            present = require_bool(data.get("present"), "present")
        except ValidationError as e:
            return error_response(str(e), 400)

        if not roster.mark_attendance(student_id, date, present):
            return error_response("Student not found", 404)

        return jsonify({"success": True, "student_id": student_id, "date": date, "present": present})

    @app.route("/api/classes/<class_name>/attendance", methods=["POST"], endpoint="mark_class_attendance")
    def mark_class_attendance(class_name: str):
        """Mark a whole class for one date.

        Body is either {"date": ..., "attendance": {"<id>": true, ...}}
        or {"date": ..., "all": true|false} to mark every member the same way.
        Students missing from the map are left untouched.
        """

        if not roster.get_students_by_class(class_name):
            return error_response(f"No students found in class: {class_name}", 404)

        try:
            data = json_body()
            date = _date_or_today(data.get("date"))
            if "all" in data:
                marked = roster.mark_all_for_class(class_name, date, require_bool(data["all"], "all"))
            else:
                attendance_map = data.get("attendance")
                if not isinstance(attendance_map, dict):
                    raise ValidationError("attendance must map student IDs to true/false")
                for sid, value in attendance_map.items():
                    require_bool(value, f"attendance[{sid}]")
                marked = roster.mark_attendance_for_class(class_name, date, attendance_map)
        except ValidationError as e:
            return error_response(str(e), 400)

        return jsonify({"success": True, "class_name": class_name, "date": date, "marked": marked})

    @app.route("/api/attendance/<date>", methods=["GET"], endpoint="attendance_for_date")
    def attendance_for_date(date: str):
        try:
            date = require_date(date)
        except ValidationError as e:
            return error_response(str(e), 400)

        class_name = request.args.get("class")
        if class_name:
            data = roster.get_class_attendance_for_date(class_name, date)
        else:
            data = roster.get_attendance_for_date(date)
        return jsonify({"success": True, "date": date, "class_name": class_name, "attendance": data})

    @app.route("/api/students/<student_id>/attendance", methods=["GET"], endpoint="student_attendance")
    def student_attendance(student_id: str):
        student = roster.get_student_by_id(student_id)
        if student is None:
            return error_response("Student not found", 404)

        date = request.args.get("date")
        payload = {
            "success": True,
            "student_id": student_id,
            "summary": roster.get_attendance_summary(student_id),
            "attendance_percentage": round(student.attendance_percentage(), 1),
        }
        if date:
            try:
                payload["date"] = require_date(date)
            except ValidationError as e:
                return error_response(str(e), 400)
            payload["present"] = roster.get_attendance(student_id, date)
        return jsonify(payload)
