from __future__ import annotations

from flask import jsonify, request

from ..core.exceptions import ValidationError
from ..students.model import Student


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def student_payload(student: Student) -> dict:
    data = student.to_dict()
    data["attendance_percentage"] = round(student.attendance_percentage(), 1)
    return data
