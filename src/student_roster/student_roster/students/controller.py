from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import error_response, json_body, student_payload
from ..common.validators import require_identifier, require_non_empty, require_text
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Student


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        students = roster.get_all_students()
        return jsonify({"success": True, "students": [student_payload(s) for s in students]})

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    def add_student():
        try:
            data = json_body()
            student = Student(
                student_id=require_identifier(data.get("student_id"), "Student ID"),
                name=require_non_empty(data.get("name"), "Name"),
                email=require_text(data.get("email"), "Email"),
                class_name=require_non_empty(data.get("class_name"), "Class"),
            )
        except ValidationError as e:
            return error_response(str(e), 400)

        if not roster.add_student(student):
            return error_response(f"Student with ID {student.student_id} already exists", 409)

        return jsonify({"success": True, "student": student_payload(student)}), 201

    @app.route("/api/students/search", methods=["GET"], endpoint="search_students")
    def search_students():
        query = request.args.get("q", "")
        results = roster.search_students(query)
        return jsonify({"success": True, "query": query, "students": [student_payload(s) for s in results]})

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: str):
        student = roster.get_student_by_id(student_id)
        if student is None:
            return error_response("Student not found", 404)
        return jsonify({"success": True, "student": student_payload(student)})

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="remove_student")
    def remove_student(student_id: str):
        if not roster.remove_student(student_id):
            return error_response("Student not found", 404)
        return jsonify({"success": True, "message": "Student removed"})

    @app.route("/api/classes", methods=["GET"], endpoint="list_classes")
    def list_classes():
        return jsonify({"success": True, "classes": sorted(roster.get_all_classes())})

    @app.route("/api/classes/<class_name>/students", methods=["GET"], endpoint="class_students")
    def class_students(class_name: str):
        members = roster.get_students_by_class(class_name)
        return jsonify({"success": True, "class_name": class_name, "students": [student_payload(s) for s in members]})
