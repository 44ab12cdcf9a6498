from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..common.validators import require_fields
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/student/register", methods=["POST"], endpoint="student_register")
    def student_register():
        data = json_body()
        require_fields(data, "regNumber", "password", message="Missing registration number or password")
        container.student_service.register(data["regNumber"], data["password"])
        return jsonify({"message": "Student registered successfully"}), 201

    @app.route("/student/login", methods=["POST"], endpoint="student_login")
    def student_login():
        data = json_body()
        require_fields(data, "regNumber", "password", message="Missing registration number or password")
        # identity check only: no credential is handed out to students
        student = container.student_service.login(data["regNumber"], data["password"])
        return jsonify({"message": "Login successful", "student": {"regNumber": student.reg_number}})
