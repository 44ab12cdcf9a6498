from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import json_body, make_teacher_required
from ..common.validators import require_fields
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth = container.teacher_auth_service
    teacher_required = make_teacher_required(auth)

    @app.route("/register", methods=["POST"], endpoint="teacher_register")
    def teacher_register():
        data = json_body()
        require_fields(data, "email", "password", message="Email and password required")
        issued = auth.register(data["email"], data["password"])
        return jsonify({
            "message": "Teacher registered",
            "token": issued.token,
            "teacher": {"email": issued.teacher.email},
        }), 201

    @app.route("/login", methods=["POST"], endpoint="teacher_login")
    def teacher_login():
        data = json_body()
        require_fields(data, "email", "password", message="Email and password required")
        issued = auth.login(data["email"], data["password"])
        return jsonify({
            "message": "Login successful",
            "token": issued.token,
            "teacher": {"email": issued.teacher.email},
        })

    @app.route("/logout", methods=["POST"], endpoint="teacher_logout")
    @teacher_required
    def teacher_logout():
        auth.logout(g.teacher, g.token)
        return jsonify({"message": "Logout successful"})
