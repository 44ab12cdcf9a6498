from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import json_body, make_teacher_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    teacher_required = make_teacher_required(container.teacher_auth_service)

    @app.route("/subjects", methods=["GET"], endpoint="list_subjects")
    @teacher_required
    def list_subjects():
        subjects = container.subject_service.list_for_teacher(g.teacher)
        return jsonify({"subjects": [s.to_dict() for s in subjects]})

    @app.route("/subjects", methods=["POST"], endpoint="create_subject")
    @teacher_required
    def create_subject():
        subject = container.subject_service.create(g.teacher, json_body().get("name"))
        return jsonify({"message": "Subject added", "subject": subject.to_dict()}), 201
