from __future__ import annotations

from flask import Flask, current_app, jsonify

from ..common.http import json_body, make_teacher_required
from ..common.validators import require_fields
from ..container import Container
from ..core.enums import AbsenceOutcome, MarkOutcome

_MARK_MESSAGES = {
    MarkOutcome.MARKED: "Attendance marked (+1)",
    MarkOutcome.ALREADY_MARKED: "Already marked present today",
}

_ABSENCE_MESSAGES = {
    AbsenceOutcome.RECORDED: "Absent recorded (-3)",
    AbsenceOutcome.ALREADY_ABSENT: "Already absent today",
    AbsenceOutcome.NO_PENALTY: "Present, no penalty",
}


def register(app: Flask, container: Container) -> None:
    teacher_required = make_teacher_required(container.teacher_auth_service)

    @app.route("/attendance/session", methods=["POST"], endpoint="create_qr_session")
    @teacher_required
    def create_qr_session():
        (subject,) = require_fields(json_body(), "subject", message="Subject required")
        session = container.qr_session_service.create_session(subject)

        body = {
            "message": "QR session created",
            "qrId": session.qr_id,
            "expiresAt": session.expires_at.isoformat(),
        }
        if current_app.config.get("QR_RENDER_IMAGE"):
            body["qrImage"] = container.qr_session_service.render_png_base64(session.qr_id)
        return jsonify(body), 201

    @app.route("/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        reg_number, subject, qr_id = require_fields(
            json_body(), "regNumber", "subject", "qrId", message="Missing data",
        )
        result = container.attendance_ledger.mark_present(reg_number, subject, qr_id)

        body = {"message": _MARK_MESSAGES[result.outcome], "outcome": result.outcome.value}
        if result.outcome == MarkOutcome.MARKED:
            body["record"] = result.record.to_dict()
        return jsonify(body)

    @app.route("/attendance/<reg_number>", methods=["GET"], endpoint="attendance_history")
    def attendance_history(reg_number: str):
        records = container.attendance_ledger.history(reg_number)
        return jsonify({"records": [r.to_dict() for r in records]})

    @app.route("/attendance/decrement", methods=["POST"], endpoint="decrement_attendance")
    def decrement_attendance():
        reg_number, subject = require_fields(json_body(), "regNumber", "subject", message="Missing data")
        result = container.attendance_ledger.record_absence_if_missing(reg_number, subject)
        return jsonify({
            "message": _ABSENCE_MESSAGES[result.outcome],
            "outcome": result.outcome.value,
            "record": result.record.to_dict(),
        })
