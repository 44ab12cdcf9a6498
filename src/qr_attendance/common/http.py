from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthenticationError, DomainError
from ..teachers.service import TeacherAuthService

logger = logging.getLogger(__name__)


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    if not header.startswith("Bearer "):
        raise AuthenticationError("No token provided")
    return header[len("Bearer "):].strip()


def make_teacher_required(auth_service: TeacherAuthService):
    """Build a view decorator that resolves the bearer token into ``g.teacher``."""

    def teacher_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = bearer_token()
            g.teacher = auth_service.authenticate(token)
            g.token = token
            return view(*args, **kwargs)

        return wrapper

    return teacher_required


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"message": str(e)}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if app.config.get("DEBUG"):
            return jsonify({"message": f"Server error: {e}"}), 500
        return jsonify({"message": "Server error"}), 500
