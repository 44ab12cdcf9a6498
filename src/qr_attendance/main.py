from __future__ import annotations

import importlib
import logging

import click
from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .students.controller import register as register_students
from .subjects.controller import register as register_subjects
from .sweep.controller import register as register_sweep
from .sweep.scheduler import start_scheduler
from .teachers.controller import register as register_teachers

logger = logging.getLogger("qr_attendance")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Container | None = None, *, settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["QR_RENDER_IMAGE"] = bool(getattr(settings, "QR_RENDER_IMAGE", True))

    if container is None:
        container = build_container(
            db_config=db_config,
            jwt_secret=getattr(settings, "JWT_SECRET"),
            jwt_expires_hours=int(getattr(settings, "JWT_EXPIRES_HOURS", 24)),
            timezone_name=getattr(settings, "ATTENDANCE_TIMEZONE", "UTC"),
            qr_ttl_minutes=int(getattr(settings, "QR_TTL_MINUTES", 5)),
        )

        if app.config["DEBUG"]:
            logger.info(
                "settings=%s db=%s@%s:%s/%s",
                settings_module, db_config.get("user"), db_config.get("host"),
                db_config.get("port", 3306), db_config.get("database"),
            )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn)
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    app.extensions["qr_attendance"] = container

    register_error_handlers(app)
    register_teachers(app, container)
    register_subjects(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_sweep(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.cli.command("init-db")
    def init_db():
        """Apply schema.sql to the configured database."""
        if container.conn is None:
            raise click.ClickException("No database connection configured")
        apply_schema(container.conn)
        click.echo(f"OK: tables={len(list_tables(container.conn))}")

    if bool(getattr(settings, "ENABLE_SCHEDULER", False)) and not app.config["TESTING"]:
        app.extensions["qr_attendance_scheduler"] = start_scheduler(
            container.penalty_sweep,
            timezone=container.day_policy.zone,
            hour=int(getattr(settings, "SWEEP_HOUR", 23)),
            minute=int(getattr(settings, "SWEEP_MINUTE", 59)),
        )

    return app
