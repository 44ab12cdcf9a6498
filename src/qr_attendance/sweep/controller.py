from __future__ import annotations

import click
from flask import Flask

from ..common.datetime_utils import parse_iso_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.cli.command("sweep-absences")
    @click.option("--date", "day", default=None, help="Calendar day (YYYY-MM-DD); defaults to today.")
    def sweep_absences(day: str | None):
        """Run the daily absence penalty sweep now."""
        if day:
            day = parse_iso_date(day).isoformat()
        report = container.penalty_sweep.run(today=day)
        click.echo(" ".join(f"{key}={value}" for key, value in report.to_dict().items()))
