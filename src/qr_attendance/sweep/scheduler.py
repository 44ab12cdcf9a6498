from __future__ import annotations

import logging

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from ..core.constants import SWEEP_HOUR, SWEEP_MINUTE
from .service import DailyPenaltySweep

logger = logging.getLogger(__name__)

JOB_ID = "daily-penalty-sweep"


def build_scheduler(
    sweep: DailyPenaltySweep,
    *,
    timezone,
    hour: int = SWEEP_HOUR,
    minute: int = SWEEP_MINUTE,
) -> BackgroundScheduler:
    """Daily cron trigger for the sweep.

    A run missed while the process was down is not replayed later.
    """
    scheduler = BackgroundScheduler(timezone=timezone)
    scheduler.add_job(
        sweep.run,
        trigger=CronTrigger(hour=int(hour), minute=int(minute), timezone=timezone),
        id=JOB_ID,
        replace_existing=True,
        coalesce=True,
        max_instances=1,
        misfire_grace_time=60,
    )
    return scheduler


def start_scheduler(sweep: DailyPenaltySweep, *, timezone, hour: int = SWEEP_HOUR, minute: int = SWEEP_MINUTE) -> BackgroundScheduler:
    scheduler = build_scheduler(sweep, timezone=timezone, hour=hour, minute=minute)
    scheduler.start()
    logger.info("Scheduled daily penalty sweep at %02d:%02d (%s)", int(hour), int(minute), timezone)
    return scheduler
