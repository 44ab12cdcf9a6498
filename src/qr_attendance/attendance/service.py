from __future__ import annotations

import logging
from datetime import datetime
from typing import List

from ..common.datetime_utils import CalendarDayPolicy, now_utc
from ..common.validators import require_max_length, require_non_empty
from ..core.constants import ABSENT_SCORE_CHANGE, PRESENT_SCORE_CHANGE, REG_NUMBER_MAX_LENGTH, SUBJECT_MAX_LENGTH
from ..core.enums import AbsenceOutcome, MarkOutcome
from ..core.exceptions import StoreError
from ..qr_sessions.service import QrSessionService
from .model import AbsenceResult, AttendanceRecord, MarkResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _require_key(reg_number: str, subject: str) -> tuple[str, str]:
    reg_number = require_non_empty(reg_number, "Registration number")
    subject = require_non_empty(subject, "Subject")
    return (
        require_max_length(reg_number, "Registration number", REG_NUMBER_MAX_LENGTH),
        require_max_length(subject, "Subject", SUBJECT_MAX_LENGTH),
    )


class AttendanceLedger:
    """Per (student, subject, day) attendance with idempotent transitions.

    Transitions for one key:

    - nothing -> present (+1) on a scan with a valid QR
    - nothing -> absent (-3) from the sweep or a manual decrement
    - absent -> present (+1) on a later scan; the penalty is replaced, not summed
    - present is terminal for the day
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        qr_sessions: QrSessionService,
        *,
        day_policy: CalendarDayPolicy | None = None,
    ):
        self._attendance = attendance
        self._qr_sessions = qr_sessions
        self._day_policy = day_policy or CalendarDayPolicy()

    @property
    def day_policy(self) -> CalendarDayPolicy:
        return self._day_policy

    def mark_present(self, reg_number: str, subject: str, qr_id: str, *, now: datetime | None = None) -> MarkResult:
        reg_number, subject = _require_key(reg_number, subject)
        now = now or now_utc()
        # InvalidQrError / ExpiredQrError propagate; nothing is written.
        self._qr_sessions.validate(qr_id, now=now)

        today = self._day_policy.day_of(now)
        existing = self._attendance.get(reg_number, subject, today)
        if existing and existing.is_present:
            return MarkResult(outcome=MarkOutcome.ALREADY_MARKED, record=existing)

        record = self._attendance.upsert_present(
            reg_number=reg_number,
            subject=subject,
            work_date=today,
            score_change=PRESENT_SCORE_CHANGE,
        )
        if existing:
            logger.info("Upgraded absence to present: %s %s %s", reg_number, subject, today)
        return MarkResult(outcome=MarkOutcome.MARKED, record=record)

    def record_absence_if_missing(self, reg_number: str, subject: str, *, today: str | None = None) -> AbsenceResult:
        reg_number, subject = _require_key(reg_number, subject)
        today = today or self._day_policy.today()

        existing = self._attendance.get(reg_number, subject, today)
        if existing is None:
            created = self._attendance.insert_absent_if_missing(
                reg_number=reg_number,
                subject=subject,
                work_date=today,
                score_change=ABSENT_SCORE_CHANGE,
            )
            existing = self._attendance.get(reg_number, subject, today)
            if existing is None:
                raise StoreError(f"No attendance record for {reg_number}/{subject}/{today} after insert")
            if created:
                return AbsenceResult(outcome=AbsenceOutcome.RECORDED, record=existing)
            # lost the race to a concurrent writer; report what it wrote

        if existing.is_present:
            return AbsenceResult(outcome=AbsenceOutcome.NO_PENALTY, record=existing)
        return AbsenceResult(outcome=AbsenceOutcome.ALREADY_ABSENT, record=existing)

    def history(self, reg_number: str) -> List[AttendanceRecord]:
        reg_number = require_non_empty(reg_number, "Registration number")
        return list(self._attendance.list_for_student(reg_number))
