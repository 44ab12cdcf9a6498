from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AbsenceOutcome, AttendanceStatus, MarkOutcome


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance for one subject on one day.

    At most one record exists per (reg_number, subject, work_date).
    """

    reg_number: str
    subject: str
    work_date: str
    status: AttendanceStatus
    score_change: int
    attendance_id: Optional[int] = None

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT

    def to_dict(self) -> dict:
        return {
            "regNumber": self.reg_number,
            "subject": self.subject,
            "date": self.work_date,
            "status": self.status.value,
            "scoreChange": self.score_change,
        }


@dataclass(frozen=True)
class MarkResult:
    outcome: MarkOutcome
    record: AttendanceRecord


@dataclass(frozen=True)
class AbsenceResult:
    outcome: AbsenceOutcome
    record: AttendanceRecord
