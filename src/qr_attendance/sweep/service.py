from __future__ import annotations

import logging
from dataclasses import dataclass

from ..attendance.service import AttendanceLedger
from ..core.enums import AbsenceOutcome
from ..students.service import StudentService
from ..subjects.service import SubjectService

logger = logging.getLogger(__name__)


@dataclass
class SweepReport:
    work_date: str
    recorded: int = 0
    already_absent: int = 0
    no_penalty: int = 0
    failed: int = 0

    @property
    def pairs(self) -> int:
        return self.recorded + self.already_absent + self.no_penalty + self.failed

    def to_dict(self) -> dict:
        return {
            "date": self.work_date,
            "recorded": self.recorded,
            "alreadyAbsent": self.already_absent,
            "noPenalty": self.no_penalty,
            "failed": self.failed,
        }


class DailyPenaltySweep:
    """Give every student an absence for every subject they did not scan today.

    Each (student, subject) pair is independent: a failing write is logged and
    counted, and the loop moves on to the next pair.
    """

    def __init__(self, students: StudentService, subjects: SubjectService, ledger: AttendanceLedger):
        self._students = students
        self._subjects = subjects
        self._ledger = ledger

    def run(self, *, today: str | None = None) -> SweepReport:
        today = today or self._ledger.day_policy.today()
        students = list(self._students.list_all())
        subjects = list(self._subjects.list_all())
        report = SweepReport(work_date=today)

        logger.info("Running daily attendance decrement for %s (%d students x %d subjects)",
                    today, len(students), len(subjects))

        for student in students:
            for subject in subjects:
                try:
                    result = self._ledger.record_absence_if_missing(student.reg_number, subject.name, today=today)
                except Exception:
                    report.failed += 1
                    logger.exception("Absence penalty failed for %s / %s on %s", student.reg_number, subject.name, today)
                    continue

                if result.outcome == AbsenceOutcome.RECORDED:
                    report.recorded += 1
                elif result.outcome == AbsenceOutcome.ALREADY_ABSENT:
                    report.already_absent += 1
                else:
                    report.no_penalty += 1

        logger.info(
            "Daily decrement complete for %s: recorded=%d already_absent=%d no_penalty=%d failed=%d",
            today, report.recorded, report.already_absent, report.no_penalty, report.failed,
        )
        return report
