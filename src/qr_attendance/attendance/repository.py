from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Ledger storage. Implementations must enforce a unique key on
    (reg_number, subject, work_date); the service relies on it under races."""

    def get(self, reg_number: str, subject: str, work_date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert_present(self, *, reg_number: str, subject: str, work_date: str, score_change: int) -> AttendanceRecord:
        """Insert a present record or overwrite the existing row for the key."""
        raise NotImplementedError

    def insert_absent_if_missing(self, *, reg_number: str, subject: str, work_date: str, score_change: int) -> bool:
        """Insert an absent record; return False (and write nothing) if the key exists."""
        raise NotImplementedError

    def list_for_student(self, reg_number: str) -> Sequence[AttendanceRecord]:
        """All records of a student, newest day first."""
        raise NotImplementedError
