from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status stored for one (student, subject, day) record."""

    PRESENT = "present"
    ABSENT = "absent"


class MarkOutcome(str, Enum):
    """Result of a QR scan against the ledger."""

    MARKED = "MARKED"
    ALREADY_MARKED = "ALREADY_MARKED"


class AbsenceOutcome(str, Enum):
    """Result of an absence penalty attempt."""

    RECORDED = "RECORDED"
    ALREADY_ABSENT = "ALREADY_ABSENT"
    NO_PENALTY = "NO_PENALTY"
