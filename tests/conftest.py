from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

import pytest

from qr_attendance.attendance.model import AttendanceRecord
from qr_attendance.container import assemble_container
from qr_attendance.core.enums import AttendanceStatus
from qr_attendance.core.exceptions import DuplicateError
from qr_attendance.qr_sessions.model import QrSession
from qr_attendance.students.model import Student
from qr_attendance.subjects.model import Subject
from qr_attendance.teachers.model import Teacher


class InMemoryTeachers:
    def __init__(self):
        self._by_id: dict[int, Teacher] = {}
        self._tokens: dict[int, set[str]] = {}

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        return self._by_id.get(teacher_id)

    def get_by_email(self, email: str) -> Optional[Teacher]:
        return next((t for t in self._by_id.values() if t.email == email), None)

    def create(self, *, email: str, password_hash: str) -> Teacher:
        if self.get_by_email(email):
            raise DuplicateError("Record already exists")
        teacher = Teacher(teacher_id=len(self._by_id) + 1, email=email, password_hash=password_hash)
        self._by_id[teacher.teacher_id] = teacher
        self._tokens[teacher.teacher_id] = set()
        return teacher

    def add_token(self, teacher_id: int, token: str) -> None:
        self._tokens[teacher_id].add(token)

    def has_token(self, teacher_id: int, token: str) -> bool:
        return token in self._tokens.get(teacher_id, set())

    def remove_token(self, teacher_id: int, token: str) -> bool:
        tokens = self._tokens.get(teacher_id, set())
        if token in tokens:
            tokens.discard(token)
            return True
        return False

    def tokens_of(self, teacher_id: int) -> set[str]:
        return set(self._tokens.get(teacher_id, set()))


class InMemoryStudents:
    def __init__(self):
        self._by_reg: dict[str, Student] = {}

    def get_by_reg_number(self, reg_number: str) -> Optional[Student]:
        return self._by_reg.get(reg_number)

    def create(self, *, reg_number: str, password_hash: str) -> Student:
        if reg_number in self._by_reg:
            raise DuplicateError("Record already exists")
        student = Student(student_id=len(self._by_reg) + 1, reg_number=reg_number, password_hash=password_hash)
        self._by_reg[reg_number] = student
        return student

    def list_all(self):
        return list(self._by_reg.values())


class InMemorySubjects:
    def __init__(self):
        self._items: list[Subject] = []

    def create(self, *, name: str, teacher_email: str) -> Subject:
        subject = Subject(subject_id=len(self._items) + 1, name=name, teacher_email=teacher_email)
        self._items.append(subject)
        return subject

    def list_for_teacher(self, teacher_email: str):
        return [s for s in self._items if s.teacher_email == teacher_email]

    def list_all(self):
        return list(self._items)


class InMemoryQrSessions:
    def __init__(self):
        self._by_qr_id: dict[str, QrSession] = {}

    def create(self, session: QrSession) -> QrSession:
        if session.qr_id in self._by_qr_id:
            raise DuplicateError("Record already exists")
        stored = replace(session, session_id=len(self._by_qr_id) + 1)
        self._by_qr_id[stored.qr_id] = stored
        return stored

    def get_by_qr_id(self, qr_id: str) -> Optional[QrSession]:
        return self._by_qr_id.get(qr_id)


class InMemoryAttendance:
    """Keyed by (reg_number, subject, work_date) like the real unique index."""

    def __init__(self):
        self._by_key: dict[tuple[str, str, str], AttendanceRecord] = {}
        self._id = 0

    def get(self, reg_number: str, subject: str, work_date: str) -> Optional[AttendanceRecord]:
        return self._by_key.get((reg_number, subject, work_date))

    def upsert_present(self, *, reg_number: str, subject: str, work_date: str, score_change: int) -> AttendanceRecord:
        key = (reg_number, subject, work_date)
        existing = self._by_key.get(key)
        if existing:
            record = replace(existing, status=AttendanceStatus.PRESENT, score_change=score_change)
        else:
            self._id += 1
            record = AttendanceRecord(
                attendance_id=self._id,
                reg_number=reg_number,
                subject=subject,
                work_date=work_date,
                status=AttendanceStatus.PRESENT,
                score_change=score_change,
            )
        self._by_key[key] = record
        return record

    def insert_absent_if_missing(self, *, reg_number: str, subject: str, work_date: str, score_change: int) -> bool:
        key = (reg_number, subject, work_date)
        if key in self._by_key:
            return False
        self._id += 1
        self._by_key[key] = AttendanceRecord(
            attendance_id=self._id,
            reg_number=reg_number,
            subject=subject,
            work_date=work_date,
            status=AttendanceStatus.ABSENT,
            score_change=score_change,
        )
        return True

    def list_for_student(self, reg_number: str):
        items = [r for r in self._by_key.values() if r.reg_number == reg_number]
        items.sort(key=lambda r: r.subject)
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items

    def all(self) -> list[AttendanceRecord]:
        return list(self._by_key.values())


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def teachers_repo():
    return InMemoryTeachers()


@pytest.fixture
def students_repo():
    return InMemoryStudents()


@pytest.fixture
def subjects_repo():
    return InMemorySubjects()


@pytest.fixture
def qr_sessions_repo():
    return InMemoryQrSessions()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def container(teachers_repo, students_repo, subjects_repo, qr_sessions_repo, attendance_repo):
    return assemble_container(
        teachers_repo=teachers_repo,
        students_repo=students_repo,
        subjects_repo=subjects_repo,
        qr_sessions_repo=qr_sessions_repo,
        attendance_repo=attendance_repo,
        jwt_secret="test-jwt-secret-0123456789abcdef",
    )


@pytest.fixture
def app(container):
    from qr_attendance.main import create_app

    return create_app(container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
