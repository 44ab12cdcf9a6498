from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceLedger
from .common.datetime_utils import CalendarDayPolicy
from .core.constants import DEFAULT_TIMEZONE, DEFAULT_TOKEN_HOURS, QR_SESSION_TTL_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .qr_sessions.mysql_qr_session_repository import MySQLQrSessionRepository
from .qr_sessions.repository import QrSessionRepository
from .qr_sessions.service import QrSessionService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .subjects.mysql_subject_repository import MySQLSubjectRepository
from .subjects.repository import SubjectRepository
from .subjects.service import SubjectService
from .sweep.service import DailyPenaltySweep
from .teachers.mysql_teacher_repository import MySQLTeacherRepository
from .teachers.repository import TeacherRepository
from .teachers.service import TeacherAuthService
from .teachers.tokens import TokenService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    day_policy: CalendarDayPolicy

    teachers_repo: TeacherRepository
    students_repo: StudentRepository
    subjects_repo: SubjectRepository
    qr_sessions_repo: QrSessionRepository
    attendance_repo: AttendanceRepository

    teacher_auth_service: TeacherAuthService
    student_service: StudentService
    subject_service: SubjectService
    qr_session_service: QrSessionService
    attendance_ledger: AttendanceLedger
    penalty_sweep: DailyPenaltySweep


def assemble_container(
    *,
    teachers_repo: TeacherRepository,
    students_repo: StudentRepository,
    subjects_repo: SubjectRepository,
    qr_sessions_repo: QrSessionRepository,
    attendance_repo: AttendanceRepository,
    jwt_secret: str,
    jwt_expires_hours: int = DEFAULT_TOKEN_HOURS,
    timezone_name: str = DEFAULT_TIMEZONE,
    qr_ttl_minutes: int = QR_SESSION_TTL_MINUTES,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of whatever repositories the caller provides."""
    day_policy = CalendarDayPolicy(timezone_name)

    teacher_auth_service = TeacherAuthService(
        teachers_repo,
        TokenService(jwt_secret, expires_hours=jwt_expires_hours),
    )
    student_service = StudentService(students_repo)
    subject_service = SubjectService(subjects_repo)
    qr_session_service = QrSessionService(qr_sessions_repo, ttl_minutes=qr_ttl_minutes)
    attendance_ledger = AttendanceLedger(attendance_repo, qr_session_service, day_policy=day_policy)
    penalty_sweep = DailyPenaltySweep(student_service, subject_service, attendance_ledger)

    return Container(
        conn=conn,
        day_policy=day_policy,
        teachers_repo=teachers_repo,
        students_repo=students_repo,
        subjects_repo=subjects_repo,
        qr_sessions_repo=qr_sessions_repo,
        attendance_repo=attendance_repo,
        teacher_auth_service=teacher_auth_service,
        student_service=student_service,
        subject_service=subject_service,
        qr_session_service=qr_session_service,
        attendance_ledger=attendance_ledger,
        penalty_sweep=penalty_sweep,
    )


def build_container(*, db_config: dict, **options) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return assemble_container(
        conn=conn,
        teachers_repo=MySQLTeacherRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        subjects_repo=MySQLSubjectRepository(conn),
        qr_sessions_repo=MySQLQrSessionRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        **options,
    )
