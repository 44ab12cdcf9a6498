from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import StoreError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, reg_number, subject, work_date, status, score_change"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        reg_number=r["reg_number"],
        subject=r["subject"],
        work_date=str(r["work_date"]),
        status=AttendanceStatus(r["status"]),
        score_change=int(r["score_change"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, reg_number: str, subject: str, work_date: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE reg_number=%s AND subject=%s AND work_date=%s
                """,
                (reg_number, subject, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert_present(self, *, reg_number: str, subject: str, work_date: str, score_change: int) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(reg_number, subject, work_date, status, score_change)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), score_change=VALUES(score_change)
                """,
                (reg_number, subject, work_date, AttendanceStatus.PRESENT.value, int(score_change)),
            )
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE reg_number=%s AND subject=%s AND work_date=%s
                """,
                (reg_number, subject, work_date),
            )
            r = fetchone(cur)
            if not r:
                raise StoreError("Attendance record vanished after upsert")
            return _to_record(r)

    def insert_absent_if_missing(self, *, reg_number: str, subject: str, work_date: str, score_change: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT IGNORE INTO attendance_records(reg_number, subject, work_date, status, score_change)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (reg_number, subject, work_date, AttendanceStatus.ABSENT.value, int(score_change)),
            )
            return cur.rowcount > 0

    def list_for_student(self, reg_number: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE reg_number=%s
                ORDER BY work_date DESC, subject ASC
                """,
                (reg_number,),
            )
            return [_to_record(r) for r in fetchall(cur)]
