from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_reg_number(self, reg_number: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT student_id, reg_number, password_hash FROM students WHERE reg_number=%s",
                (reg_number,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Student(
                student_id=int(row["student_id"]),
                reg_number=row["reg_number"],
                password_hash=row["password_hash"],
            )

    def create(self, *, reg_number: str, password_hash: str) -> Student:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO students(reg_number, password_hash) VALUES(%s,%s)",
                (reg_number, password_hash),
            )
            return Student(student_id=int(cur.lastrowid), reg_number=reg_number, password_hash=password_hash)

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT student_id, reg_number, password_hash FROM students ORDER BY student_id")
            return [
                Student(
                    student_id=int(r["student_id"]),
                    reg_number=r["reg_number"],
                    password_hash=r["password_hash"],
                )
                for r in fetchall(cur)
            ]
