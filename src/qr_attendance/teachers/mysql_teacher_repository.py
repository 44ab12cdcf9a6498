from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Teacher
from .repository import TeacherRepository


def _to_teacher(row: dict) -> Teacher:
    return Teacher(
        teacher_id=int(row["teacher_id"]),
        email=row["email"],
        password_hash=row["password_hash"],
    )


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT teacher_id, email, password_hash FROM teachers WHERE teacher_id=%s",
                (int(teacher_id),),
            )
            row = fetchone(cur)
            return _to_teacher(row) if row else None

    def get_by_email(self, email: str) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT teacher_id, email, password_hash FROM teachers WHERE email=%s",
                (email,),
            )
            row = fetchone(cur)
            return _to_teacher(row) if row else None

    def create(self, *, email: str, password_hash: str) -> Teacher:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO teachers(email, password_hash) VALUES(%s,%s)",
                (email, password_hash),
            )
            return Teacher(teacher_id=int(cur.lastrowid), email=email, password_hash=password_hash)

    def add_token(self, teacher_id: int, token: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO teacher_tokens(teacher_id, token) VALUES(%s,%s)",
                (int(teacher_id), token),
            )

    def has_token(self, teacher_id: int, token: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS found FROM teacher_tokens WHERE teacher_id=%s AND token=%s",
                (int(teacher_id), token),
            )
            return fetchone(cur) is not None

    def remove_token(self, teacher_id: int, token: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM teacher_tokens WHERE teacher_id=%s AND token=%s",
                (int(teacher_id), token),
            )
            return cur.rowcount > 0
