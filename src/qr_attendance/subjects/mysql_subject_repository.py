from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Subject
from .repository import SubjectRepository


class MySQLSubjectRepository(SubjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, name: str, teacher_email: str) -> Subject:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO subjects(name, teacher_email) VALUES(%s,%s)",
                (name, teacher_email),
            )
            return Subject(subject_id=int(cur.lastrowid), name=name, teacher_email=teacher_email)

    def list_for_teacher(self, teacher_email: str) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT subject_id, name, teacher_email
                FROM subjects
                WHERE teacher_email=%s
                ORDER BY subject_id
                """,
                (teacher_email,),
            )
            return [self._to_subject(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT subject_id, name, teacher_email FROM subjects ORDER BY subject_id")
            return [self._to_subject(r) for r in fetchall(cur)]

    @staticmethod
    def _to_subject(row: dict) -> Subject:
        return Subject(subject_id=int(row["subject_id"]), name=row["name"], teacher_email=row["teacher_email"])
