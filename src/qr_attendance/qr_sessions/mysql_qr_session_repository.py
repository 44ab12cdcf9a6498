from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import as_utc
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import QrSession
from .repository import QrSessionRepository


def _naive_utc(value):
    return as_utc(value).replace(tzinfo=None)


class MySQLQrSessionRepository(QrSessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, session: QrSession) -> QrSession:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO qr_sessions(subject, qr_id, created_at, expires_at)
                VALUES(%s,%s,%s,%s)
                """,
                (session.subject, session.qr_id, _naive_utc(session.created_at), _naive_utc(session.expires_at)),
            )
            return replace(session, session_id=int(cur.lastrowid))

    def get_by_qr_id(self, qr_id: str) -> Optional[QrSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT session_id, subject, qr_id, created_at, expires_at
                FROM qr_sessions
                WHERE qr_id=%s
                """,
                (qr_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return QrSession(
                session_id=int(r["session_id"]),
                subject=r["subject"],
                qr_id=r["qr_id"],
                created_at=as_utc(r["created_at"]),
                expires_at=as_utc(r["expires_at"]),
            )
