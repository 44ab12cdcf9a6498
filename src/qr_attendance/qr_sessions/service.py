from __future__ import annotations

import base64
import io
import logging
import secrets
import string
from datetime import datetime, timedelta

import qrcode

from ..common.datetime_utils import as_utc, now_utc
from ..common.validators import require_max_length, require_non_empty
from ..core.constants import QR_ID_SUFFIX_LENGTH, QR_SESSION_TTL_MINUTES, SUBJECT_MAX_LENGTH
from ..core.exceptions import ExpiredQrError, InvalidQrError
from .model import QrSession
from .repository import QrSessionRepository

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase


def make_qr_id(subject: str, now: datetime) -> str:
    """``<subject>-<epoch millis>-<random base36>``, unique with overwhelming probability."""
    millis = int(now.timestamp() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(QR_ID_SUFFIX_LENGTH))
    return f"{subject}-{millis}-{suffix}"


class QrSessionService:
    """Creates and validates time-boxed QR sessions.

    A valid session may be scanned by any number of students; one present
    record per student and day is the ledger's business, not ours.
    """

    def __init__(self, sessions: QrSessionRepository, *, ttl_minutes: int = QR_SESSION_TTL_MINUTES):
        self._sessions = sessions
        self._ttl = timedelta(minutes=int(ttl_minutes))

    def create_session(self, subject: str, *, now: datetime | None = None) -> QrSession:
        subject = require_max_length(require_non_empty(subject, "Subject"), "Subject", SUBJECT_MAX_LENGTH)
        now = as_utc(now or now_utc())

        session = QrSession(
            subject=subject,
            qr_id=make_qr_id(subject, now),
            created_at=now,
            expires_at=now + self._ttl,
        )
        session = self._sessions.create(session)
        logger.info("Opened QR session %s until %s", session.qr_id, session.expires_at.isoformat())
        return session

    def validate(self, qr_id: str, *, now: datetime | None = None) -> QrSession:
        session = self._sessions.get_by_qr_id(qr_id)
        if not session:
            raise InvalidQrError("Invalid QR")
        if session.is_expired(as_utc(now or now_utc())):
            raise ExpiredQrError("QR expired")
        return session

    @staticmethod
    def render_png_base64(qr_id: str) -> str:
        img = qrcode.make(qr_id)
        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return base64.b64encode(buf.getvalue()).decode("utf-8")
