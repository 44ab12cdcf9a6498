from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class QrSession:
    """A short-lived QR window opened by a teacher for one subject."""

    subject: str
    qr_id: str
    created_at: datetime
    expires_at: datetime
    session_id: int | None = None

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
