from __future__ import annotations

from typing import Optional, Protocol

from .model import QrSession


class QrSessionRepository(Protocol):
    def create(self, session: QrSession) -> QrSession:
        """Persist a session; qr_id is unique in storage."""
        raise NotImplementedError

    def get_by_qr_id(self, qr_id: str) -> Optional[QrSession]:
        raise NotImplementedError
