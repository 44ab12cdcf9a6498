from __future__ import annotations

import secrets
from datetime import datetime, timedelta

import jwt

from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_TOKEN_HOURS
from ..core.exceptions import AuthenticationError

JWT_ALGO = "HS256"


class TokenService:
    """Signs and verifies teacher session tokens (PyJWT, HS256).

    A token only proves who it was issued to; whether it is still active is
    decided by the teacher repository.
    """

    def __init__(self, secret: str, *, expires_hours: int = DEFAULT_TOKEN_HOURS):
        self._secret = secret
        self._ttl = timedelta(hours=int(expires_hours))

    def issue(self, teacher_id: int, *, now: datetime | None = None) -> str:
        now = now or now_utc()
        payload = {
            "sub": str(teacher_id),
            # two logins in the same second must still yield distinct tokens
            "jti": secrets.token_hex(8),
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGO)

    def verify(self, token: str) -> int:
        """Return the teacher id carried by a valid, unexpired token."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[JWT_ALGO])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Invalid or expired token") from None
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid or expired token") from None

        try:
            return int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Invalid token") from None
