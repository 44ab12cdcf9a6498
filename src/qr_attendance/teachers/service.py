from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_max_length, require_non_empty, require_password
from ..core.constants import EMAIL_MAX_LENGTH
from ..core.exceptions import AuthenticationError, DuplicateError
from .model import IssuedToken, Teacher
from .repository import TeacherRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class TeacherAuthService:
    """Use case: teacher register / login / logout and bearer checks."""

    def __init__(self, teachers: TeacherRepository, tokens: TokenService):
        self._teachers = teachers
        self._tokens = tokens

    def register(self, email: str, password: str) -> IssuedToken:
        email = normalize_email(require_max_length(require_non_empty(email, "Email"), "Email", EMAIL_MAX_LENGTH))
        password = require_password(password)

        if self._teachers.get_by_email(email):
            raise DuplicateError("Email already in use")

        teacher = self._teachers.create(email=email, password_hash=generate_password_hash(password))
        logger.info("Registered teacher %s", teacher.email)
        return self._issue(teacher)

    def login(self, email: str, password: str) -> IssuedToken:
        email = normalize_email(require_non_empty(email, "Email"))
        password = require_password(password)

        teacher = self._teachers.get_by_email(email)
        if not teacher:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(teacher.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False
        if not ok:
            raise AuthenticationError("Invalid email or password")

        return self._issue(teacher)

    def authenticate(self, token: str) -> Teacher:
        if not token:
            raise AuthenticationError("No token provided")

        teacher_id = self._tokens.verify(token)
        teacher = self._teachers.get_by_id(teacher_id)
        if not teacher or not self._teachers.has_token(teacher.teacher_id, token):
            raise AuthenticationError("Invalid token")
        return teacher

    def logout(self, teacher: Teacher, token: str) -> None:
        """Revoke exactly this token; other devices keep theirs."""
        self._teachers.remove_token(teacher.teacher_id, token)

    def _issue(self, teacher: Teacher) -> IssuedToken:
        token = self._tokens.issue(teacher.teacher_id)
        self._teachers.add_token(teacher.teacher_id, token)
        return IssuedToken(token=token, teacher=teacher)
