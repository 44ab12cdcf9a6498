from __future__ import annotations

from typing import Optional, Protocol

from .model import Teacher


class TeacherRepository(Protocol):
    """Repository interface for teachers and their session tokens.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Teacher]:
        raise NotImplementedError

    def create(self, *, email: str, password_hash: str) -> Teacher:
        raise NotImplementedError

    def add_token(self, teacher_id: int, token: str) -> None:
        raise NotImplementedError

    def has_token(self, teacher_id: int, token: str) -> bool:
        raise NotImplementedError

    def remove_token(self, teacher_id: int, token: str) -> bool:
        raise NotImplementedError
