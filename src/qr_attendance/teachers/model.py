from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Teacher:
    """Domain entity: a teacher account.

    Active session tokens live in their own table and are reached through
    the repository, not through this object.
    """

    teacher_id: int
    email: str
    password_hash: str


@dataclass(frozen=True)
class IssuedToken:
    """What register/login hand back to the client."""

    token: str
    teacher: Teacher
