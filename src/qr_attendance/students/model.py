from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a student, identified by registration number."""

    student_id: int
    reg_number: str
    password_hash: str
