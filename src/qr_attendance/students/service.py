from __future__ import annotations

from typing import Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_max_length, require_non_empty, require_password
from ..core.constants import REG_NUMBER_MAX_LENGTH
from ..core.exceptions import AuthenticationError, DuplicateError
from .model import Student
from .repository import StudentRepository


class StudentService:
    """Use case: student registration and identity check.

    Login verifies the password only; no session credential is issued.
    """

    def __init__(self, students: StudentRepository):
        self._students = students

    def register(self, reg_number: str, password: str) -> Student:
        reg_number = require_max_length(
            require_non_empty(reg_number, "Registration number"), "Registration number", REG_NUMBER_MAX_LENGTH
        )
        password = require_password(password)

        if self._students.get_by_reg_number(reg_number):
            raise DuplicateError("Student already exists")

        return self._students.create(reg_number=reg_number, password_hash=generate_password_hash(password))

    def login(self, reg_number: str, password: str) -> Student:
        reg_number = require_non_empty(reg_number, "Registration number")
        password = require_password(password)

        student = self._students.get_by_reg_number(reg_number)
        if not student:
            raise AuthenticationError("Invalid registration number")

        try:
            ok = check_password_hash(student.password_hash, password)
        except ValueError:
            ok = False
        if not ok:
            raise AuthenticationError("Incorrect password")
        return student

    def list_all(self) -> Sequence[Student]:
        return self._students.list_all()
