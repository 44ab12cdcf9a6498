from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def get_by_reg_number(self, reg_number: str) -> Optional[Student]:
        raise NotImplementedError

    def create(self, *, reg_number: str, password_hash: str) -> Student:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError
