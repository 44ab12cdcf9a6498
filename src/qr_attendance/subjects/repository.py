from __future__ import annotations

from typing import Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def create(self, *, name: str, teacher_email: str) -> Subject:
        raise NotImplementedError

    def list_for_teacher(self, teacher_email: str) -> Sequence[Subject]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Subject]:
        raise NotImplementedError
