from __future__ import annotations

from typing import Sequence

from ..common.validators import require_max_length, require_non_empty
from ..core.constants import SUBJECT_MAX_LENGTH
from ..teachers.model import Teacher
from .model import Subject
from .repository import SubjectRepository


class SubjectService:
    def __init__(self, subjects: SubjectRepository):
        self._subjects = subjects

    def create(self, teacher: Teacher, name: str) -> Subject:
        # (name, teacher) is unique by convention only
        name = require_max_length(require_non_empty(name, "Subject name"), "Subject name", SUBJECT_MAX_LENGTH)
        return self._subjects.create(name=name, teacher_email=teacher.email)

    def list_for_teacher(self, teacher: Teacher) -> Sequence[Subject]:
        return self._subjects.list_for_teacher(teacher.email)

    def list_all(self) -> Sequence[Subject]:
        return self._subjects.list_all()
