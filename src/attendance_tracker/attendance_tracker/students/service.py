from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import DuplicateRollNumberError, NotFoundError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use cases: roster CRUD keyed by roll number."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def create(self, *, name: Any, roll_number: Any, branch: Any, year: Any) -> Student:
        student = Student(
            roll_number=require_non_empty(roll_number, "Roll number"),
            name=optional_text(name),
            branch=optional_text(branch),
            year=optional_text(year),
        )
        if self._students.get_by_roll_number(student.roll_number):
            raise DuplicateRollNumberError("Roll number already exists.")

        self._students.create_student(student)
        return student

    def list_all(self) -> Sequence[Student]:
        return self._students.list_all()

    def update(self, *, roll_number: Any, name: Any, branch: Any, year: Any) -> Student:
        roll_number = require_non_empty(roll_number, "Roll number")
        updated = self._students.update_student(
            roll_number=roll_number,
            name=optional_text(name),
            branch=optional_text(branch),
            year=optional_text(year),
        )
        if not updated:
            raise NotFoundError("Student not found.")
        return updated

    def delete(self, roll_number: str) -> None:
        if not self._students.delete_by_roll_number(roll_number):
            logger.error("Student with roll number %s not found.", roll_number)
            raise NotFoundError("Student not found.")
