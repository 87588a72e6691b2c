from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def get_by_roll_number(self, roll_number: str) -> Optional[Student]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def create_student(self, student: Student) -> None:
        """Raises DuplicateRollNumberError when the roll number is taken."""

        raise NotImplementedError

    def update_student(
        self,
        *,
        roll_number: str,
        name: Optional[str],
        branch: Optional[str],
        year: Optional[str],
    ) -> Optional[Student]:
        """Overwrite the non-None fields; returns the stored row or None if absent."""

        raise NotImplementedError

    def delete_by_roll_number(self, roll_number: str) -> bool:
        raise NotImplementedError
