from __future__ import annotations

from typing import Optional, Protocol

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_student_and_date(self, roll_number: str, attendance_date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> None:
        """Insert the record, or if its key exists overwrite only ``status``.

        Must be a single atomic store operation.
        """

        raise NotImplementedError
