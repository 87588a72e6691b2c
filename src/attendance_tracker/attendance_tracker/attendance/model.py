from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: attendance for one student on one day.

    ``(roll_number, attendance_date)`` is the natural key. Name, branch and year
    are copied from the submission that first created the record.
    """

    roll_number: str
    attendance_date: str
    status: AttendanceStatus
    name: Optional[str] = None
    branch: Optional[str] = None
    year: Optional[str] = None

    @property
    def key(self) -> tuple[str, str]:
        return self.roll_number, self.attendance_date
