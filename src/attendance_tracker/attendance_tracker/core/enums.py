from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status stored per (roll number, date)."""

    PRESENT = "Present"
    ABSENT = "Absent"
