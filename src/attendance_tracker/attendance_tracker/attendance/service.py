from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..common.validators import optional_text, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_status(value: Any) -> AttendanceStatus:
    if value is None or value == "":
        return AttendanceStatus.ABSENT
    try:
        return AttendanceStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"Attendance must be one of: {allowed}")


def parse_submission(item: Any) -> AttendanceRecord:
    """Build a record from one submitted JSON object.

    The status is read from ``attendance``; ``status`` is accepted as an alias.
    """

    if not isinstance(item, Mapping):
        raise ValidationError("Each attendance entry must be an object")

    status = item.get("attendance", item.get("status"))
    return AttendanceRecord(
        roll_number=require_non_empty(item.get("rollnum"), "Roll number"),
        attendance_date=require_non_empty(item.get("date"), "Date"),
        status=parse_status(status),
        name=optional_text(item.get("name")),
        branch=optional_text(item.get("branch")),
        year=optional_text(item.get("year")),
    )


class AttendanceService:
    """Use cases: batch attendance submission and per-day lookup."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def submit(self, records: Iterable[Any]) -> int:
        """Upsert every entry in order and return how many were applied.

        Not transactional: entries before a failing one stay written, the rest
        are skipped, and the failure is raised for the batch as a whole.
        """

        if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
            raise ValidationError("Attendance payload must be a list of records")

        applied = 0
        for item in records:
            record = parse_submission(item)
            self._attendance.upsert(record)
            applied += 1

        logger.debug("Applied %d attendance record(s)", applied)
        return applied

    def get_for_date(self, roll_number: Any, attendance_date: Any) -> AttendanceStatus:
        roll_number = require_non_empty(roll_number, "Roll number")
        attendance_date = require_non_empty(attendance_date, "Date")

        record = self._attendance.get_for_student_and_date(roll_number, attendance_date)
        # No record for the day means the student was not marked present.
        return record.status if record else AttendanceStatus.ABSENT
