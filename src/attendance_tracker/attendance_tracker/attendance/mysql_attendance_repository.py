from __future__ import annotations

from typing import Optional

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_student_and_date(self, roll_number: str, attendance_date: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT roll_number, attendance_date, status, name, branch, year
                FROM attendance_records
                WHERE roll_number=%s AND attendance_date=%s
                """,
                (roll_number, attendance_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                roll_number=r["roll_number"],
                attendance_date=r["attendance_date"],
                status=AttendanceStatus(r["status"]),
                name=r.get("name"),
                branch=r.get("branch"),
                year=r.get("year"),
            )

    def upsert(self, record: AttendanceRecord) -> None:
        # uq_attendance_roll_date turns a second insert for the same key into an update.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(roll_number, attendance_date, status, name, branch, year)
                VALUES(%s,%s,%s,%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE status=new.status
                """,
                (
                    record.roll_number,
                    record.attendance_date,
                    record.status.value,
                    record.name,
                    record.branch,
                    record.year,
                ),
            )
