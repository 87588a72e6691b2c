from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import DuplicateRollNumberError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Student
from .repository import StudentRepository


def _to_student(row: dict) -> Student:
    return Student(
        roll_number=row["roll_number"],
        name=row.get("name"),
        branch=row.get("branch"),
        year=row.get("year"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_roll_number(self, roll_number: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT roll_number, name, branch, year FROM students WHERE roll_number=%s",
                (roll_number,),
            )
            row = fetchone(cur)
            return _to_student(row) if row else None

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT roll_number, name, branch, year FROM students ORDER BY student_id")
            return [_to_student(r) for r in fetchall(cur)]

    def create_student(self, student: Student) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO students(roll_number, name, branch, year)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (student.roll_number, student.name, student.branch, student.year),
                )
        except IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateRollNumberError("Roll number already exists.") from e
            raise

    def update_student(
        self,
        *,
        roll_number: str,
        name: Optional[str],
        branch: Optional[str],
        year: Optional[str],
    ) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET name=COALESCE(%s, name), branch=COALESCE(%s, branch), year=COALESCE(%s, year)
                WHERE roll_number=%s
                """,
                (name, branch, year, roll_number),
            )
            cur.execute(
                "SELECT roll_number, name, branch, year FROM students WHERE roll_number=%s",
                (roll_number,),
            )
            row = fetchone(cur)
            return _to_student(row) if row else None

    def delete_by_roll_number(self, roll_number: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE roll_number=%s", (roll_number,))
            return cur.rowcount > 0
