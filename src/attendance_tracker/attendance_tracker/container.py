from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .accounts.mysql_account_repository import MySQLAccountRepository
from .accounts.repository import AccountRepository
from .accounts.service import AccountService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.hasher import PasswordHasher
from .auth.tokens import TokenService
from .core.settings import AppSettings
from .database.connection import DBConfig, DatabaseConnection
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    settings: AppSettings
    conn: Optional[DatabaseConnection]

    accounts_repo: AccountRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository

    password_hasher: PasswordHasher
    token_service: TokenService
    account_service: AccountService
    student_service: StudentService
    attendance_service: AttendanceService


def wire_container(
    settings: AppSettings,
    *,
    accounts_repo: AccountRepository,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Assemble services on top of the given repositories."""

    password_hasher = PasswordHasher(settings.password_hash_method)
    token_service = TokenService(settings.secret_key, ttl_minutes=settings.token_ttl_minutes)

    return Container(
        settings=settings,
        conn=conn,
        accounts_repo=accounts_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        password_hasher=password_hasher,
        token_service=token_service,
        account_service=AccountService(accounts_repo, password_hasher, token_service),
        student_service=StudentService(students_repo),
        attendance_service=AttendanceService(attendance_repo),
    )


def build_container(settings: AppSettings) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.db_config))

    return wire_container(
        settings,
        accounts_repo=MySQLAccountRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
    )
