from __future__ import annotations

from dataclasses import replace
from typing import Optional

import pytest

from src.attendance_tracker.attendance_tracker.accounts.model import Account
from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceRecord
from src.attendance_tracker.attendance_tracker.container import wire_container
from src.attendance_tracker.attendance_tracker.core.exceptions import (
    DuplicateRollNumberError,
    DuplicateUsernameError,
)
from src.attendance_tracker.attendance_tracker.core.settings import AppSettings
from src.attendance_tracker.attendance_tracker.main import create_app
from src.attendance_tracker.attendance_tracker.students.model import Student


class InMemoryAccounts:
    def __init__(self):
        self._by_username: dict[str, Account] = {}
        self._id = 0

    def get_by_username(self, username: str) -> Optional[Account]:
        return self._by_username.get(username)

    def create_account(self, *, username: str, password_hash: str) -> int:
        if username in self._by_username:
            raise DuplicateUsernameError("Username already exists.")
        self._id += 1
        self._by_username[username] = Account(account_id=self._id, username=username, password_hash=password_hash)
        return self._id

    def count(self) -> int:
        return len(self._by_username)


class InMemoryStudents:
    def __init__(self):
        self._by_roll: dict[str, Student] = {}

    def get_by_roll_number(self, roll_number: str) -> Optional[Student]:
        return self._by_roll.get(roll_number)

    def list_all(self):
        return list(self._by_roll.values())

    def create_student(self, student: Student) -> None:
        if student.roll_number in self._by_roll:
            raise DuplicateRollNumberError("Roll number already exists.")
        self._by_roll[student.roll_number] = student

    def update_student(self, *, roll_number, name, branch, year) -> Optional[Student]:
        current = self._by_roll.get(roll_number)
        if not current:
            return None
        updated = Student(
            roll_number=roll_number,
            name=name if name is not None else current.name,
            branch=branch if branch is not None else current.branch,
            year=year if year is not None else current.year,
        )
        self._by_roll[roll_number] = updated
        return updated

    def delete_by_roll_number(self, roll_number: str) -> bool:
        return self._by_roll.pop(roll_number, None) is not None


class InMemoryAttendance:
    def __init__(self):
        self.records: dict[tuple[str, str], AttendanceRecord] = {}

    def get_for_student_and_date(self, roll_number: str, attendance_date: str) -> Optional[AttendanceRecord]:
        return self.records.get((roll_number, attendance_date))

    def upsert(self, record: AttendanceRecord) -> None:
        existing = self.records.get(record.key)
        if existing:
            self.records[record.key] = replace(existing, status=record.status)
        else:
            self.records[record.key] = record


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        secret_key="test-secret",
        password_hash_method="pbkdf2:sha256:1000",
        bootstrap_username="bootstrap",
        bootstrap_password="bootstrap-pw",
    )


@pytest.fixture
def accounts_repo():
    return InMemoryAccounts()


@pytest.fixture
def students_repo():
    return InMemoryStudents()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def container(settings, accounts_repo, students_repo, attendance_repo):
    return wire_container(
        settings,
        accounts_repo=accounts_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
    )


@pytest.fixture
def client(container):
    app = create_app(container)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def auth_header(container):
    account_id = container.accounts_repo.create_account(
        username="teacher", password_hash=container.password_hasher.hash("pw")
    )
    token = container.token_service.issue(account_id, "teacher")
    return {"Authorization": f"Bearer {token}"}
