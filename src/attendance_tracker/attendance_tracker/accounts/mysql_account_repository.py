from __future__ import annotations

from typing import Optional

from mysql.connector.errors import IntegrityError

from ..core.exceptions import DuplicateUsernameError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .model import Account
from .repository import AccountRepository


class MySQLAccountRepository(AccountRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT account_id, username, password_hash
                FROM accounts
                WHERE username=%s
                """,
                (username,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Account(
                account_id=int(row["account_id"]),
                username=row["username"],
                password_hash=row["password_hash"],
            )

    def create_account(self, *, username: str, password_hash: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO accounts(username, password_hash) VALUES(%s,%s)",
                    (username, password_hash),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateUsernameError("Username already exists.") from e
            raise
