from __future__ import annotations

from typing import Optional, Protocol

from .model import Account


class AccountRepository(Protocol):
    """Repository interface for accounts.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_username(self, username: str) -> Optional[Account]:
        raise NotImplementedError

    def create_account(self, *, username: str, password_hash: str) -> int:
        """Insert and return the new id; raises DuplicateUsernameError on a taken name."""

        raise NotImplementedError
