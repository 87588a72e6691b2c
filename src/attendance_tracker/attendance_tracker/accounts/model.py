from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Domain entity: a login account.

    Note: Plain data object (no DB access code).
    """

    account_id: int
    username: str
    password_hash: str
