from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from ..core.constants import DEFAULT_TOKEN_TTL_MINUTES, TOKEN_ALGORITHM
from ..core.exceptions import TokenExpiredError, TokenSignatureError


@dataclass(frozen=True)
class TokenSubject:
    """Identity carried inside a session token."""

    account_id: int
    username: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Issues and verifies stateless HS256 session tokens.

    There is no revocation list: a token stays valid until ``exp`` even if the
    account behind it changes.
    """

    def __init__(self, secret_key: str, *, ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._ttl = timedelta(minutes=int(ttl_minutes))

    def issue(self, subject_id: int, subject_username: str, *, now: datetime | None = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "id": subject_id,
            "username": subject_username,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: str) -> TokenSubject:
        try:
            data = jwt.decode(
                token,
                self._secret_key,
                algorithms=[TOKEN_ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise TokenSignatureError("Token is invalid") from e

        try:
            return TokenSubject(
                account_id=int(data["id"]),
                username=str(data["username"]),
                issued_at=datetime.fromtimestamp(int(data["iat"]), tz=timezone.utc),
                expires_at=datetime.fromtimestamp(int(data["exp"]), tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise TokenSignatureError("Token is missing identity claims") from e
