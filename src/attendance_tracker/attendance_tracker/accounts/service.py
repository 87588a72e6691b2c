from __future__ import annotations

import logging

from ..auth.hasher import PasswordHasher
from ..auth.tokens import TokenService
from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, DuplicateUsernameError, ValidationError
from .model import Account
from .repository import AccountRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password."


class AccountService:
    """Use cases: signup, login and default-account bootstrap."""

    def __init__(self, accounts: AccountRepository, hasher: PasswordHasher, tokens: TokenService):
        self._accounts = accounts
        self._hasher = hasher
        self._tokens = tokens

    def signup(self, username: str, password: str) -> Account:
        username = require_non_empty(username, "Username")
        if not password:
            raise ValidationError("Password is required.")

        if self._accounts.get_by_username(username):
            raise DuplicateUsernameError("Username already exists.")

        password_hash = self._hasher.hash(password)
        account_id = self._accounts.create_account(username=username, password_hash=password_hash)
        logger.info("Registered account %r", username)
        return Account(account_id=account_id, username=username, password_hash=password_hash)

    def login(self, username: str, password: str) -> str:
        # Unknown user and wrong password must be indistinguishable.
        account = self._accounts.get_by_username(username) if username else None
        if not account or not self._hasher.verify(password or "", account.password_hash):
            raise AuthenticationError(INVALID_CREDENTIALS)

        return self._tokens.issue(account.account_id, account.username)

    def bootstrap(self, username: str, password: str) -> bool:
        """Create the default account if missing. Returns True when it was created."""

        if not username:
            logger.info("Default account bootstrap disabled")
            return False

        if self._accounts.get_by_username(username):
            logger.info("Default account %r already exists.", username)
            return False

        try:
            self._accounts.create_account(username=username, password_hash=self._hasher.hash(password))
        except DuplicateUsernameError:
            # Another process created it between the lookup and the insert.
            logger.info("Default account %r already exists.", username)
            return False

        logger.info("Default account %r created.", username)
        return True
