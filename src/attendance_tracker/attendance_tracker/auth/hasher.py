from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import DEFAULT_PASSWORD_HASH_METHOD


class PasswordHasher:
    """Salted one-way password hashing.

    ``method`` is a werkzeug method string, e.g. ``pbkdf2:sha256:600000`` or
    ``scrypt:32768:8:1``; the trailing numbers are the work factor.
    """

    def __init__(self, method: str = DEFAULT_PASSWORD_HASH_METHOD):
        self._method = method

    def hash(self, plaintext: str) -> str:
        return generate_password_hash(plaintext, method=self._method)

    def verify(self, plaintext: str, digest: str) -> bool:
        try:
            return check_password_hash(digest, plaintext)
        except Exception:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            return False
