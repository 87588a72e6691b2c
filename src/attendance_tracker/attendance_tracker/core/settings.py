from __future__ import annotations

from dataclasses import dataclass, field
from types import ModuleType

from .constants import DEFAULT_PASSWORD_HASH_METHOD, DEFAULT_PORT, DEFAULT_TOKEN_TTL_MINUTES


@dataclass(frozen=True)
class AppSettings:
    """Process-wide settings resolved once at startup and injected everywhere else."""

    secret_key: str
    db_config: dict = field(default_factory=dict)
    debug: bool = False
    port: int = DEFAULT_PORT
    auto_init_db: bool = False
    token_ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES
    password_hash_method: str = DEFAULT_PASSWORD_HASH_METHOD
    bootstrap_username: str = ""
    bootstrap_password: str = ""

    @classmethod
    def from_module(cls, settings: ModuleType) -> "AppSettings":
        return cls(
            secret_key=str(getattr(settings, "SECRET_KEY")),
            db_config=dict(getattr(settings, "DB_CONFIG", {})),
            debug=bool(getattr(settings, "DEBUG", False)),
            port=int(getattr(settings, "PORT", DEFAULT_PORT)),
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
            token_ttl_minutes=int(getattr(settings, "TOKEN_TTL_MINUTES", DEFAULT_TOKEN_TTL_MINUTES)),
            password_hash_method=str(getattr(settings, "PASSWORD_HASH_METHOD", DEFAULT_PASSWORD_HASH_METHOD)),
            bootstrap_username=str(getattr(settings, "BOOTSTRAP_USERNAME", "") or ""),
            bootstrap_password=str(getattr(settings, "BOOTSTRAP_PASSWORD", "") or ""),
        )
