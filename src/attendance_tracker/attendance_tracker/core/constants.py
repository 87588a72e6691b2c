"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 8000
DEFAULT_TOKEN_TTL_MINUTES = 60
DEFAULT_PASSWORD_HASH_METHOD = "pbkdf2:sha256:600000"
TOKEN_ALGORITHM = "HS256"
BEARER_PREFIX = "Bearer"
