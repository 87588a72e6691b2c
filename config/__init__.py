import os

# APP_ENV value -> settings module
ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "dev": "config.development",
    "development": "config.development",
    "local": "config.development",
}

DEFAULT_SETTINGS_MODULE = "config.development"


def get_settings_module() -> str:
    """Settings module for APP_ENV (FLASK_ENV is honoured when APP_ENV is unset)."""
    env = os.getenv("APP_ENV") or os.getenv("FLASK_ENV") or "development"
    return ENV_MODULES.get(env.strip().lower(), DEFAULT_SETTINGS_MODULE)
