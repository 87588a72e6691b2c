from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

import mysql.connector
from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .common.log import configure_logging
from .container import Container, build_container
from .core.settings import AppSettings
from .database.bootstrap import apply_schema, list_tables
from .accounts.controller import register as register_accounts
from .attendance.controller import register as register_attendance
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def load_settings() -> AppSettings:
    load_dotenv(override=False)
    settings_module = get_settings_module()
    settings = AppSettings.from_module(importlib.import_module(settings_module))
    logger.debug("Loaded settings from %s", settings_module)
    return settings


def _prepare_store(container: Container) -> None:
    """Apply the schema and provision the default account.

    An unreachable store is logged and otherwise ignored; the app keeps serving
    and requests touching the store fail with 500.
    """

    settings = container.settings
    try:
        if settings.auto_init_db:
            apply_schema(settings.db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(settings.db_config)))
        container.account_service.bootstrap(settings.bootstrap_username, settings.bootstrap_password)
    except mysql.connector.Error as e:
        logger.error("Database connection error: %s", e)


def create_app(container: Optional[Container] = None) -> Flask:
    if container is None:
        settings = load_settings()
        configure_logging(debug=settings.debug)
        container = build_container(settings)
    else:
        settings = container.settings

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug
    app.config["SECRET_KEY"] = settings.secret_key
    CORS(app)

    db = settings.db_config
    logger.info(
        "Starting attendance tracker db=%s@%s:%s/%s",
        db.get("user"), db.get("host"), db.get("port", 3306), db.get("database"),
    )

    _prepare_store(container)

    register_accounts(app, container)
    register_students(app, container)
    register_attendance(app, container)

    app.extensions["attendance_tracker.container"] = container
    return app


def run() -> None:
    app = create_app()
    container: Container = app.extensions["attendance_tracker.container"]
    logger.info("Server running on port %d", container.settings.port)
    app.run(host="0.0.0.0", port=container.settings.port, debug=container.settings.debug)
