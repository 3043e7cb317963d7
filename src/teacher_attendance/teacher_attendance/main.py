from __future__ import annotations

import atexit
import importlib
from pathlib import Path
from typing import Optional

import mysql.connector
from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logger import get_logger
from .container import Container, build_container
from .database.bootstrap import apply_schema
from .database.connection import ConnectionPool, DBConfig
from .errors import register_error_handlers
from .health import register as register_health
from .holidays.controller import register as register_holidays
from .schedules.controller import register as register_schedules
from .teachers.controller import register as register_teachers

logger = get_logger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def build_pool(settings) -> ConnectionPool:
    config = DBConfig.from_mapping(getattr(settings, "DB_CONFIG"))

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        try:
            apply_schema(config, schema_path=SCHEMA_PATH)
        except mysql.connector.Error as e:
            logger.error("Could not apply %s: %s", SCHEMA_PATH.name, e)

    return ConnectionPool(
        config,
        pool_size=int(getattr(settings, "DB_POOL_SIZE")),
        acquire_timeout=float(getattr(settings, "DB_POOL_TIMEOUT")),
    )


def create_app(*, container: Optional[Container] = None) -> Flask:
    """Application factory.

    Pass `container` to run against prebuilt repositories (tests); otherwise a
    MySQL pool is created from the active settings module.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    CORS(app, origins=[getattr(settings, "CORS_ORIGIN")])

    if container is None:
        pool = build_pool(settings)
        pool.initialize()
        atexit.register(pool.close)
        container = build_container(pool=pool)

    logger.info("settings=%s", settings_module)

    register_error_handlers(app)
    register_health(app, container)
    register_teachers(app, container)
    register_attendance(app, container)
    register_schedules(app, container)
    register_holidays(app, container)

    return app
