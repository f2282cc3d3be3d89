from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .assignments.controller import register as register_assignments
from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables, seed_from_fixtures
from .database.fixtures import load_fixtures
from .queries.controller import register as register_queries
from .shifts.controller import register as register_shifts

REPO_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)

    if container is None:
        container = _build_from_settings(settings)
    logger.info("Planner ready (settings=%s, tolerance=%d min)", settings_module, container.reconciler.tolerance_minutes)

    register_error_handlers(app)
    register_shifts(app, container)
    register_assignments(app, container)
    register_queries(app, container)
    register_attendance(app, container)

    return app


def _build_from_settings(settings) -> Container:
    fixtures_dir = Path(getattr(settings, "FIXTURES_DIR", REPO_ROOT / "data"))
    data = load_fixtures(fixtures_dir)
    tolerance = int(getattr(settings, "TOLERANCE_MINUTES", 0))

    if getattr(settings, "DATA_SOURCE", "fixtures") != "mysql":
        return build_container(data=data, tolerance_minutes=tolerance)

    db_config = dict(getattr(settings, "DB_CONFIG"))
    container = build_container(data=data, db_config=db_config, tolerance_minutes=tolerance)
    logger.info(
        "Using MySQL %s@%s:%s/%s",
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn, schema_path=REPO_ROOT / "database" / "schema.sql")
        logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seed_from_fixtures(container.conn, data)
    return container
