from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .core.constants import BACKEND_MYSQL, DEFAULT_DB_PORT, DEFAULT_LOG_LEVEL
from .core.exceptions import ValidationError
from .core.logging_config import setup_logging
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", DEFAULT_LOG_LEVEL))

    db_config = getattr(settings, "DB_CONFIG", None)
    backend = str(getattr(settings, "REPOSITORY_BACKEND", BACKEND_MYSQL)).strip().lower()
    debug = bool(getattr(settings, "DEBUG", False))

    if debug and db_config:
        logger.info(
            "settings=%s backend=%s db=%s@%s:%s/%s",
            settings_module,
            backend,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", DEFAULT_DB_PORT),
            db_config.get("database"),
        )

    if backend == BACKEND_MYSQL:
        if not db_config:
            raise ValidationError("DB_CONFIG is required for the mysql backend")
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            logger.info("demo seed ready")

    return build_container(db_config=db_config, backend=backend)
