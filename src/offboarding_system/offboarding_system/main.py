from __future__ import annotations

import atexit
import importlib
import logging
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_POOL_SIZE
from .core.error_handlers import register_error_handlers
from .core.log import configure_logging
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .submissions.controller import register as register_submissions

logger = logging.getLogger(__name__)


def create_app(*, settings: Optional[ModuleType] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    if settings is None:
        settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    CORS(app, resources={r"/api/*": {"origins": getattr(settings, "CORS_ORIGINS", "*")}})
    register_error_handlers(app)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", getattr(settings, "__name__", type(settings).__name__), DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            target = DBConfig.from_dict(db_config)
            apply_schema(target)
            logger.info("schema ready (tables=%d)", len(list_tables(target)))

        container = build_container(
            db_config=db_config,
            pool_size=int(getattr(settings, "DB_POOL_SIZE", DEFAULT_POOL_SIZE)),
        )
        atexit.register(container.close)

    app.extensions["offboarding_container"] = container
    register_submissions(app, container)

    return app
