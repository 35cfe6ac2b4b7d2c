from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .api.controller import register as register_api
from .common.logging_utils import setup_logging
from .container import Container, build_container
from .core.config import TimeClockConfig
from .database.connection import DBConfig
from .settings import get_settings_module

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        config = TimeClockConfig.from_settings(settings)
        container = build_container(db_config=db_config, config=config)
        logger.info(
            "settings=%s db=%s tz=%s standard_hours=%s",
            settings_module, DBConfig.from_dict(db_config).describe(), config.timezone, config.standard_work_hours,
        )

    register_api(app, container)
    return app
