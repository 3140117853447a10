from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging_utils import configure_logging
from .container import build_container
from .reports.controller import register as register_reports
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DATA_FILE"] = getattr(settings, "DATA_FILE")
    app.config["LOG_LEVEL"] = getattr(settings, "LOG_LEVEL", "INFO")
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config["LOG_LEVEL"])
    logger.info("settings=%s data_file=%s", settings_module, app.config["DATA_FILE"])

    container = build_container(data_file=app.config["DATA_FILE"])

    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
