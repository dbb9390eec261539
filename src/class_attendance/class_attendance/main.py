from __future__ import annotations

import importlib
import logging
from datetime import timedelta

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_SESSION_LIFETIME_DAYS


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    storage_config = dict(getattr(settings, "STORAGE_CONFIG"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(
        days=int(getattr(settings, "SESSION_LIFETIME_DAYS", DEFAULT_SESSION_LIFETIME_DAYS))
    )

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if app.config["DEBUG"]:
        app.logger.info(
            "[class-attendance] settings=%s storage=%s",
            settings_module,
            storage_config.get("backend"),
        )

    container = build_container(storage_config=storage_config)

    register_attendance(app, container)

    return app
