from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging import configure_logging, get_logger
from .container import build_container
from .working_hours.controller import register as register_working_hours

logger = get_logger("main")


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = bool(getattr(settings, "JSON_SORT_KEYS", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("[hr-admin] settings=%s debug=%s", settings_module, app.config["DEBUG"])

    container = build_container()

    register_working_hours(app, container)

    return app
