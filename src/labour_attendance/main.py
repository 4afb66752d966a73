from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .common.logging import configure_logging
from .container import build_container
from .core.constants import STORAGE_KEY
from .core.exceptions import DomainError, ValidationError, WorkerIndexError
from .reports.controller import register as register_reports
from .workers.controller import register as register_workers

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    def _error(e: Exception, status: int):
        return jsonify({"success": False, "message": str(e)}), status

    @app.errorhandler(WorkerIndexError)
    def handle_index_error(e: WorkerIndexError):
        return _error(e, 404)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return _error(e, 400)

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        logger.warning("Rejected request: %s", e)
        return _error(e, 400)


def create_app(overrides: dict | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DATA_FILE"] = str(getattr(settings, "DATA_FILE"))
    app.config["STORAGE_KEY"] = getattr(settings, "STORAGE_KEY", STORAGE_KEY)
    app.config["LOG_LEVEL"] = getattr(settings, "LOG_LEVEL", "INFO")
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config["LOG_LEVEL"])
    logger.info("settings=%s data_file=%s", settings_module, app.config["DATA_FILE"])

    container = build_container(data_file=app.config["DATA_FILE"], storage_key=app.config["STORAGE_KEY"])
    app.extensions["labour_attendance"] = container

    register_error_handlers(app)
    register_workers(app, container)
    register_reports(app, container)

    return app
