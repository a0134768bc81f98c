from __future__ import annotations

import importlib
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .core.exceptions import AuthenticationError, DomainError, NotFoundError, StorageError, ValidationError
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .settings import AppSettings, load_settings
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .payroll.controller import register as register_payroll
from .people.controller import register as register_people

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"

_ERROR_STATUS = (
    (NotFoundError, 404),
    (ValidationError, 400),
    (StorageError, 503),
    (AuthenticationError, 401),
)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = next((code for kind, code in _ERROR_STATUS if isinstance(exc, kind)), 400)
        if isinstance(exc, StorageError):
            app.logger.exception("Storage failure")
            message = "Storage temporarily unavailable, please retry"
        else:
            message = str(exc)
        return jsonify({"success": False, "message": message}), status


def create_app(settings: Optional[AppSettings] = None, *, container: Optional[Container] = None) -> Flask:
    if settings is None:
        load_dotenv(override=False)
        settings_module = get_settings_module()
        settings = load_settings(importlib.import_module(settings_module))

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["DEBUG"] = settings.debug
    app.config["TESTING"] = settings.testing
    app.config["PUBLIC_BASE_URL"] = settings.public_base_url
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.permanent_session_lifetime = timedelta(minutes=settings.session_minutes)

    if settings.debug:
        db = settings.db
        app.logger.info("[dtr-payroll] db=%s@%s:%s/%s tz=%s", db.user, db.host, db.port, db.database, settings.timezone)

    if container is None:
        if settings.auto_init_db:
            apply_schema(settings.db, schema_path=SCHEMA_PATH)
            app.logger.info("[dtr-payroll] schema ready (tables=%d)", len(list_tables(settings.db)))
        container = build_container(settings)

    _register_error_handlers(app)
    register_auth(app, container)
    register_people(app, container)
    register_attendance(app, container)
    register_payroll(app, container)

    return app
