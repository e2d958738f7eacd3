"""Student Visitor Log package.

This package is organized by feature modules (students, visits, reports, ...)
with a thin Flask controller layer over service/repository layers.
"""
from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from config import get_settings_module

from .database.bootstrap import apply_schema, list_tables

from .container import build_container
from .admin.controller import register as register_admin
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .visits.controller import register as register_visits


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DB_PATH"] = str(getattr(settings, "DB_PATH", "./database.db"))
    app.config["ADMIN_USERNAME"] = getattr(settings, "ADMIN_USERNAME", "admin")
    app.config["ADMIN_PASSWORD"] = getattr(settings, "ADMIN_PASSWORD", "1234")
    app.config["AUTO_INIT_DB"] = bool(getattr(settings, "AUTO_INIT_DB", True))
    if overrides:
        app.config.update(overrides)

    if app.config["DEBUG"]:
        app.logger.setLevel(logging.INFO)
    app.logger.info("[visitor-log] settings=%s db=%s", settings_module, app.config["DB_PATH"])

    if app.config["AUTO_INIT_DB"]:
        apply_schema(app.config["DB_PATH"])
        app.logger.info("[visitor-log] schema ready (tables=%d)", len(list_tables(app.config["DB_PATH"])))

    CORS(app)

    container = build_container(
        db_path=app.config["DB_PATH"],
        admin_username=app.config["ADMIN_USERNAME"],
        admin_password=app.config["ADMIN_PASSWORD"],
    )

    register_students(app, container)
    register_visits(app, container)
    register_reports(app, container)
    register_admin(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
