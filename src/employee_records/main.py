from __future__ import annotations

import atexit
import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from . import errors, views
from .common import request_log
from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .core.exceptions import ConfigurationError
from .database.bootstrap import init_schema
from .records.controller import register as register_records
from .users.controller import register as register_users

REPO_ROOT = Path(__file__).resolve().parents[2]


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(
        __name__,
        template_folder=str(REPO_ROOT / "templates"),
        static_folder=str(REPO_ROOT / "static"),
    )

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SHOW_ERROR_DETAIL"] = bool(getattr(settings, "SHOW_ERROR_DETAIL", False))
    session_days = int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS))
    app.permanent_session_lifetime = timedelta(days=session_days)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(getattr(settings, "LOG_LEVEL", "INFO"))

    # A template missing at start-up is a configuration defect, not a request error.
    views.check_templates(app)

    if container is None:
        database_uri = getattr(settings, "DATABASE_URI", None)
        if not database_uri:
            raise ConfigurationError("DATABASE_URI (or MONGODB_URI) must be set")

        container = build_container(database_uri=database_uri, session_days=session_days)
        atexit.register(container.close)
        app.logger.info("settings=%s db=%s", settings_module, container.conn.database_name)

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            init_schema(container.conn)

        admin_username = getattr(settings, "ADMIN_USERNAME", None)
        admin_password = getattr(settings, "ADMIN_PASSWORD", None)
        if admin_username and admin_password:
            container.auth_service.ensure_account(username=admin_username, password=admin_password)

    app.extensions["employee_records.container"] = container

    request_log.register(app)
    errors.register(app)
    register_users(app, container)
    register_records(app, container)

    return app
