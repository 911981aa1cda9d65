from __future__ import annotations

import logging
import traceback
from typing import Optional

from flask import Flask, current_app
from jinja2 import TemplateNotFound
from werkzeug.exceptions import HTTPException, InternalServerError

from .core.exceptions import DomainError, StoreUnavailableError
from .views import fallback_error_page, render_view

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong while handling your request."


def _detail(error: BaseException) -> Optional[str]:
    if not current_app.config.get("SHOW_ERROR_DETAIL", False):
        return None
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


def render_error(message: str, status: int, error: Optional[BaseException] = None):
    try:
        return render_view(
            "error",
            status=status,
            message=message,
            status_code=status,
            detail=_detail(error) if error is not None else None,
        )
    except TemplateNotFound:
        logger.exception("error template missing")
        return fallback_error_page(message, status)


def register(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        return render_error(str(error), error.status_code, error)

    @app.errorhandler(StoreUnavailableError)
    def handle_store_unavailable(error: StoreUnavailableError):
        logger.error("record store unavailable", exc_info=error)
        return render_error(str(error), 500, error)

    @app.errorhandler(TemplateNotFound)
    def handle_template_not_found(error: TemplateNotFound):
        logger.error("template not found: %s", error.name, exc_info=error)
        return render_error(GENERIC_ERROR_MESSAGE, 500, error)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        if isinstance(error, InternalServerError) and error.original_exception is not None:
            original = error.original_exception
            logger.error("unhandled error", exc_info=original)
            return render_error(GENERIC_ERROR_MESSAGE, 500, original)
        return render_error(error.description or error.name, error.code or 500, error)
