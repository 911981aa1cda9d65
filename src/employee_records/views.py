"""Presentation layer: view identifier + data -> HTML.

No persistence and no decisions happen here; handlers pick a view and hand
over the data it needs.
"""
from __future__ import annotations

from flask import Flask, render_template
from jinja2 import TemplateNotFound
from markupsafe import escape

VIEWS = {
    "home": "index.html",
    "login": "login.html",
    "records/list": "employee_records/list.html",
    "records/create": "employee_records/create.html",
    "records/edit": "employee_records/edit.html",
    "records/delete": "employee_records/delete.html",
    "error": "error.html",
}


def template_for(view: str) -> str:
    try:
        return VIEWS[view]
    except KeyError:
        raise TemplateNotFound(view)


def render_view(view: str, *, status: int = 200, **data):
    return render_template(template_for(view), **data), status


def check_templates(app: Flask) -> None:
    """Load every known template once; a missing one stops the app from starting."""
    for template in VIEWS.values():
        app.jinja_env.get_template(template)


def fallback_error_page(message: str, status: int) -> tuple[str, int]:
    # Used when the error template itself cannot be rendered.
    return (
        "<!doctype html><html><head><title>Error</title></head>"
        f"<body><h1>{status}</h1><p>{escape(message)}</p></body></html>",
        status,
    )
