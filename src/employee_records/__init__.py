"""Employee Records package.

A Flask application organized by feature modules (records, users) with a
thin controller layer over service/repository layers.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
