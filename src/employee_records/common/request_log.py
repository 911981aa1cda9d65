from __future__ import annotations

import time

from flask import Flask, g, request


def register(app: Flask) -> None:
    """One access-log line per request: method, path, status, elapsed ms."""

    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop("request_started", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        app.logger.info("%s %s %s %.1f ms", request.method, request.path, response.status_code, elapsed_ms)
        return response
