from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .exceptions import DomainError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: Flask) -> None:
    """Map every error kind to a JSON body ``{"error": message}`` and a status code."""

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        logger.info("%s: %s", type(e).__name__, e.message)
        return jsonify({"error": e.message}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception("Server error: %s", e)
        return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500
