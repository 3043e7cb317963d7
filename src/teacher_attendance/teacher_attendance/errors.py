from __future__ import annotations

import json

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .common.logger import get_logger
from .core.exceptions import DomainError, InternalError

logger = get_logger(__name__)


def _render(err: DomainError):
    return jsonify(err.to_dict()), err.status_code


def register_error_handlers(app: Flask) -> None:
    """Every failure leaves as JSON with one of the taxonomy status codes."""

    @app.errorhandler(DomainError)
    def handle_domain_error(err: DomainError):
        log = logger.error if err.status_code >= 500 else logger.warning
        log(
            "%s %s -> %s %s: %s",
            request.method,
            request.path,
            err.status_code,
            type(err).__name__,
            err.detail or err.message,
        )
        return _render(err)

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        if isinstance(err, HTTPException):
            # Keep Werkzeug headers such as Allow on a 405.
            response = err.get_response()
            response.data = json.dumps({"message": err.description}, ensure_ascii=False)
            response.content_type = "application/json"
            return response

        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return _render(InternalError(detail=str(err)))
