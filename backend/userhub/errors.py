"""Service error taxonomy, global HTTP error handling and JSON response helpers."""
from __future__ import annotations

from typing import Any

from flask import Flask, jsonify
from loguru import logger
from werkzeug.exceptions import HTTPException


class ServiceError(Exception):
    """Base error carrying the HTTP status and error code it maps to."""

    status_code = 500
    code = "internal_server_error"

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(ServiceError):
    """A required field is missing or malformed."""

    status_code = 400
    code = "validation_error"


class ConflictError(ServiceError):
    """A unique constraint was violated by the backing store."""

    status_code = 409
    code = "conflict"


class UnavailableError(ServiceError):
    """The backing store is unreachable or timed out."""

    status_code = 503
    code = "service_unavailable"


def error_body(code: str, message: str, details: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": code, "message": message}
    if details:
        body["details"] = details
    return body


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ServiceError)
    def service_error(err: ServiceError):  # type: ignore[override]
        return jsonify(error_body(err.code, err.message, err.details)), err.status_code

    @app.errorhandler(400)
    def bad_request(err: HTTPException):  # type: ignore[override]
        return jsonify(error_body("bad_request", err.description or "bad request")), 400

    @app.errorhandler(404)
    def not_found(err: HTTPException):  # type: ignore[override]
        return jsonify(error_body("not_found", err.description or "not found")), 404

    @app.errorhandler(405)
    def method_not_allowed(err: HTTPException):  # type: ignore[override]
        return jsonify(error_body("method_not_allowed", err.description or "method not allowed")), 405

    @app.errorhandler(500)
    def internal(err: Exception):  # type: ignore[override]
        original = getattr(err, "original_exception", None) or err
        logger.opt(exception=original).error("Unhandled error while serving request")
        return jsonify(error_body("internal_server_error", "unexpected error")), 500


def ok(data: Any, status: int = 200):
    return jsonify(data), status
