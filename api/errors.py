from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException
from marshmallow import ValidationError
from sqlalchemy.exc import IntegrityError
import logging

from services.exceptions import (
    BusinessRuleViolationError,
    InternalInconsistencyError,
    NotFoundError,
)


def error_response(message: str, status: int, details: list | None = None):
    payload = {"message": message, "details": list(details or [])}
    return jsonify(payload), status


def flatten_messages(messages, prefix: str = ""):
    """Turn marshmallow's nested error dict into ordered "field: message" strings."""
    if isinstance(messages, dict):
        for key, value in messages.items():
            if key == "_schema":
                name = prefix
            elif isinstance(key, int):
                name = f"{prefix}[{key}]"
            else:
                name = f"{prefix}.{key}" if prefix else str(key)
            yield from flatten_messages(value, name)
    elif isinstance(messages, (list, tuple)):
        for message in messages:
            yield from flatten_messages(message, prefix)
    else:
        yield f"{prefix}: {messages}" if prefix else str(messages)


def _log_client_error(err):
    if current_app and current_app.debug:
        logging.exception("Client error", exc_info=err)


def register_error_handlers(app):
    @app.errorhandler(NotFoundError)
    def handle_not_found(err: NotFoundError):
        _log_client_error(err)
        return error_response(err.message, 404)

    @app.errorhandler(BusinessRuleViolationError)
    def handle_business_rule(err: BusinessRuleViolationError):
        _log_client_error(err)
        return error_response(err.message, 400)

    # Marshmallow validation errors map to 400 with per-field details
    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        _log_client_error(err)
        return error_response("Validation failed", 400, details=list(flatten_messages(err.messages)))

    # Integrity errors (FK violations, check constraints, duplicate association rows)
    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err: IntegrityError):
        logging.warning("Integrity error: %s", getattr(err, "orig", err))
        return error_response("Integrity error.", 400, details=[str(getattr(err, "orig", err))])

    @app.errorhandler(InternalInconsistencyError)
    def handle_internal_inconsistency(err: InternalInconsistencyError):
        logging.exception("Internal inconsistency", exc_info=err)
        return error_response("An unexpected error occurred", 500)

    # Werkzeug HTTPExceptions (unknown route, bad method, malformed JSON) keep their status codes
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        _log_client_error(err)
        return error_response(err.description or err.name, err.code or 400)

    # 500 Internal Error (catch-all)
    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        logging.exception("Unhandled exception", exc_info=err)
        details = None
        # In dev, include exception details to speed up debugging
        if current_app and current_app.debug:
            details = [f"{err.__class__.__name__}: {err}"]
        return error_response("An unexpected error occurred", 500, details=details)
