from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException, BadRequest
from marshmallow import ValidationError
import logging

from models.exceptions import DomainValidationError, NotFoundError, InvalidStateError
from models.messages import translate

logger = logging.getLogger(__name__)

HTTP_MESSAGE_CODES = {
    404: "request.not_found",
    405: "request.method_not_allowed",
    415: "request.unsupported_media_type",
}


def _locale():
    return current_app.config.get("MESSAGE_LOCALE") if current_app else None


def error_response(error: str, message: str, status: int, details: dict | None = None):
    payload = {"error": error, "message": message, "status": status}
    if details:
        payload["details"] = details
    return jsonify(payload), status


def register_error_handlers(app):
    # Marshmallow validation errors: field-level details, 400
    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        logger.warning("Request validation failed: %s", err.messages)
        return error_response(
            "VALIDATION_ERROR", translate("request.invalid", _locale()), 400, details=err.messages
        )

    # Business rule violations
    @app.errorhandler(DomainValidationError)
    def handle_domain_validation_error(err: DomainValidationError):
        logger.warning("Domain validation failed: %s", err.message)
        return error_response("DOMAIN_VALIDATION_ERROR", err.localized(_locale()), 400)

    @app.errorhandler(NotFoundError)
    def handle_not_found_error(err: NotFoundError):
        logger.warning("Resource not found: %s", err.message)
        return error_response("NOT_FOUND", err.localized(_locale()), 404)

    # Stored data that no longer satisfies the entity rules
    @app.errorhandler(InvalidStateError)
    def handle_invalid_state_error(err: InvalidStateError):
        logger.error("Invalid state: %s", err.message, exc_info=err)
        return error_response("INTERNAL_ERROR", translate("server.error", _locale()), 500)

    # Malformed JSON bodies and other bad requests raised by Flask itself
    @app.errorhandler(BadRequest)
    def handle_bad_request(err: BadRequest):
        logger.warning("Bad request: %s", err.description)
        return error_response("BAD_REQUEST", translate("request.malformed", _locale()), 400)

    # Werkzeug HTTPExceptions (404 routing, 405, 415) keep their status code
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        logger.warning("HTTP error %s: %s", err.code, err.description)
        code = HTTP_MESSAGE_CODES.get(err.code, "request.failed")
        return error_response(err.name.upper().replace(" ", "_"), translate(code, _locale()), err.code or 500)

    # 500 Internal Error (catch-all)
    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        logger.error("Unhandled exception", exc_info=err)
        details = None
        if current_app and current_app.debug:
            details = {"type": err.__class__.__name__, "message": str(err)}
        return error_response("INTERNAL_ERROR", translate("server.error", _locale()), 500, details=details)
