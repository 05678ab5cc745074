import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from fitlife.extensions import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    # existing clients expect 400 here, not 409
    status_code = 400


def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify({"message": error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        # full details stay in the server log
        db.session.rollback()
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"message": "Server error"}), 500
