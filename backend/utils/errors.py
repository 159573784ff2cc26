from bson.errors import InvalidDocument
from flask import current_app, jsonify
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    """Error that maps directly onto a JSON error response."""

    status_code = 400
    message = "Bad Request"

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    message = "Invalid request."


class DuplicateEmail(ApiError):
    message = "Email is already taken."


class InvalidCredentials(ApiError):
    message = "Invalid credentials."


class NoChange(ApiError):
    message = "No changes were made."


class AccessDenied(ApiError):
    status_code = 401
    message = "Access denied. No token provided."


class InvalidToken(ApiError):
    status_code = 403
    message = "Invalid token."


class ExpiredToken(InvalidToken):
    pass


class NotFound(ApiError):
    status_code = 404
    message = "Not Found"


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def api_error(exc):
        return jsonify(error=exc.message), exc.status_code

    @app.errorhandler(InvalidDocument)
    def invalid_document(exc):
        current_app.logger.info("Rejected unstorable document: %s", exc)
        return jsonify(error="Invalid document."), 400

    @app.errorhandler(PyMongoError)
    def store_error(exc):
        current_app.logger.exception("Document store failure: %s", exc)
        return jsonify(error="Internal Server Error"), 500

    @app.errorhandler(HTTPException)
    def http_error(exc):
        return jsonify(error=exc.name), exc.code

    @app.errorhandler(Exception)
    def server_error(exc):
        current_app.logger.exception("Unhandled error: %s", exc)
        return jsonify(error="Internal Server Error"), 500
