from flask import jsonify, request
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    """
    Base class for errors surfaced to API callers.

    Every subclass maps to one HTTP status and renders as {"error": message}.
    """
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(ApiError):
    """Malformed or unrecognised filter value."""
    status_code = 422

    def __init__(self, field: str, value):
        super().__init__(f"Invalid {field}: '{value}'")
        self.field = field
        self.value = value


class AuthenticationError(ApiError):
    status_code = 401


class AuthorizationError(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404


def competition_not_found(competition_id: str) -> NotFoundError:
    # Same message whether the competition is missing or hidden
    return NotFoundError(f"Competition with id {competition_id} not found")


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(err: HTTPException):
        # Only the API speaks JSON; anything else keeps werkzeug's default page
        if not request.path.startswith("/api/"):
            return err
        return jsonify({"error": err.name}), err.code
