import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Erreur applicative traduite en réponse JSON par register_error_handlers."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"error": self.message}


class ValidationError(ApiError):
    status_code = 400

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self):
        result = super().to_dict()
        if self.errors:
            result["errors"] = self.errors
        return result


class ConflictError(ApiError):
    status_code = 400


class UnauthorizedError(ApiError):
    status_code = 401


class NotFoundError(ApiError):
    status_code = 404


class RateLimitError(ApiError):
    status_code = 429

    def __init__(self, message, retry_after=None):
        super().__init__(message)
        self.retry_after = retry_after


class StoreError(ApiError):
    status_code = 500


class ConstraintError(StoreError):
    pass


# --------------------------------
# Traduction erreur -> réponse HTTP
# --------------------------------
def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def handle_api_error(err):
        response = jsonify(err.to_dict())
        response.status_code = err.status_code
        if isinstance(err, RateLimitError) and err.retry_after is not None:
            response.headers["Retry-After"] = str(err.retry_after)
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        response = jsonify({"error": err.description})
        response.status_code = err.code
        return response

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        logger.exception("Erreur inattendue")
        return jsonify({"error": str(err)}), 500
