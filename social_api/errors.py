"""Domain errors raised by the services and mapped to HTTP responses.

Every error carries a human readable ``message`` and the HTTP status it maps
to. Handlers in :mod:`social_api.main` render them as ``{"message": ...}``.
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or duplicate input"""

    status_code = 400


class PayloadTooLargeError(ValidationError):
    status_code = 413


class AuthError(AppError):
    """Missing, invalid or expired credential, or a bad password"""

    status_code = 401


class NotFoundError(AppError):
    status_code = 404


class InternalError(AppError):
    status_code = 500
