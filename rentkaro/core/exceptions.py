"""
Domain error taxonomy shared by the API and the booking client.
Each error carries the HTTP status it is reported with.
"""


class AppError(Exception):
    """Base class for errors that are reported to callers as `{"error": message}`."""

    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = 400
    default_message = "Invalid payload"


class AuthError(AppError):
    """Bad credentials, or a missing, invalid or expired token."""

    status_code = 401
    default_message = "Invalid token"


class NotFoundError(AppError):
    """No matching row. Also used for rows owned by someone else."""

    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    status_code = 409
    default_message = "Already exists"


class StorageError(AppError):
    """Datastore failure. The message never includes driver details."""

    status_code = 500
    default_message = "Database error"


_BY_STATUS: dict[int, type[AppError]] = {
    cls.status_code: cls
    for cls in (ValidationError, AuthError, NotFoundError, ConflictError, StorageError)
}


def error_for_status(status_code: int, message: str | None = None) -> AppError:
    """Rebuild a domain error from an HTTP status (used by the API client)."""
    cls = _BY_STATUS.get(status_code)
    if cls is None:
        cls = ValidationError if 400 <= status_code < 500 else StorageError
    return cls(message)
