"""Error types raised by the data-access layer."""


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Raised when a required field is missing or a value is out of range."""

    status_code = 400


class NotFoundError(ApiError):
    """Raised when no row matches the requested id."""

    status_code = 404


class InternalError(ApiError):
    """Raised when the store fails; carries the driver's message."""

    status_code = 500
