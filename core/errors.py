from schemas.responses import FieldError


class AppError(Exception):
    """Base error translated into an HTTP response by the app-level handler."""

    status_code = 500

    def __init__(self, message: str, errors: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class NotFoundError(AppError):
    status_code = 404


class RequestValidationFailed(AppError):
    status_code = 400


class ConstraintViolationError(AppError):
    status_code = 400


class InvalidApiVersionError(AppError):
    status_code = 400


class AmbiguousApiVersionError(AppError):
    status_code = 400


class UnsupportedApiVersionError(AppError):
    status_code = 400
