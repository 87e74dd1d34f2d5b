from __future__ import annotations


class StartupError(Exception):
    """Raised when the service cannot finish its start-up sequence.

    Start-up runs connect -> migrate -> seed; any failure is fatal and the
    process is expected to exit instead of serving requests.
    """


class DatabaseConnectionError(StartupError):
    pass


class MigrationError(StartupError):
    pass


class SeedError(StartupError):
    pass


class ApiError(Exception):
    """Request-level error rendered as ``{"error": message}``."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidIdentifier(ApiError):
    status_code = 400
    default_message = "Invalid category ID"


class InvalidPayload(ApiError):
    status_code = 400
    default_message = "Invalid request body"


class InvalidType(ApiError):
    status_code = 400
    default_message = "Category type must be 'income' or 'expense'"


class NotFound(ApiError):
    status_code = 404
    default_message = "Category not found"


class PersistenceFailure(ApiError):
    status_code = 500
    default_message = "Database operation failed"
