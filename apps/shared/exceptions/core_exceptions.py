"""
Core business exception hierarchy.

- Business failures are raised by DAL and view code
- They carry an error_code and a context dict for logging
- HTTP mapping happens in the API exception handler

The access-control engine itself never raises these to its callers; it
converts every failure into a denied decision.
"""


class AppError(Exception):
    """
    Base class for all business logic errors in the application.

    This is NOT an HTTP exception. Status codes are mapped by the
    API exception handler.
    """

    def __init__(self, message: str, error_code: str = None, context: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def __str__(self) -> str:
        return self.message

    def get_context(self) -> dict:
        """Get additional error context for logging/debugging"""
        return self.context


class ResourceNotFoundError(AppError):
    """
    Raised when a requested resource doesn't exist or must look like it doesn't.

    Examples:
    - Event not found by id or slug
    - Event exists but the actor may not view it

    HTTP Mapping: 404 NOT FOUND
    """


class ValidationError(AppError):
    """
    Raised when data fails model validation inside a DAL method.

    HTTP Mapping: 400 BAD REQUEST
    """

    def __init__(self, message: str, field_errors: dict = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_errors = field_errors or {}


class ServiceUnavailableError(AppError):
    """
    Raised when the database or another dependency fails.

    Examples:
    - Database connection issues
    - Unexpected driver errors inside a DAL method

    HTTP Mapping: 503 SERVICE UNAVAILABLE
    """
