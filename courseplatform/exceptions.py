"""
Typed failures raised by the service layer.

The transport layer maps them to HTTP responses through the handler
registered in ``courseplatform.main``; services never build HTTP errors.
"""
from starlette import status


class CoursePlatformError(Exception):
    """Base exception for the course platform"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(CoursePlatformError):
    """Raised when a user, course or enrollment does not exist."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, self.status_code)


class ConflictError(CoursePlatformError):
    """
    Raised on uniqueness violations.

    Examples:
    - Registering an email that is already in use
    - Enrolling a user twice in the same course
    """
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str = "Resource already exists"):
        super().__init__(message, self.status_code)


class UnauthorizedError(CoursePlatformError):
    """Raised for bad credentials or a missing/invalid bearer token."""
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message, self.status_code)


class ForbiddenError(CoursePlatformError):
    """Raised when the acting user lacks the course-scoped role required."""
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Access denied"):
        super().__init__(message, self.status_code)
