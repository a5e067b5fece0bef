"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST"):
        super().__init__(400, code, message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


class InternalServerException(APIException):
    """500 Internal Server Error"""

    def __init__(
        self,
        message: str = "Internal server error",
        code: str = "INTERNAL_ERROR",
    ):
        super().__init__(500, code, message)


class StorageFailureException(InternalServerException):
    """The storage engine failed to execute a statement"""

    def __init__(self, message: str = "Storage failure"):
        super().__init__(message=message, code="STORAGE_FAILURE")


# Authentication specific exceptions
class InvalidCredentialsException(UnauthorizedException):
    """Invalid email or password"""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="INVALID_CREDENTIALS",
        )


class EmailAlreadyExistsException(BadRequestException):
    """Email already registered"""

    def __init__(self):
        super().__init__(
            message="Email already registered",
            code="EMAIL_EXISTS",
        )


# Request workflow exceptions
class InvalidStatusException(BadRequestException):
    """Status is not a settable target"""

    def __init__(self, status: str):
        super().__init__(
            message=f"Invalid status '{status}'",
            code="INVALID_STATUS",
        )


class SelfRequestException(BadRequestException):
    """Learner and mentor are the same user"""

    def __init__(self):
        super().__init__(
            message="Cannot request mentoring from yourself",
            code="SELF_REQUEST",
        )


class DuplicateRequestException(ConflictException):
    """Learner already asked this mentor for this skill"""

    def __init__(self):
        super().__init__(
            message="A request for this mentor and skill already exists",
            code="DUPLICATE_REQUEST",
        )


# Resource specific exceptions
class CourseNotFoundException(NotFoundException):
    """Course not found"""

    def __init__(self):
        super().__init__(message="Course not found", code="COURSE_NOT_FOUND")


class RequestNotFoundException(NotFoundException):
    """Session or skill request not found"""

    def __init__(self):
        super().__init__(message="Request not found", code="REQUEST_NOT_FOUND")


class UserSkillNotFoundException(NotFoundException):
    """User skill not found"""

    def __init__(self):
        super().__init__(message="User skill not found", code="USER_SKILL_NOT_FOUND")
