"""Custom exception classes"""
from typing import Any, Optional


class AppException(Exception):
    """Base exception for application errors"""

    status_code: int = 500
    error_type: str = "AppError"
    default_message: str = "Application error"

    def __init__(self, message: Optional[str] = None, details: Optional[Any] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Input rejected by a business rule (e.g. split names a foreign participant)"""

    status_code = 400
    error_type = "ValidationError"
    default_message = "Invalid input"


class AuthenticationError(AppException):
    """Missing or wrong credentials"""

    status_code = 401
    error_type = "AuthenticationError"
    default_message = "Authentication failed"


class AuthorizationError(AppException):
    """Caller does not own the bill"""

    status_code = 403
    error_type = "AuthorizationError"
    default_message = "Permission denied"


class NotFoundError(AppException):
    """Bill, participant, item or share link does not exist"""

    status_code = 404
    error_type = "NotFoundError"
    default_message = "Resource not found"


class ConflictError(AppException):
    """Duplicate username or email"""

    status_code = 409
    error_type = "ConflictError"
    default_message = "Resource already exists"
