"""
Custom Exceptions - Application-specific error classes.

Each exception carries an HTTP status code and a machine-readable error
code. The API layer turns them into consistent JSON error bodies:

- ValidationError          400  malformed or missing input
- NotFoundError            404  referenced id does not exist
- UpstreamGenerationError  500  the generative-text provider failed
- InternalError            500  storage or logic fault
"""
from typing import Optional


class AstraMindException(Exception):
    """
    Base exception for all application errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {
            "error": self.message,
            "code": self.error_code,
            "details": self.details,
        }


class ValidationError(AstraMindException):
    """Raised when input validation fails."""
    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field


class NotFoundError(AstraMindException):
    """Raised when a referenced entity does not exist."""
    status_code = 404
    error_code = "not_found"

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource} not found",
            details=f"id={resource_id}",
        )
        self.resource = resource
        self.resource_id = resource_id


class UpstreamGenerationError(AstraMindException):
    """Raised when the generative-text provider fails."""
    status_code = 500
    error_code = "generation_failed"

    def __init__(self, message: str = "Failed to get AI response", details: Optional[str] = None):
        super().__init__(message, details=details)


class InternalError(AstraMindException):
    """Raised for storage or logic faults."""
    status_code = 500
    error_code = "internal_error"

    def __init__(self, message: str = "An unexpected error occurred", details: Optional[str] = None):
        super().__init__(message, details=details)
