"""Custom exceptions and error response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Standardized error response."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(None, description="Additional context")


class AppError(Exception):
    """Base exception for all app-level errors."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> ErrorDetail:
        """Convert to API response schema."""
        return ErrorDetail(
            code=self.code,
            message=self.message,
            details=self.details if self.details else None,
        )


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, details: Optional[dict] = None, code: str = "VALIDATION_ERROR"):
        super().__init__(code=code, message=message, status_code=422, details=details)


class NotFoundError(AppError):
    """Raised when resource doesn't exist."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            code="NOT_FOUND",
            message=f"{resource} with ID {resource_id} not found",
            status_code=404,
            details={"resource": resource, "resource_id": resource_id},
        )


class ConflictError(AppError):
    """Raised when resource already exists or operation conflicts."""

    def __init__(self, message: str, details: Optional[dict] = None, code: str = "CONFLICT"):
        super().__init__(code=code, message=message, status_code=409, details=details)


class InvalidStateError(AppError):
    """Raised when operation conflicts with facility state."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            code="INVALID_STATE",
            message=message,
            status_code=400,
            details=details,
        )


class ForbiddenError(AppError):
    """Raised when the acting role lacks permission."""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(code=code, message=message, status_code=403)


# Gym domain errors


class InvalidAgeError(ValidationError):
    """Client is younger than 18 or has no birth date."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, details=details, code="INVALID_AGE")


class MalformedScheduleError(ValidationError):
    """Schedule or date text doesn't match the expected pattern."""

    def __init__(self, value: str, expected: str):
        super().__init__(
            f"Invalid date format: {value!r} (expected {expected})",
            details={"value": value, "expected": expected},
            code="MALFORMED_SCHEDULE",
        )


class DuplicateClientError(ConflictError):
    """Person is already registered as a client."""

    def __init__(self, client_id: int):
        super().__init__(
            "Error: The client is already registered",
            details={"client_id": client_id},
            code="DUPLICATE_CLIENT",
        )


class InstructorNotQualifiedError(ConflictError):
    """Instructor isn't certified for the requested session type."""

    def __init__(self, instructor_id: int, session_type: str):
        super().__init__(
            "Error: Instructor is not qualified to conduct this session type.",
            details={"instructor_id": instructor_id, "session_type": session_type},
            code="INSTRUCTOR_NOT_QUALIFIED",
        )


class ClientNotRegisteredError(AppError):
    """Client isn't registered with the gym."""

    def __init__(self, client_id: int, message: str = "Error: The client is not registered with the gym"):
        super().__init__(
            code="CLIENT_NOT_REGISTERED",
            message=message,
            status_code=404,
            details={"client_id": client_id},
        )


class EnrollmentRejectedError(ConflictError):
    """Enrollment attempt failed an eligibility check."""

    def __init__(self, reason: str, client_id: int):
        super().__init__(
            f"Enrollment rejected: {reason}",
            details={"reason": reason, "client_id": client_id},
            code="ENROLLMENT_REJECTED",
        )


class InactiveSecretaryError(ForbiddenError):
    """A replaced secretary tried to act. Never recoverable."""

    def __init__(self, secretary_id: int):
        super().__init__(
            "Error: Former secretaries are not permitted to perform actions",
            code="INACTIVE_SECRETARY",
        )
        self.details = {"secretary_id": secretary_id}
