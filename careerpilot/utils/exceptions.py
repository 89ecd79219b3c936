"""Custom exception classes for CareerPilot.

Every application error derives from ``CareerPilotError`` so the API layer can
translate it into a consistent error payload.
"""

from typing import Any, Dict, List, Optional


class CareerPilotError(Exception):
    """Base exception class for all CareerPilot application errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize CareerPilot error.

        Args:
            message: Error message
            error_code: Application-specific error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary representation."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.append(f"Code: {self.error_code}")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " | ".join(parts)


class ValidationError(CareerPilotError):
    """Input rejected before any scoring or persistence took place."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        validation_errors: Optional[List[str]] = None,
        **kwargs
    ):
        details = kwargs.get("details", {})
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        if validation_errors:
            details["validation_errors"] = validation_errors

        kwargs["details"] = details
        kwargs.setdefault("error_code", "INVALID_INPUT")
        super().__init__(message, **kwargs)

        self.field = field
        self.value = value
        self.validation_errors = validation_errors or []


class AuthenticationError(CareerPilotError):
    """No resolved user identity for an operation that requires one."""

    def __init__(
        self,
        message: str = "Not authenticated",
        user_id: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.get("details", {})
        if user_id:
            details["user_id"] = user_id

        kwargs["details"] = details
        kwargs.setdefault("error_code", "UNAUTHENTICATED")
        super().__init__(message, **kwargs)

        self.user_id = user_id


class AuthorizationError(CareerPilotError):
    """Exception for authorization/permission failures."""

    def __init__(
        self,
        message: str = "Access denied",
        user_id: Optional[str] = None,
        required_role: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.get("details", {})
        if user_id:
            details["user_id"] = user_id
        if required_role:
            details["required_role"] = required_role

        kwargs["details"] = details
        kwargs.setdefault("error_code", "FORBIDDEN")
        super().__init__(message, **kwargs)

        self.user_id = user_id
        self.required_role = required_role


class ResourceNotFoundError(CareerPilotError):
    """Exception for when a requested resource is not found."""

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.get("details", {})
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        kwargs["details"] = details
        kwargs.setdefault("error_code", "NOT_FOUND")
        super().__init__(message, **kwargs)

        self.resource_type = resource_type
        self.resource_id = resource_id


class DatabaseError(CareerPilotError):
    """Exception for database operation failures."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        collection: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.get("details", {})
        if operation:
            details["operation"] = operation
        if collection:
            details["collection"] = collection

        kwargs["details"] = details
        kwargs.setdefault("error_code", "DATABASE_ERROR")
        super().__init__(message, **kwargs)

        self.operation = operation
        self.collection = collection


__all__ = [
    "CareerPilotError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ResourceNotFoundError",
    "DatabaseError",
]
