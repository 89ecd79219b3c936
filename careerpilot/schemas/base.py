"""Base Pydantic schemas for the CareerPilot API.

Shared configuration, the error envelope and a few small response shapes used
across endpoints.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from careerpilot.utils.helpers import parse_token_list


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        use_enum_values=True,
        validate_assignment=True,
        str_strip_whitespace=True,
        populate_by_name=True,
    )


def sanitize_tokens(value: Union[str, List[str], None]) -> List[str]:
    """Field validator body: comma separated text or a list becomes trimmed tokens."""
    if value is None:
        return []
    return parse_token_list(value)


class ErrorDetail(BaseSchema):
    """Error body returned by the exception handlers."""

    code: str = Field(..., description="Machine readable error code")
    message: str = Field(..., description="Human readable message")
    details: Dict[str, Any] = Field(default_factory=dict)
    request_id: Optional[str] = Field(None, description="Request correlation id")


class ErrorResponse(BaseSchema):
    """Error envelope: ``{"error": {...}}``."""

    error: ErrorDetail

    @classmethod
    def create(
        cls,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> "ErrorResponse":
        return cls(
            error=ErrorDetail(
                code=code,
                message=message,
                details=details or {},
                request_id=request_id,
            )
        )


class DocumentResponse(BaseSchema):
    """A stored document. Accepts the raw ``_id`` key as well as ``id``."""

    id: str = Field(..., validation_alias=AliasChoices("id", "_id"))

    @classmethod
    def from_document(cls, document: Any, **extra: Any):
        """Build from a ``BaseDocument``, overriding or adding ``extra`` fields."""
        return cls.model_validate({**document.to_dict(), **extra})


class MessageResponse(BaseSchema):
    """Plain acknowledgement."""

    message: str


class SeedResponse(BaseSchema):
    """Result of a seeding action."""

    inserted: int = Field(..., ge=0)
    message: str


__all__ = [
    "BaseSchema",
    "DocumentResponse",
    "ErrorDetail",
    "ErrorResponse",
    "MessageResponse",
    "SeedResponse",
    "sanitize_tokens",
]
