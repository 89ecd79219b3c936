"""Request and response schemas for the CareerPilot API."""

from careerpilot.schemas.base import (
    BaseSchema,
    DocumentResponse,
    ErrorDetail,
    ErrorResponse,
    MessageResponse,
    SeedResponse,
)

__all__ = [
    "BaseSchema",
    "DocumentResponse",
    "ErrorDetail",
    "ErrorResponse",
    "MessageResponse",
    "SeedResponse",
]
