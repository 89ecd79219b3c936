"""Mentorship schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from careerpilot.schemas.base import BaseSchema, DocumentResponse
from careerpilot.utils.constants import SessionStatus


class CounselorResponse(DocumentResponse):
    name: str
    specialization: str = ""
    bio: str = ""
    experience_years: int = 0
    rating: float = 0.0
    focus_areas: List[str] = Field(default_factory=list)
    availability: List[str] = Field(default_factory=list)


class SessionBookRequest(BaseSchema):
    """Booking form. Future date and non-blank goal are enforced by the service."""

    counselor_id: str = Field(..., min_length=1)
    session_date: datetime
    goal: str = ""


class SessionResponse(DocumentResponse):
    user_id: str
    counselor_id: str
    session_date: datetime
    goal: str = ""
    status: SessionStatus
    notes: Optional[str] = None
    counselor: Optional[CounselorResponse] = None


__all__ = ["CounselorResponse", "SessionBookRequest", "SessionResponse"]
