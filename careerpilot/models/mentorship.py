"""Counselor and mentorship session models."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from careerpilot.models.base import BaseDocument, PyObjectId
from careerpilot.utils.constants import SessionStatus


class Counselor(BaseDocument):
    """A mentor available for booking."""

    name: str = Field(..., min_length=1, max_length=200)
    specialization: str = Field(default="")
    bio: str = Field(default="")
    experience_years: int = Field(default=0, ge=0)
    rating: float = Field(default=0.0, ge=0, le=5)
    focus_areas: List[str] = Field(default_factory=list)
    availability: List[str] = Field(default_factory=list)


class MentorshipSession(BaseDocument):
    """A booked session between a user and a counselor."""

    user_id: str = Field(..., min_length=1)
    counselor_id: PyObjectId
    session_date: datetime
    goal: str = Field(default="")
    status: SessionStatus = Field(default=SessionStatus.SCHEDULED)
    notes: Optional[str] = None
