"""Profile, goal and feedback schemas."""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import Field, field_validator

from careerpilot.schemas.base import BaseSchema, DocumentResponse, sanitize_tokens
from careerpilot.utils.constants import GoalStatus


# Profile

class ProfileUpsertRequest(BaseSchema):
    headline: Optional[str] = Field(None, max_length=200)
    bio: Optional[str] = Field(None, max_length=2000)
    skills: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)
    current_role: Optional[str] = None
    target_role: Optional[str] = None
    experience_years: Optional[float] = Field(None, ge=0)

    @field_validator("skills", "interests", mode="before")
    @classmethod
    def split_tokens(cls, v: Union[str, List[str], None]) -> List[str]:
        return sanitize_tokens(v)


class ProfileResponse(DocumentResponse):
    user_id: str
    headline: Optional[str] = None
    bio: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)
    current_role: Optional[str] = None
    target_role: Optional[str] = None
    experience_years: Optional[float] = None
    updated_at: datetime


class OnboardingStatusResponse(BaseSchema):
    is_onboarded: bool
    is_authenticated: bool


# Goals

class GoalCreateRequest(BaseSchema):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    status: GoalStatus = GoalStatus.PENDING
    deadline: Optional[datetime] = None
    category: str = Field(default="General", min_length=1)


class GoalStatusUpdateRequest(BaseSchema):
    status: GoalStatus


class GoalResponse(DocumentResponse):
    user_id: str
    title: str
    description: Optional[str] = None
    status: GoalStatus
    deadline: Optional[datetime] = None
    category: str
    created_at: datetime


# Feedback

class FeedbackCreateRequest(BaseSchema):
    """Rating bounds are checked by the service so fractional input can be rounded first."""

    rating: float
    mood: str = ""
    category: str = ""
    message: str = ""


class FeedbackResponse(DocumentResponse):
    user_id: str
    rating: int
    mood: str = ""
    category: str = ""
    message: str = ""
    created_at: datetime


__all__ = [
    "FeedbackCreateRequest",
    "FeedbackResponse",
    "GoalCreateRequest",
    "GoalResponse",
    "GoalStatusUpdateRequest",
    "OnboardingStatusResponse",
    "ProfileResponse",
    "ProfileUpsertRequest",
]
