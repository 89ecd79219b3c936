"""Student-owned documents: profile, goals and feedback."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from careerpilot.models.base import BaseDocument
from careerpilot.utils.constants import GoalStatus


class Profile(BaseDocument):
    """Onboarding profile; at most one per user."""

    user_id: str = Field(..., min_length=1)
    headline: Optional[str] = None
    bio: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)
    current_role: Optional[str] = None
    target_role: Optional[str] = None
    experience_years: Optional[float] = Field(default=None, ge=0)


class Goal(BaseDocument):
    """A personal career goal tracked on the dashboard."""

    user_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    status: GoalStatus = Field(default=GoalStatus.PENDING)
    deadline: Optional[datetime] = None
    category: str = Field(default="General")  # "Learning", "Networking", "Job Search"


class Feedback(BaseDocument):
    """Platform feedback left by a user."""

    user_id: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    mood: str = Field(default="")
    category: str = Field(default="")
    message: str = Field(default="")
