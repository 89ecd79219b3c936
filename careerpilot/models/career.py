"""Career catalog models.

A ``CareerPath`` describes one role: the skills that define it, the skills a
learner grows into, and display-only market information. ``SavedCareer`` is a
user's bookmark of a catalog entry.
"""

from typing import List

from pydantic import Field

from careerpilot.models.base import BaseDocument, PyObjectId


class CareerPath(BaseDocument):
    """Catalog entry scored by the recommendation engine."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    required_skills: List[str] = Field(default_factory=list)
    skills_to_grow: List[str] = Field(default_factory=list)
    category: str = Field(..., min_length=1, max_length=100)
    growth_outlook: str = Field(default="Stable")  # "High", "Stable", ...
    estimated_salary: str = Field(default="")  # display-only range, e.g. "$80k - $140k"
    difficulty: str = Field(default="")  # "Entry", "Mid", "Senior", ...


class SavedCareer(BaseDocument):
    """A user's bookmark on a career path."""

    user_id: str = Field(..., min_length=1)
    career_path_id: PyObjectId
