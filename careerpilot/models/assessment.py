"""Assessment document model.

One stored self-report together with the recommendation computed for it.
Assessments are append-only: a resubmission creates a new document.
"""

from typing import List

from pydantic import Field

from careerpilot.models.base import BaseDocument


class Assessment(BaseDocument):
    """A user's submission plus its computed recommendation."""

    user_id: str = Field(..., min_length=1)
    interests: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    focus_areas: List[str] = Field(default_factory=list)

    # Titles, not references: renaming a career leaves old text as-is.
    recommended_careers: List[str] = Field(default_factory=list, max_length=10)
    confidence_score: int = Field(..., ge=0, le=100)
    summary: str = Field(default="")
