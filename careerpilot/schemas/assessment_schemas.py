"""Assessment request and response schemas."""

from datetime import datetime
from typing import List, Union

from pydantic import Field, field_validator

from careerpilot.schemas.base import BaseSchema, DocumentResponse, sanitize_tokens


class AssessmentSubmitRequest(BaseSchema):
    """Self-report submitted from the assessment form.

    Each field accepts a list of strings or a single comma separated string.
    Emptiness is checked by the service so the error carries a user-facing
    message rather than a schema error.
    """

    interests: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    focus_areas: List[str] = Field(default_factory=list)

    @field_validator("interests", "strengths", "focus_areas", mode="before")
    @classmethod
    def split_tokens(cls, v: Union[str, List[str], None]) -> List[str]:
        return sanitize_tokens(v)

    model_config = {
        **BaseSchema.model_config,
        "json_schema_extra": {
            "example": {
                "interests": ["Data", "AI"],
                "strengths": ["Python", "Statistics"],
                "focus_areas": ["MLOps"],
            }
        },
    }


class RecommendationResponse(BaseSchema):
    """What a submission returns to the caller."""

    recommended_careers: List[str] = Field(default_factory=list)
    confidence_score: int = Field(..., ge=0, le=100)
    summary: str


class AssessmentResponse(DocumentResponse, RecommendationResponse):
    """A stored assessment."""

    user_id: str
    interests: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    focus_areas: List[str] = Field(default_factory=list)
    created_at: datetime


__all__ = [
    "AssessmentResponse",
    "AssessmentSubmitRequest",
    "RecommendationResponse",
]
