"""Student dashboard insight schemas."""

from typing import List, Optional

from pydantic import Field

from careerpilot.schemas.base import BaseSchema
from careerpilot.utils.constants import LearningTaskType


class InsightBaseSchema(BaseSchema):
    model_config = {**BaseSchema.model_config, "from_attributes": True}


class SkillCoverageRequest(BaseSchema):
    career_path_id: Optional[str] = None


class SkillCoverageResponse(InsightBaseSchema):
    core_match: int
    growth_match: int
    interest_fit: int


class ResumeEvaluationRequest(BaseSchema):
    # Whitespace is part of the scoring, so it is not stripped here
    model_config = {**BaseSchema.model_config, "str_strip_whitespace": False}

    resume: str = Field(..., min_length=1, max_length=20000)
    career_path_id: Optional[str] = None


class ResumeEvaluationResponse(InsightBaseSchema):
    score: int
    keyword_matches: List[str] = Field(default_factory=list)
    missing_keywords: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class MockAnswerRequest(BaseSchema):
    model_config = {**BaseSchema.model_config, "str_strip_whitespace": False}

    answer: str = Field(..., min_length=1, max_length=10000)
    focus: str = "General"


class MockAnswerResponse(InsightBaseSchema):
    score: int
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)


class LearningTaskResponse(InsightBaseSchema):
    id: str
    label: str
    type: LearningTaskType
    completed: bool = False


__all__ = [
    "LearningTaskResponse",
    "MockAnswerRequest",
    "MockAnswerResponse",
    "ResumeEvaluationRequest",
    "ResumeEvaluationResponse",
    "SkillCoverageRequest",
    "SkillCoverageResponse",
]
