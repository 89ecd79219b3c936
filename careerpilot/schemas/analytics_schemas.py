"""Admin analytics schemas.

The snapshot schemas let an admin client post collections it already holds
and get the same aggregates the overview endpoint computes from the database.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from careerpilot.schemas.base import BaseSchema


class AnalyticsBaseSchema(BaseSchema):
    model_config = {**BaseSchema.model_config, "from_attributes": True}


# Snapshot inputs

class SessionSnapshot(AnalyticsBaseSchema):
    user_id: str = Field(..., min_length=1)
    session_date: datetime
    counselor_id: Optional[str] = None


class AssessmentSnapshot(AnalyticsBaseSchema):
    user_id: Optional[str] = None
    focus_areas: List[str] = Field(default_factory=list)
    recommended_careers: List[str] = Field(default_factory=list)
    summary: str = ""


class CounselorSnapshot(AnalyticsBaseSchema):
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    focus_areas: List[str] = Field(default_factory=list)
    rating: float = 0.0


class AnalyticsSummaryRequest(BaseSchema):
    sessions: List[SessionSnapshot] = Field(default_factory=list)
    assessments: List[AssessmentSnapshot] = Field(default_factory=list)


class CounselorMatchRequest(BaseSchema):
    assessments: List[AssessmentSnapshot] = Field(default_factory=list)
    counselors: List[CounselorSnapshot] = Field(default_factory=list)
    sample_size: Optional[int] = Field(None, ge=0)


# Outputs

class AnalyticsSummaryResponse(AnalyticsBaseSchema):
    peak_hour_label: str
    top_career: str
    total_sessions: int
    unique_learners: int


class CounselorMatchResponse(AnalyticsBaseSchema):
    student_focus: str
    counselor_name: str
    score_percent: int = Field(..., ge=0, le=100)


class DuplicateReportResponse(AnalyticsBaseSchema):
    duplicates: List[str] = Field(default_factory=list)
    suspicious_logins: bool = False


class FeatureUsageResponse(AnalyticsBaseSchema):
    feature: str
    usage: int


class CounselorPerformanceResponse(AnalyticsBaseSchema):
    name: str
    sessions: int
    rating: float
    focus_areas: str
    response_time: str


class AdminOverviewResponse(AnalyticsBaseSchema):
    """Everything the admin dashboard shows, recomputed per request."""

    summary: AnalyticsSummaryResponse
    counselor_matches: List[CounselorMatchResponse] = Field(default_factory=list)
    duplicate_report: DuplicateReportResponse
    feature_usage: List[FeatureUsageResponse] = Field(default_factory=list)
    counselor_performance: List[CounselorPerformanceResponse] = Field(default_factory=list)
    generated_at: datetime


__all__ = [
    "AdminOverviewResponse",
    "AnalyticsSummaryRequest",
    "AnalyticsSummaryResponse",
    "AssessmentSnapshot",
    "CounselorMatchRequest",
    "CounselorMatchResponse",
    "CounselorPerformanceResponse",
    "CounselorSnapshot",
    "DuplicateReportResponse",
    "FeatureUsageResponse",
    "SessionSnapshot",
]
