"""Assessment endpoints: submit a self-report and list past results."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query, status

from careerpilot.core.config import get_settings
from careerpilot.core.dependencies import get_assessment_service, get_current_user
from careerpilot.schemas.assessment_schemas import (
    AssessmentResponse,
    AssessmentSubmitRequest,
    RecommendationResponse,
)
from careerpilot.services.assessment_service import AssessmentService

router = APIRouter()
settings = get_settings()


@router.post(
    "",
    response_model=RecommendationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit an assessment",
    description="Rank the career catalog against the submitted interests, strengths "
                "and focus areas, store the result and return the recommendation.",
)
async def submit_assessment(
    request: AssessmentSubmitRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    assessment_service: AssessmentService = Depends(get_assessment_service),
) -> RecommendationResponse:
    result = await assessment_service.submit_assessment(
        current_user,
        interests=request.interests,
        strengths=request.strengths,
        focus_areas=request.focus_areas,
    )
    return RecommendationResponse(
        recommended_careers=result.recommended_careers,
        confidence_score=result.confidence_score,
        summary=result.summary,
    )


@router.get("", response_model=List[AssessmentResponse], summary="List my assessments")
async def list_my_assessments(
    limit: int = Query(
        settings.USER_ASSESSMENT_HISTORY_LIMIT, ge=1, le=50, description="Maximum results"
    ),
    current_user: Dict[str, Any] = Depends(get_current_user),
    assessment_service: AssessmentService = Depends(get_assessment_service),
) -> List[AssessmentResponse]:
    assessments = await assessment_service.list_assessments(current_user, limit=limit)
    return [AssessmentResponse.from_document(assessment) for assessment in assessments]
