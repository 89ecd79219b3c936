"""Student dashboard insight endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Path

from careerpilot.core.dependencies import get_current_user, get_insights_service
from careerpilot.schemas.insight_schemas import (
    LearningTaskResponse,
    MockAnswerRequest,
    MockAnswerResponse,
    ResumeEvaluationRequest,
    ResumeEvaluationResponse,
    SkillCoverageRequest,
    SkillCoverageResponse,
)
from careerpilot.services.insights_service import InsightsService, score_mock_answer

router = APIRouter()


@router.post("/skill-coverage", response_model=SkillCoverageResponse, summary="Skill coverage for a career")
async def skill_coverage(
    request: SkillCoverageRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    insights_service: InsightsService = Depends(get_insights_service),
) -> SkillCoverageResponse:
    coverage = await insights_service.skill_coverage(current_user, request.career_path_id)
    return SkillCoverageResponse.model_validate(coverage)


@router.post("/resume", response_model=ResumeEvaluationResponse, summary="Keyword check of a resume")
async def resume_report(
    request: ResumeEvaluationRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    insights_service: InsightsService = Depends(get_insights_service),
) -> ResumeEvaluationResponse:
    report = await insights_service.resume_report(request.resume, request.career_path_id)
    return ResumeEvaluationResponse.model_validate(report)


@router.post("/mock-answer", response_model=MockAnswerResponse, summary="Score a mock interview answer")
async def mock_answer(
    request: MockAnswerRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> MockAnswerResponse:
    return MockAnswerResponse.model_validate(score_mock_answer(request.answer, request.focus))


@router.get(
    "/learning-tasks/{career_path_id}",
    response_model=List[LearningTaskResponse],
    summary="Starter learning tasks for a career",
)
async def learning_tasks(
    career_path_id: str = Path(..., description="Career path id"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    insights_service: InsightsService = Depends(get_insights_service),
) -> List[LearningTaskResponse]:
    tasks = await insights_service.learning_tasks(career_path_id)
    return [LearningTaskResponse.model_validate(task) for task in tasks]
