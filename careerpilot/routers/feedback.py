"""Platform feedback endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from careerpilot.core.dependencies import get_current_user, get_feedback_service
from careerpilot.schemas.student_schemas import FeedbackCreateRequest, FeedbackResponse
from careerpilot.services.student_service import FeedbackService

router = APIRouter()


@router.get("", response_model=List[FeedbackResponse], summary="My recent feedback")
async def list_my_feedback(
    current_user: Dict[str, Any] = Depends(get_current_user),
    feedback_service: FeedbackService = Depends(get_feedback_service),
) -> List[FeedbackResponse]:
    entries = await feedback_service.list_my_feedback(current_user)
    return [FeedbackResponse.from_document(entry) for entry in entries]


@router.post("", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED, summary="Leave feedback")
async def submit_feedback(
    request: FeedbackCreateRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    feedback_service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackResponse:
    feedback = await feedback_service.submit_feedback(
        current_user,
        rating=request.rating,
        mood=request.mood,
        category=request.category,
        message=request.message,
    )
    return FeedbackResponse.from_document(feedback)
