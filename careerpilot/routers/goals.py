"""Personal goal endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Path, status

from careerpilot.core.dependencies import get_current_user, get_goal_service
from careerpilot.schemas.base import MessageResponse
from careerpilot.schemas.student_schemas import (
    GoalCreateRequest,
    GoalResponse,
    GoalStatusUpdateRequest,
)
from careerpilot.services.student_service import GoalService

router = APIRouter()


@router.get("", response_model=List[GoalResponse], summary="List my goals")
async def list_goals(
    current_user: Dict[str, Any] = Depends(get_current_user),
    goal_service: GoalService = Depends(get_goal_service),
) -> List[GoalResponse]:
    goals = await goal_service.list_goals(current_user)
    return [GoalResponse.from_document(goal) for goal in goals]


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED, summary="Create a goal")
async def create_goal(
    request: GoalCreateRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    goal_service: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    goal = await goal_service.create_goal(
        current_user,
        title=request.title,
        category=request.category,
        description=request.description,
        status=request.status,
        deadline=request.deadline,
    )
    return GoalResponse.from_document(goal)


@router.patch("/{goal_id}", response_model=GoalResponse, summary="Change a goal's status")
async def update_goal_status(
    request: GoalStatusUpdateRequest,
    goal_id: str = Path(..., description="Goal id"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    goal_service: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    goal = await goal_service.update_goal_status(current_user, goal_id, request.status)
    return GoalResponse.from_document(goal)


@router.delete("/{goal_id}", response_model=MessageResponse, summary="Delete a goal")
async def delete_goal(
    goal_id: str = Path(..., description="Goal id"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    goal_service: GoalService = Depends(get_goal_service),
) -> MessageResponse:
    await goal_service.delete_goal(current_user, goal_id)
    return MessageResponse(message="Goal deleted")
