"""Mentorship endpoints: counselors and session booking."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from careerpilot.core.dependencies import get_current_user, get_mentorship_service, require_role
from careerpilot.schemas.base import SeedResponse
from careerpilot.schemas.mentorship_schemas import (
    CounselorResponse,
    SessionBookRequest,
    SessionResponse,
)
from careerpilot.services.mentorship_service import MentorshipService
from careerpilot.utils.constants import UserRole

router = APIRouter()


@router.get("/counselors", response_model=List[CounselorResponse], summary="List counselors")
async def list_counselors(
    current_user: Dict[str, Any] = Depends(get_current_user),
    mentorship_service: MentorshipService = Depends(get_mentorship_service),
) -> List[CounselorResponse]:
    counselors = await mentorship_service.list_counselors()
    return [CounselorResponse.from_document(counselor) for counselor in counselors]


@router.post(
    "/counselors/seed",
    response_model=SeedResponse,
    summary="Seed the default counselors",
)
async def seed_counselors(
    current_user: Dict[str, Any] = Depends(require_role(UserRole.ADMIN.value)),
    mentorship_service: MentorshipService = Depends(get_mentorship_service),
) -> SeedResponse:
    inserted = await mentorship_service.seed_counselors(current_user)
    message = "Counselors seeded" if inserted else "Counselors already present"
    return SeedResponse(inserted=inserted, message=message)


@router.get("/sessions", response_model=List[SessionResponse], summary="List my sessions")
async def list_sessions(
    current_user: Dict[str, Any] = Depends(get_current_user),
    mentorship_service: MentorshipService = Depends(get_mentorship_service),
) -> List[SessionResponse]:
    entries = await mentorship_service.list_sessions(current_user)
    return [
        SessionResponse.from_document(
            entry["session"],
            counselor=entry["counselor"].to_dict() if entry["counselor"] else None,
        )
        for entry in entries
    ]


@router.post(
    "/sessions",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Book a mentorship session",
)
async def book_session(
    request: SessionBookRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    mentorship_service: MentorshipService = Depends(get_mentorship_service),
) -> SessionResponse:
    session = await mentorship_service.book_session(
        current_user,
        counselor_id=request.counselor_id,
        session_date=request.session_date,
        goal=request.goal,
    )
    return SessionResponse.from_document(session)
