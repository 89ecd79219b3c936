"""Onboarding profile endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from careerpilot.core.dependencies import get_current_user, get_optional_user, get_profile_service
from careerpilot.schemas.student_schemas import (
    OnboardingStatusResponse,
    ProfileResponse,
    ProfileUpsertRequest,
)
from careerpilot.services.student_service import ProfileService
from careerpilot.utils.exceptions import ResourceNotFoundError

router = APIRouter()


@router.get("", response_model=ProfileResponse, summary="Get my profile")
async def get_profile(
    current_user: Dict[str, Any] = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.get_profile(current_user)
    if profile is None:
        raise ResourceNotFoundError("Profile not found", resource_type="profile")
    return ProfileResponse.from_document(profile)


@router.put("", response_model=ProfileResponse, summary="Create or update my profile")
async def upsert_profile(
    request: ProfileUpsertRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.upsert_profile(current_user, request.model_dump(exclude_unset=True))
    return ProfileResponse.from_document(profile)


@router.get("/onboarding", response_model=OnboardingStatusResponse, summary="Onboarding status")
async def onboarding_status(
    current_user: Optional[Dict[str, Any]] = Depends(get_optional_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> OnboardingStatusResponse:
    return OnboardingStatusResponse(**await profile_service.check_onboarding_status(current_user))
