"""Career catalog endpoints.

Reads are open to any signed-in user; seeding and editing are admin actions.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Path, status

from careerpilot.core.dependencies import get_career_service, get_current_user, require_role
from careerpilot.schemas.base import SeedResponse
from careerpilot.schemas.career_schemas import (
    CareerPathResponse,
    CareerUpdateRequest,
    CategoryListResponse,
    SavedCareerResponse,
    SaveToggleResponse,
)
from careerpilot.services.career_service import CareerService
from careerpilot.utils.constants import UserRole

router = APIRouter()


@router.get("", response_model=List[CareerPathResponse], summary="List the career catalog")
async def list_careers(
    current_user: Dict[str, Any] = Depends(get_current_user),
    career_service: CareerService = Depends(get_career_service),
) -> List[CareerPathResponse]:
    careers = await career_service.list_careers()
    return [CareerPathResponse.from_document(career) for career in careers]


@router.get("/categories", response_model=CategoryListResponse, summary="List career categories")
async def list_categories(
    current_user: Dict[str, Any] = Depends(get_current_user),
    career_service: CareerService = Depends(get_career_service),
) -> CategoryListResponse:
    return CategoryListResponse(categories=await career_service.list_categories())


@router.get("/saved", response_model=List[SavedCareerResponse], summary="List my saved careers")
async def list_saved_careers(
    current_user: Dict[str, Any] = Depends(get_current_user),
    career_service: CareerService = Depends(get_career_service),
) -> List[SavedCareerResponse]:
    saved = await career_service.list_saved_careers(current_user)
    return [
        SavedCareerResponse(
            saved_career_id=entry["saved_career_id"],
            career=CareerPathResponse.from_document(entry["career"]),
        )
        for entry in saved
    ]


@router.post(
    "/seed",
    response_model=SeedResponse,
    summary="Seed the default catalog",
    description="Insert the default career paths when the catalog is empty.",
)
async def seed_catalog(
    current_user: Dict[str, Any] = Depends(require_role(UserRole.ADMIN.value)),
    career_service: CareerService = Depends(get_career_service),
) -> SeedResponse:
    inserted = await career_service.seed_catalog(current_user)
    message = "Career catalog seeded" if inserted else "Career catalog already populated"
    return SeedResponse(inserted=inserted, message=message)


@router.get("/{career_path_id}", response_model=CareerPathResponse, summary="Get a career path")
async def get_career(
    career_path_id: str = Path(..., description="Career path id"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    career_service: CareerService = Depends(get_career_service),
) -> CareerPathResponse:
    career = await career_service.get_career(career_path_id)
    return CareerPathResponse.from_document(career)


@router.post(
    "/{career_path_id}/save",
    response_model=SaveToggleResponse,
    status_code=status.HTTP_200_OK,
    summary="Save or unsave a career",
)
async def toggle_saved_career(
    career_path_id: str = Path(..., description="Career path id"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    career_service: CareerService = Depends(get_career_service),
) -> SaveToggleResponse:
    toggle_status = await career_service.toggle_saved_career(current_user, career_path_id)
    return SaveToggleResponse(career_path_id=career_path_id, status=toggle_status)


@router.patch("/{career_path_id}", response_model=CareerPathResponse, summary="Edit a career path")
async def update_career(
    request: CareerUpdateRequest,
    career_path_id: str = Path(..., description="Career path id"),
    current_user: Dict[str, Any] = Depends(require_role(UserRole.ADMIN.value)),
    career_service: CareerService = Depends(get_career_service),
) -> CareerPathResponse:
    career = await career_service.update_career(
        current_user,
        career_path_id,
        request.model_dump(exclude_unset=True),
    )
    return CareerPathResponse.from_document(career)
