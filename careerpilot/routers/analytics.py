"""Admin analytics endpoints.

``/overview`` reads the live collections. ``/summary`` and
``/counselor-matches`` run the same aggregates over snapshots posted by the
client, which keeps them usable for previews and exports.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from careerpilot.core.dependencies import get_dashboard_service, require_role
from careerpilot.schemas.analytics_schemas import (
    AdminOverviewResponse,
    AnalyticsSummaryRequest,
    AnalyticsSummaryResponse,
    CounselorMatchRequest,
    CounselorMatchResponse,
)
from careerpilot.services.analytics_service import compute_analytics_summary
from careerpilot.services.dashboard_service import DashboardService
from careerpilot.services.matching_service import compute_counselor_matches
from careerpilot.utils.constants import UserRole

router = APIRouter()

require_admin = require_role(UserRole.ADMIN.value)


@router.get("/overview", response_model=AdminOverviewResponse, summary="Admin dashboard overview")
async def get_overview(
    current_user: Dict[str, Any] = Depends(require_admin),
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> AdminOverviewResponse:
    overview = await dashboard_service.get_admin_overview(current_user)
    return AdminOverviewResponse.model_validate(overview, from_attributes=True)


@router.post("/summary", response_model=AnalyticsSummaryResponse, summary="Summarise session snapshots")
async def summarize(
    request: AnalyticsSummaryRequest,
    current_user: Dict[str, Any] = Depends(require_admin),
) -> AnalyticsSummaryResponse:
    summary = compute_analytics_summary(request.sessions, request.assessments)
    return AnalyticsSummaryResponse.model_validate(summary)


@router.post(
    "/counselor-matches",
    response_model=List[CounselorMatchResponse],
    summary="Match sampled assessments to counselors",
)
async def counselor_matches(
    request: CounselorMatchRequest,
    current_user: Dict[str, Any] = Depends(require_admin),
) -> List[CounselorMatchResponse]:
    matches = compute_counselor_matches(
        request.assessments,
        request.counselors,
        sample_size=request.sample_size,
    )
    return [CounselorMatchResponse.model_validate(match) for match in matches]
