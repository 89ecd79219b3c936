"""FastAPI dependency injection for CareerPilot.

Identity resolution from the bearer token and lazily created service
singletons. Tests swap any of these through ``app.dependency_overrides``.
"""

from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from careerpilot.core.security import decode_access_token, user_from_claims
from careerpilot.services.assessment_service import AssessmentService
from careerpilot.services.career_service import CareerService
from careerpilot.services.dashboard_service import DashboardService
from careerpilot.services.insights_service import InsightsService
from careerpilot.services.mentorship_service import MentorshipService
from careerpilot.services.student_service import FeedbackService, GoalService, ProfileService
from careerpilot.utils.exceptions import AuthenticationError, AuthorizationError
from careerpilot.utils.logger import get_security_logger

logger = get_security_logger()

# Missing credentials are reported through AuthenticationError, not FastAPI's 403
security = HTTPBearer(auto_error=False)

# Global service instances (singleton pattern)
_career_service: Optional[CareerService] = None
_assessment_service: Optional[AssessmentService] = None
_mentorship_service: Optional[MentorshipService] = None
_dashboard_service: Optional[DashboardService] = None
_insights_service: Optional[InsightsService] = None
_profile_service: Optional[ProfileService] = None
_goal_service: Optional[GoalService] = None
_feedback_service: Optional[FeedbackService] = None


# Authentication Dependencies

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """Resolve the caller from the bearer token.

    Returns:
        Dict with ``id``, ``role``, ``email`` and ``name``

    Raises:
        AuthenticationError: Missing, invalid or expired token
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    user = user_from_claims(decode_access_token(credentials.credentials))
    logger.debug(f"Authenticated user: {user['id']}")
    return user


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[Dict[str, Any]]:
    """Caller identity when a valid token is present, otherwise None."""
    if credentials is None:
        return None
    try:
        return await get_current_user(credentials)
    except AuthenticationError:
        return None


def require_role(required_role: str):
    """Dependency factory for requiring a specific role.

    Args:
        required_role: Required role string

    Returns:
        Dependency function that validates the role
    """
    async def role_checker(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        if current_user.get("role") != required_role:
            raise AuthorizationError(
                f"Required role: {required_role}",
                user_id=current_user.get("id"),
                required_role=required_role,
            )
        return current_user

    return role_checker


# Service Dependencies

async def get_career_service() -> CareerService:
    global _career_service
    if _career_service is None:
        _career_service = CareerService()
    return _career_service


async def get_assessment_service() -> AssessmentService:
    global _assessment_service
    if _assessment_service is None:
        _assessment_service = AssessmentService(career_service=await get_career_service())
    return _assessment_service


async def get_mentorship_service() -> MentorshipService:
    global _mentorship_service
    if _mentorship_service is None:
        _mentorship_service = MentorshipService()
    return _mentorship_service


async def get_profile_service() -> ProfileService:
    global _profile_service
    if _profile_service is None:
        _profile_service = ProfileService()
    return _profile_service


async def get_goal_service() -> GoalService:
    global _goal_service
    if _goal_service is None:
        _goal_service = GoalService()
    return _goal_service


async def get_feedback_service() -> FeedbackService:
    global _feedback_service
    if _feedback_service is None:
        _feedback_service = FeedbackService()
    return _feedback_service


async def get_dashboard_service() -> DashboardService:
    global _dashboard_service
    if _dashboard_service is None:
        _dashboard_service = DashboardService(
            assessment_service=await get_assessment_service(),
            mentorship_service=await get_mentorship_service(),
            career_service=await get_career_service(),
        )
    return _dashboard_service


async def get_insights_service() -> InsightsService:
    global _insights_service
    if _insights_service is None:
        _insights_service = InsightsService(
            career_service=await get_career_service(),
            profile_service=await get_profile_service(),
            assessment_service=await get_assessment_service(),
        )
    return _insights_service


__all__ = [
    "get_assessment_service",
    "get_career_service",
    "get_current_user",
    "get_dashboard_service",
    "get_feedback_service",
    "get_goal_service",
    "get_insights_service",
    "get_mentorship_service",
    "get_optional_user",
    "get_profile_service",
    "require_role",
]
