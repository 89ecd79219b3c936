"""Admin dashboard overview.

Pull model: every call refetches the collections and recomputes every
aggregate, so the overview always reflects the current data. Nothing here is
cached.
"""

from typing import Any, Dict, Optional

from careerpilot.core.security import ensure_admin
from careerpilot.services.analytics_service import (
    compute_analytics_summary,
    counselor_performance,
    detect_duplicate_accounts,
    feature_usage,
)
from careerpilot.services.assessment_service import AssessmentService
from careerpilot.services.career_service import CareerService
from careerpilot.services.matching_service import compute_counselor_matches
from careerpilot.services.mentorship_service import MentorshipService
from careerpilot.utils.datetime_utils import utc_now
from careerpilot.utils.logger import PerformanceLogger, get_business_logger

logger = get_business_logger()


class DashboardService:
    """Builds the admin overview from freshly read collections."""

    def __init__(self, assessment_service=None, mentorship_service=None, career_service=None):
        self.career_service = career_service or CareerService()
        self.assessment_service = assessment_service or AssessmentService(
            career_service=self.career_service
        )
        self.mentorship_service = mentorship_service or MentorshipService()

    async def get_admin_overview(self, user: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Analytics summary, counselor matches, duplicate report, usage and workload.

        Raises:
            AuthenticationError: When no identity was resolved
            AuthorizationError: When the caller is not an admin
        """
        ensure_admin(user)

        with PerformanceLogger("admin_overview", logger=logger):
            sessions = await self.mentorship_service.list_all_sessions()
            counselors = await self.mentorship_service.list_counselors()
            assessments = await self.assessment_service.list_recent_assessments()
            careers = await self.career_service.list_careers()
            assessment_count = await self.assessment_service.count_assessments()

            overview = {
                "summary": compute_analytics_summary(sessions, assessments),
                "counselor_matches": compute_counselor_matches(assessments, counselors),
                "duplicate_report": detect_duplicate_accounts(sessions),
                "feature_usage": feature_usage(len(careers), len(sessions), assessment_count),
                "counselor_performance": counselor_performance(counselors, sessions),
                "generated_at": utc_now(),
            }

        return overview


__all__ = ["DashboardService"]
