"""Services for CareerPilot.

The engine modules (scoring, matching, analytics, insights) are pure; the
remaining services wrap them with persistence and identity checks.
"""

from careerpilot.services.assessment_service import AssessmentService
from careerpilot.services.career_service import CareerService
from careerpilot.services.dashboard_service import DashboardService
from careerpilot.services.insights_service import InsightsService
from careerpilot.services.mentorship_service import MentorshipService
from careerpilot.services.scoring_service import ScoringService
from careerpilot.services.student_service import FeedbackService, GoalService, ProfileService

__all__ = [
    "AssessmentService",
    "CareerService",
    "DashboardService",
    "FeedbackService",
    "GoalService",
    "InsightsService",
    "MentorshipService",
    "ProfileService",
    "ScoringService",
]
