"""Document models for CareerPilot."""

from careerpilot.models.assessment import Assessment
from careerpilot.models.base import BaseDocument, PyObjectId, to_object_id
from careerpilot.models.career import CareerPath, SavedCareer
from careerpilot.models.mentorship import Counselor, MentorshipSession
from careerpilot.models.student import Feedback, Goal, Profile

__all__ = [
    "Assessment",
    "BaseDocument",
    "CareerPath",
    "Counselor",
    "Feedback",
    "Goal",
    "MentorshipSession",
    "Profile",
    "PyObjectId",
    "SavedCareer",
    "to_object_id",
]
