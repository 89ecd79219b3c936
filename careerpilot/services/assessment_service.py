"""Assessment submission and history.

Submission is the only write the recommendation engine triggers: validate,
rank the full catalog, then insert exactly one assessment document.
"""

from typing import Any, Dict, List, Optional, Sequence

from pymongo import DESCENDING

from careerpilot.core.config import get_settings
from careerpilot.core.security import require_user_id
from careerpilot.database.mongodb import MongoDBOperations
from careerpilot.models.assessment import Assessment
from careerpilot.services.career_service import CareerService
from careerpilot.services.scoring_service import (
    AssessmentSubmission,
    RecommendationResult,
    ScoringService,
)
from careerpilot.utils.constants import Collections
from careerpilot.utils.exceptions import ValidationError
from careerpilot.utils.helpers import parse_token_list
from careerpilot.utils.logger import get_business_logger

settings = get_settings()
logger = get_business_logger()

NEWEST_FIRST = [("created_at", DESCENDING)]


class AssessmentService:
    """Service for career assessments."""

    def __init__(self, db=None, career_service=None, scoring_service=None):
        self.db = db or MongoDBOperations
        self.career_service = career_service or CareerService(db=self.db)
        self.scoring_service = scoring_service or ScoringService()

    @staticmethod
    def build_submission(
        interests: Sequence[str],
        strengths: Sequence[str],
        focus_areas: Optional[Sequence[str]] = None,
    ) -> AssessmentSubmission:
        """Sanitise raw form values into a submission.

        Raises:
            ValidationError: If strengths or interests end up empty
        """
        submission = AssessmentSubmission(
            strengths=parse_token_list(strengths),
            interests=parse_token_list(interests),
            focus_areas=parse_token_list(focus_areas),
        )

        missing = [
            name for name, values in (
                ("strengths", submission.strengths),
                ("interests", submission.interests),
            )
            if not values
        ]
        if missing:
            raise ValidationError(
                "Add at least one strength and one interest.",
                field=missing[0],
                validation_errors=[f"{name} must not be empty" for name in missing],
            )
        return submission

    async def submit_assessment(
        self,
        user: Optional[Dict[str, Any]],
        interests: Sequence[str],
        strengths: Sequence[str],
        focus_areas: Optional[Sequence[str]] = None,
    ) -> RecommendationResult:
        """Score a submission against the catalog and store it.

        Identity and input are checked before the catalog is read, so a
        rejected submission leaves nothing behind.

        Args:
            user: Resolved identity (``{"id", "role"}``) or None
            interests: Raw interest tokens
            strengths: Raw strength tokens
            focus_areas: Optional growth focus tokens

        Returns:
            RecommendationResult: What was stored for this submission

        Raises:
            AuthenticationError: When no identity was resolved
            ValidationError: When strengths or interests are empty
        """
        user_id = require_user_id(user)
        submission = self.build_submission(interests, strengths, focus_areas)

        catalog = await self.career_service.list_careers()
        result = self.scoring_service.recommend(submission, catalog)

        assessment = Assessment(
            user_id=user_id,
            interests=submission.interests,
            strengths=submission.strengths,
            focus_areas=submission.focus_areas,
            recommended_careers=result.recommended_careers,
            confidence_score=result.confidence_score,
            summary=result.summary,
        )
        await self.db.insert_one(Collections.ASSESSMENTS, assessment.to_mongo())

        logger.info(
            "Assessment submitted",
            extra={
                "user_id": user_id,
                "assessment_id": assessment.id_str,
                "recommendations": len(result.recommended_careers),
                "confidence_score": result.confidence_score,
            }
        )
        return result

    async def list_assessments(
        self,
        user: Optional[Dict[str, Any]],
        limit: Optional[int] = None,
    ) -> List[Assessment]:
        """The user's own assessments, newest first."""
        user_id = require_user_id(user)
        documents = await self.db.find_many(
            Collections.ASSESSMENTS,
            {"user_id": user_id},
            sort=NEWEST_FIRST,
            limit=limit or settings.USER_ASSESSMENT_HISTORY_LIMIT,
        )
        return [Assessment.from_mongo(doc) for doc in documents]

    async def get_latest_assessment(self, user: Optional[Dict[str, Any]]) -> Optional[Assessment]:
        assessments = await self.list_assessments(user, limit=1)
        return assessments[0] if assessments else None

    async def list_recent_assessments(self, limit: Optional[int] = None) -> List[Assessment]:
        """Latest assessments across all users, for admin analytics."""
        documents = await self.db.find_many(
            Collections.ASSESSMENTS,
            {},
            sort=NEWEST_FIRST,
            limit=limit or settings.ADMIN_RECENT_ASSESSMENTS,
        )
        return [Assessment.from_mongo(doc) for doc in documents]

    async def count_assessments(self) -> int:
        return await self.db.count_documents(Collections.ASSESSMENTS)


__all__ = ["AssessmentService"]
