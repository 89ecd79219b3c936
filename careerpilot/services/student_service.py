"""Student-owned records: onboarding profile, goals and feedback."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING

from careerpilot.core.security import require_user_id
from careerpilot.database.mongodb import MongoDBOperations
from careerpilot.models.base import to_object_id
from careerpilot.models.student import Feedback, Goal, Profile
from careerpilot.utils.constants import Collections, GoalStatus
from careerpilot.utils.exceptions import ResourceNotFoundError, ValidationError
from careerpilot.utils.helpers import js_round, parse_token_list
from careerpilot.utils.logger import get_business_logger

logger = get_business_logger()

PROFILE_FIELDS = (
    "headline",
    "bio",
    "skills",
    "interests",
    "current_role",
    "target_role",
    "experience_years",
)


class ProfileService:
    """Onboarding profile, one per user."""

    def __init__(self, db=None):
        self.db = db or MongoDBOperations

    async def get_profile(self, user: Optional[Dict[str, Any]]) -> Optional[Profile]:
        user_id = require_user_id(user)
        document = await self.db.find_one(Collections.PROFILES, {"user_id": user_id})
        return Profile.from_mongo(document) if document else None

    async def upsert_profile(self, user: Optional[Dict[str, Any]], data: Dict[str, Any]) -> Profile:
        """Create the user's profile or patch the existing one.

        Raises:
            ValidationError: Without at least one skill and one interest
        """
        user_id = require_user_id(user)
        fields = {key: data.get(key) for key in PROFILE_FIELDS if key in data}
        fields["skills"] = parse_token_list(fields.get("skills"))
        fields["interests"] = parse_token_list(fields.get("interests"))

        if not fields["skills"] or not fields["interests"]:
            raise ValidationError(
                "Add at least one skill and one interest.",
                field="skills" if not fields["skills"] else "interests",
            )

        existing = await self.db.find_one(Collections.PROFILES, {"user_id": user_id})
        if existing:
            await self.db.update_one(
                Collections.PROFILES,
                {"_id": existing["_id"]},
                {"$set": fields},
            )
            profile = Profile.from_mongo({**existing, **fields})
            profile.update_timestamps()
            logger.info("Profile updated", extra={"user_id": user_id})
            return profile

        profile = Profile(user_id=user_id, **fields)
        await self.db.insert_one(Collections.PROFILES, profile.to_mongo())
        logger.info("Profile created", extra={"user_id": user_id})
        return profile

    async def check_onboarding_status(self, user: Optional[Dict[str, Any]]) -> Dict[str, bool]:
        """Whether the caller is signed in and has completed onboarding."""
        if not user or not user.get("id"):
            return {"is_onboarded": False, "is_authenticated": False}
        profile = await self.get_profile(user)
        return {"is_onboarded": profile is not None, "is_authenticated": True}


class GoalService:
    """Personal goals; only the owner may change or remove one."""

    def __init__(self, db=None):
        self.db = db or MongoDBOperations

    async def list_goals(self, user: Optional[Dict[str, Any]]) -> List[Goal]:
        user_id = require_user_id(user)
        documents = await self.db.find_many(
            Collections.GOALS,
            {"user_id": user_id},
            sort=[("created_at", ASCENDING)],
        )
        return [Goal.from_mongo(doc) for doc in documents]

    async def create_goal(
        self,
        user: Optional[Dict[str, Any]],
        title: str,
        category: str = "General",
        description: Optional[str] = None,
        status: GoalStatus = GoalStatus.PENDING,
        deadline: Optional[datetime] = None,
    ) -> Goal:
        user_id = require_user_id(user)
        if not (title or "").strip():
            raise ValidationError("Goal title is required", field="title")

        goal = Goal(
            user_id=user_id,
            title=title.strip(),
            description=description,
            status=status,
            deadline=deadline,
            category=(category or "General").strip() or "General",
        )
        await self.db.insert_one(Collections.GOALS, goal.to_mongo())
        logger.info("Goal created", extra={"user_id": user_id, "goal_id": goal.id_str})
        return goal

    async def _get_owned_goal(self, user_id: str, goal_id: str) -> Goal:
        """Load a goal owned by ``user_id``.

        Unknown ids and other users' goals are indistinguishable to the caller.
        """
        document = None
        goal_oid = to_object_id(goal_id)
        if goal_oid is not None:
            document = await self.db.find_one_by_id(Collections.GOALS, goal_oid)
        if document is None or document.get("user_id") != user_id:
            raise ResourceNotFoundError(
                "Goal not found or unauthorized",
                resource_type="goal",
                resource_id=str(goal_id),
            )
        return Goal.from_mongo(document)

    async def update_goal_status(
        self,
        user: Optional[Dict[str, Any]],
        goal_id: str,
        status: GoalStatus,
    ) -> Goal:
        user_id = require_user_id(user)
        goal = await self._get_owned_goal(user_id, goal_id)
        status_value = GoalStatus(status).value

        await self.db.update_one(Collections.GOALS, {"_id": goal.id}, {"$set": {"status": status_value}})
        return goal.model_copy(update={"status": status_value})

    async def delete_goal(self, user: Optional[Dict[str, Any]], goal_id: str) -> bool:
        user_id = require_user_id(user)
        goal = await self._get_owned_goal(user_id, goal_id)
        deleted = await self.db.delete_one(Collections.GOALS, {"_id": goal.id})
        logger.info("Goal deleted", extra={"user_id": user_id, "goal_id": goal.id_str})
        return deleted


class FeedbackService:
    """Platform feedback."""

    RECENT_LIMIT = 5

    def __init__(self, db=None):
        self.db = db or MongoDBOperations

    async def submit_feedback(
        self,
        user: Optional[Dict[str, Any]],
        rating: float,
        mood: str = "",
        category: str = "",
        message: str = "",
    ) -> Feedback:
        """Store feedback; the rating is checked before rounding.

        Raises:
            ValidationError: Rating outside 1..5
        """
        user_id = require_user_id(user)
        if rating < 1 or rating > 5:
            raise ValidationError("Rating must be between 1 and 5", field="rating", value=rating)

        feedback = Feedback(
            user_id=user_id,
            rating=js_round(rating),
            mood=mood or "",
            category=category or "",
            message=(message or "").strip(),
        )
        await self.db.insert_one(Collections.FEEDBACK, feedback.to_mongo())
        logger.info("Feedback submitted", extra={"user_id": user_id, "rating": feedback.rating})
        return feedback

    async def list_my_feedback(self, user: Optional[Dict[str, Any]]) -> List[Feedback]:
        user_id = require_user_id(user)
        documents = await self.db.find_many(
            Collections.FEEDBACK,
            {"user_id": user_id},
            sort=[("created_at", DESCENDING)],
            limit=self.RECENT_LIMIT,
        )
        return [Feedback.from_mongo(doc) for doc in documents]


__all__ = ["FeedbackService", "GoalService", "ProfileService"]
