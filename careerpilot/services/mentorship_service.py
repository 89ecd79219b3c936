"""Mentorship service: counselors and booked sessions."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING

from careerpilot.core.security import ensure_admin, require_user_id
from careerpilot.database.mongodb import MongoDBOperations
from careerpilot.models.base import to_object_id
from careerpilot.models.mentorship import Counselor, MentorshipSession
from careerpilot.utils.constants import DEFAULT_COUNSELORS, Collections, SessionStatus
from careerpilot.utils.datetime_utils import ensure_utc, is_in_future
from careerpilot.utils.exceptions import ResourceNotFoundError, ValidationError
from careerpilot.utils.logger import get_business_logger

logger = get_business_logger()

# Counselor order is the tie-break order for matching
COUNSELOR_SORT = [("_id", ASCENDING)]


class MentorshipService:
    """Service for counselors and mentorship sessions."""

    def __init__(self, db=None):
        self.db = db or MongoDBOperations

    async def list_counselors(self) -> List[Counselor]:
        documents = await self.db.find_many(Collections.COUNSELORS, {}, sort=COUNSELOR_SORT)
        return [Counselor.from_mongo(doc) for doc in documents]

    async def list_sessions(self, user: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """The user's sessions, newest first, each with its counselor.

        The counselor is None when it has since been removed.

        Returns:
            List of ``{"session", "counselor"}`` entries
        """
        user_id = require_user_id(user)
        documents = await self.db.find_many(
            Collections.MENTORSHIP_SESSIONS,
            {"user_id": user_id},
            sort=[("session_date", DESCENDING)],
        )

        counselors: Dict[str, Optional[Counselor]] = {}
        enriched = []
        for doc in documents:
            session = MentorshipSession.from_mongo(doc)
            key = str(session.counselor_id)
            if key not in counselors:
                counselor_doc = await self.db.find_one_by_id(Collections.COUNSELORS, session.counselor_id)
                counselors[key] = Counselor.from_mongo(counselor_doc) if counselor_doc else None
            enriched.append({"session": session, "counselor": counselors[key]})
        return enriched

    async def list_all_sessions(self) -> List[MentorshipSession]:
        """Every session across users, oldest first; analytics input."""
        documents = await self.db.find_many(
            Collections.MENTORSHIP_SESSIONS,
            {},
            sort=[("session_date", ASCENDING)],
        )
        return [MentorshipSession.from_mongo(doc) for doc in documents]

    async def book_session(
        self,
        user: Optional[Dict[str, Any]],
        counselor_id: str,
        session_date: datetime,
        goal: str,
    ) -> MentorshipSession:
        """Book a session with a counselor.

        Args:
            user: Resolved identity
            counselor_id: Counselor to book
            session_date: Requested slot; must be in the future
            goal: What the student wants from the session

        Returns:
            MentorshipSession: The scheduled session

        Raises:
            AuthenticationError: When no identity was resolved
            ValidationError: Past date or blank goal
            ResourceNotFoundError: Unknown counselor
        """
        user_id = require_user_id(user)

        if not is_in_future(session_date):
            raise ValidationError("Pick a future date", field="session_date")

        trimmed_goal = (goal or "").strip()
        if not trimmed_goal:
            raise ValidationError("Add a session goal", field="goal")

        counselor_oid = to_object_id(counselor_id)
        counselor_doc = (
            await self.db.find_one_by_id(Collections.COUNSELORS, counselor_oid)
            if counselor_oid is not None else None
        )
        if counselor_doc is None:
            raise ResourceNotFoundError(
                "Counselor not found",
                resource_type="counselor",
                resource_id=str(counselor_id),
            )

        session = MentorshipSession(
            user_id=user_id,
            counselor_id=counselor_oid,
            session_date=ensure_utc(session_date),
            goal=trimmed_goal,
            status=SessionStatus.SCHEDULED,
        )
        await self.db.insert_one(Collections.MENTORSHIP_SESSIONS, session.to_mongo())

        logger.info(
            "Mentorship session booked",
            extra={"user_id": user_id, "counselor_id": str(counselor_oid), "session_id": session.id_str}
        )
        return session

    async def seed_counselors(self, user: Optional[Dict[str, Any]]) -> int:
        """Insert the default counselors when none exist. Admin only.

        Returns:
            Number of inserted counselors (0 when already seeded)
        """
        admin_id = ensure_admin(user)
        if await self.db.count_documents(Collections.COUNSELORS) > 0:
            return 0

        counselors = [Counselor(**entry) for entry in DEFAULT_COUNSELORS]
        inserted = await self.db.insert_many(
            Collections.COUNSELORS,
            [counselor.to_mongo() for counselor in counselors],
        )
        logger.info("Counselors seeded", extra={"inserted": len(inserted), "admin_id": admin_id})
        return len(inserted)


__all__ = ["MentorshipService"]
