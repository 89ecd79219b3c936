"""Unit tests for profile, goal and feedback services."""

import pytest
from bson import ObjectId

from careerpilot.services.student_service import FeedbackService, GoalService, ProfileService
from careerpilot.utils.constants import Collections, GoalStatus
from careerpilot.utils.exceptions import AuthenticationError, ResourceNotFoundError, ValidationError

GOAL_ID = "670000000000000000000001"


class TestProfileService:

    @pytest.mark.asyncio
    async def test_creates_profile(self, mock_db, student_user):
        profile = await ProfileService(db=mock_db).upsert_profile(
            student_user,
            {"skills": "Python, SQL", "interests": ["Data"], "headline": "Student"},
        )

        assert profile.skills == ["Python", "SQL"]
        assert profile.user_id == "user_123"
        mock_db.insert_one.assert_awaited_once()
        mock_db.update_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_updates_existing_profile(self, mock_db, student_user):
        existing_id = ObjectId()
        mock_db.find_one.return_value = {
            "_id": existing_id,
            "user_id": "user_123",
            "skills": ["Java"],
            "interests": ["Backend"],
        }

        profile = await ProfileService(db=mock_db).upsert_profile(
            student_user, {"skills": ["Go"], "interests": ["Cloud"]}
        )

        assert profile.id == existing_id
        assert profile.skills == ["Go"]
        filter_, update = mock_db.update_one.await_args.args[1:3]
        assert filter_ == {"_id": existing_id}
        assert update["$set"]["interests"] == ["Cloud"]
        mock_db.insert_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_requires_skill_and_interest(self, mock_db, student_user):
        with pytest.raises(ValidationError):
            await ProfileService(db=mock_db).upsert_profile(student_user, {"skills": ["Go"]})
        mock_db.insert_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_onboarding_status(self, mock_db, student_user):
        service = ProfileService(db=mock_db)

        assert await service.check_onboarding_status(None) == {
            "is_onboarded": False,
            "is_authenticated": False,
        }
        assert await service.check_onboarding_status(student_user) == {
            "is_onboarded": False,
            "is_authenticated": True,
        }

        mock_db.find_one.return_value = {"user_id": "user_123", "skills": ["Go"], "interests": ["Cloud"]}
        assert (await service.check_onboarding_status(student_user))["is_onboarded"] is True


class TestGoalService:

    @pytest.fixture
    def owned_goal(self, mock_db):
        mock_db.find_one_by_id.return_value = {
            "_id": ObjectId(GOAL_ID),
            "user_id": "user_123",
            "title": "Ship portfolio",
            "status": "pending",
        }

    @pytest.mark.asyncio
    async def test_create_goal_trims_and_defaults(self, mock_db, student_user):
        goal = await GoalService(db=mock_db).create_goal(student_user, "  Learn SQL ", category="")

        assert goal.title == "Learn SQL"
        assert goal.category == "General"
        assert goal.status == GoalStatus.PENDING.value
        assert mock_db.insert_one.await_args.args[0] == Collections.GOALS

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, mock_db, student_user):
        with pytest.raises(ValidationError):
            await GoalService(db=mock_db).create_goal(student_user, "   ")

    @pytest.mark.asyncio
    async def test_owner_updates_status(self, mock_db, student_user, owned_goal):
        goal = await GoalService(db=mock_db).update_goal_status(student_user, GOAL_ID, GoalStatus.COMPLETED)

        assert goal.status == "completed"
        update = mock_db.update_one.await_args.args[2]
        assert update == {"$set": {"status": "completed"}}

    @pytest.mark.asyncio
    async def test_other_user_cannot_touch_goal(self, mock_db, owned_goal):
        intruder = {"id": "someone_else", "role": "user"}
        service = GoalService(db=mock_db)

        with pytest.raises(ResourceNotFoundError) as exc_info:
            await service.update_goal_status(intruder, GOAL_ID, GoalStatus.COMPLETED)
        assert exc_info.value.message == "Goal not found or unauthorized"

        with pytest.raises(ResourceNotFoundError):
            await service.delete_goal(intruder, GOAL_ID)

        mock_db.update_one.assert_not_awaited()
        mock_db.delete_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_goal_id(self, mock_db, student_user):
        with pytest.raises(ResourceNotFoundError):
            await GoalService(db=mock_db).delete_goal(student_user, "bogus")
        mock_db.find_one_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_owner_deletes_goal(self, mock_db, student_user, owned_goal):
        assert await GoalService(db=mock_db).delete_goal(student_user, GOAL_ID) is True
        assert mock_db.delete_one.await_args.args[1] == {"_id": ObjectId(GOAL_ID)}


class TestFeedbackService:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating,stored", [(1, 1), (4.5, 5), (2.5, 3), (5, 5)])
    async def test_rating_rounded_half_up(self, mock_db, student_user, rating, stored):
        feedback = await FeedbackService(db=mock_db).submit_feedback(student_user, rating, message="  Great  ")

        assert feedback.rating == stored
        assert feedback.message == "Great"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0, 0.9, 5.1, 6])
    async def test_out_of_range_rating_rejected(self, mock_db, student_user, rating):
        with pytest.raises(ValidationError):
            await FeedbackService(db=mock_db).submit_feedback(student_user, rating)
        mock_db.insert_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_recent_feedback_limited(self, mock_db, student_user):
        await FeedbackService(db=mock_db).list_my_feedback(student_user)

        kwargs = mock_db.find_many.await_args.kwargs
        assert kwargs["limit"] == 5
        assert kwargs["sort"] == [("created_at", -1)]

    @pytest.mark.asyncio
    async def test_requires_identity(self, mock_db):
        with pytest.raises(AuthenticationError):
            await FeedbackService(db=mock_db).list_my_feedback(None)
