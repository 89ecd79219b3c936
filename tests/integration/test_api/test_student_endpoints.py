"""API tests for profile, goal, feedback and insight endpoints."""

from careerpilot.core.dependencies import (
    get_feedback_service,
    get_goal_service,
    get_insights_service,
    get_profile_service,
)
from careerpilot.models.student import Feedback, Goal, Profile
from careerpilot.utils.exceptions import ResourceNotFoundError, ValidationError


class TestProfileEndpoints:

    def test_missing_profile_is_404(self, client, as_user, override):
        override(get_profile_service, get_profile=None)

        response = client.get("/api/v1/profile")

        assert response.status_code == 404
        assert response.json()["error"]["details"]["resource_type"] == "profile"

    def test_upsert_profile(self, client, as_user, override):
        profile = Profile(user_id="user_123", skills=["Python", "SQL"], headline="Analyst")
        service = override(get_profile_service, upsert_profile=profile)

        response = client.put(
            "/api/v1/profile",
            json={"skills": "Python, SQL", "headline": "Analyst"},
        )

        assert response.status_code == 200
        assert response.json()["skills"] == ["Python", "SQL"]
        data = service.upsert_profile.await_args.args[1]
        assert data["skills"] == ["Python", "SQL"]
        assert "bio" not in data

    def test_onboarding_without_token(self, client, override):
        service = override(
            get_profile_service,
            check_onboarding_status={"is_onboarded": False, "is_authenticated": False},
        )

        response = client.get("/api/v1/profile/onboarding")

        assert response.status_code == 200
        assert response.json() == {"is_onboarded": False, "is_authenticated": False}
        assert service.check_onboarding_status.await_args.args[0] is None


class TestGoalEndpoints:

    def test_create_goal(self, client, as_user, override):
        goal = Goal(user_id="user_123", title="Finish SQL course", category="Learning")
        service = override(get_goal_service, create_goal=goal)

        response = client.post(
            "/api/v1/goals",
            json={"title": "Finish SQL course", "category": "Learning"},
        )

        assert response.status_code == 201
        assert response.json()["status"] == "pending"
        assert service.create_goal.await_args.kwargs["title"] == "Finish SQL course"

    def test_invalid_status_is_422(self, client, as_user, override):
        override(get_goal_service)

        response = client.patch("/api/v1/goals/abc", json={"status": "someday"})

        assert response.status_code == 422

    def test_delete_goal_not_owned(self, client, as_user, override):
        override(get_goal_service, delete_goal=ResourceNotFoundError("Goal not found"))

        response = client.delete("/api/v1/goals/660000000000000000000001")

        assert response.status_code == 404

    def test_delete_goal(self, client, as_user, override):
        override(get_goal_service, delete_goal=True)

        response = client.delete("/api/v1/goals/660000000000000000000001")

        assert response.status_code == 200
        assert response.json() == {"message": "Goal deleted"}


class TestFeedbackEndpoints:

    def test_submit_feedback(self, client, as_user, override):
        feedback = Feedback(user_id="user_123", rating=4, mood="happy")
        override(get_feedback_service, submit_feedback=feedback)

        response = client.post("/api/v1/feedback", json={"rating": 4, "mood": "happy"})

        assert response.status_code == 201
        assert response.json()["rating"] == 4

    def test_rating_out_of_range(self, client, as_user, override):
        override(
            get_feedback_service,
            submit_feedback=ValidationError("Rating must be between 1 and 5", field="rating"),
        )

        response = client.post("/api/v1/feedback", json={"rating": 9})

        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == "rating"


class TestInsightEndpoints:

    def test_mock_answer_is_scored(self, client, as_user):
        response = client.post(
            "/api/v1/insights/mock-answer",
            json={"answer": "I led the team. It worked because we planned.", "focus": "Behavioral"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 47
        assert "Good reflection on learnings." in body["strengths"]

    def test_learning_tasks_unknown_career_is_404(self, client, as_user, override):
        override(get_insights_service, learning_tasks=ResourceNotFoundError("Career path not found"))

        response = client.get("/api/v1/insights/learning-tasks/650000000000000000000099")

        assert response.status_code == 404
