"""API tests for the admin analytics endpoints."""

from datetime import datetime, timezone

from careerpilot.core.dependencies import get_dashboard_service, get_mentorship_service
from careerpilot.services.analytics_service import AnalyticsSummary, DuplicateReport, FeatureUsage


def overview_payload():
    return {
        "summary": AnalyticsSummary(
            peak_hour_label="Peak: 9 AM",
            top_career="Data Scientist",
            total_sessions=2,
            unique_learners=1,
        ),
        "counselor_matches": [],
        "duplicate_report": DuplicateReport(),
        "feature_usage": [FeatureUsage(feature="Career Paths", usage=3)],
        "counselor_performance": [],
        "generated_at": datetime(2024, 5, 6, tzinfo=timezone.utc),
    }


class TestAdminOverview:

    def test_non_admin_is_forbidden(self, client, as_user, override):
        service = override(get_dashboard_service, get_admin_overview=overview_payload())

        response = client.get("/api/v1/analytics/overview")

        assert response.status_code == 403
        service.get_admin_overview.assert_not_awaited()

    def test_anonymous_is_unauthenticated(self, client, override):
        override(get_dashboard_service, get_admin_overview=overview_payload())

        response = client.get("/api/v1/analytics/overview")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_admin_gets_overview(self, client, as_admin, override):
        override(get_dashboard_service, get_admin_overview=overview_payload())

        response = client.get("/api/v1/analytics/overview")

        assert response.status_code == 200
        body = response.json()
        assert body["summary"]["peak_hour_label"] == "Peak: 9 AM"
        assert body["duplicate_report"] == {"duplicates": [], "suspicious_logins": False}
        assert body["feature_usage"] == [{"feature": "Career Paths", "usage": 3}]


class TestSnapshotAggregates:

    def test_summary_from_snapshots(self, client, as_admin):
        response = client.post(
            "/api/v1/analytics/summary",
            json={
                "sessions": [
                    {"user_id": "a", "session_date": "2024-05-06T09:00:00Z"},
                    {"user_id": "a", "session_date": "2024-05-06T09:30:00Z"},
                    {"user_id": "b", "session_date": "2024-05-06T14:00:00Z"},
                ],
                "assessments": [
                    {"recommended_careers": ["Data Scientist"]},
                    {"recommended_careers": ["Data Scientist", "UX Designer"]},
                ],
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total_sessions"] == 3
        assert body["unique_learners"] == 2
        assert body["top_career"] == "Data Scientist"
        assert body["peak_hour_label"].startswith("Peak: ")

    def test_empty_summary(self, client, as_admin):
        response = client.post("/api/v1/analytics/summary", json={})

        assert response.status_code == 200
        body = response.json()
        assert body["total_sessions"] == 0
        assert body["unique_learners"] == 0

    def test_counselor_matches_from_snapshots(self, client, as_admin):
        response = client.post(
            "/api/v1/analytics/counselor-matches",
            json={
                "assessments": [
                    {"focus_areas": ["Data"], "recommended_careers": ["Data Scientist"]},
                ],
                "counselors": [
                    {"name": "Leon", "focus_areas": ["design"]},
                    {"name": "Ananya", "focus_areas": ["data", "ml"]},
                ],
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body[0]["counselor_name"] == "Ananya"
        assert body[0]["student_focus"] == "Data Scientist"
        assert 0 <= body[0]["score_percent"] <= 100

    def test_snapshot_endpoints_require_admin(self, client, as_user):
        response = client.post("/api/v1/analytics/summary", json={})

        assert response.status_code == 403


class TestCounselorSeeding:

    def test_seed_counselors_as_admin(self, client, as_admin, override):
        override(get_mentorship_service, seed_counselors=3)

        response = client.post("/api/v1/mentorship/counselors/seed")

        assert response.status_code == 200
        assert response.json()["inserted"] == 3
