"""API tests for the career catalog endpoints."""

from careerpilot.core.dependencies import get_career_service
from careerpilot.utils.exceptions import AuthorizationError, ResourceNotFoundError


class TestCatalogEndpoints:

    def test_list_careers(self, client, as_user, override, sample_catalog):
        override(get_career_service, list_careers=sample_catalog)

        response = client.get("/api/v1/careers")

        assert response.status_code == 200
        body = response.json()
        assert [career["title"] for career in body] == [
            "Data Scientist", "Frontend Developer", "UX Designer",
        ]
        assert body[0]["id"] == "650000000000000000000001"

    def test_list_categories(self, client, as_user, override):
        override(get_career_service, list_categories=["Data", "Design"])

        response = client.get("/api/v1/careers/categories")

        assert response.status_code == 200
        assert response.json() == {"categories": ["Data", "Design"]}

    def test_get_missing_career_is_404(self, client, as_user, override):
        override(
            get_career_service,
            get_career=ResourceNotFoundError("Career path not found", resource_type="career_path"),
        )

        response = client.get("/api/v1/careers/650000000000000000000099")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert error["details"]["resource_type"] == "career_path"

    def test_list_saved_careers(self, client, as_user, override, sample_catalog):
        override(
            get_career_service,
            list_saved_careers=[{"saved_career_id": "s1", "career": sample_catalog[2]}],
        )

        response = client.get("/api/v1/careers/saved")

        assert response.status_code == 200
        body = response.json()
        assert body[0]["saved_career_id"] == "s1"
        assert body[0]["career"]["title"] == "UX Designer"


class TestSavedCareerToggle:

    def test_toggle_returns_status(self, client, as_user, override):
        service = override(get_career_service, toggle_saved_career="saved")

        response = client.post("/api/v1/careers/650000000000000000000001/save")

        assert response.status_code == 200
        assert response.json() == {
            "career_path_id": "650000000000000000000001",
            "status": "saved",
        }
        service.toggle_saved_career.assert_awaited_once()


class TestCatalogAdministration:

    def test_seed_requires_admin_role(self, client, as_user, override):
        service = override(get_career_service, seed_catalog=4)

        response = client.post("/api/v1/careers/seed")

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "FORBIDDEN"
        service.seed_catalog.assert_not_awaited()

    def test_seed_as_admin(self, client, as_admin, override):
        override(get_career_service, seed_catalog=4)

        response = client.post("/api/v1/careers/seed")

        assert response.status_code == 200
        assert response.json() == {"inserted": 4, "message": "Career catalog seeded"}

    def test_seed_when_populated(self, client, as_admin, override):
        override(get_career_service, seed_catalog=0)

        response = client.post("/api/v1/careers/seed")

        assert response.json()["message"] == "Career catalog already populated"

    def test_update_passes_only_set_fields(self, client, as_admin, override, sample_catalog):
        updated = sample_catalog[0].model_copy(update={"growth_outlook": "High"})
        service = override(get_career_service, update_career=updated)

        response = client.patch(
            "/api/v1/careers/650000000000000000000001",
            json={"growth_outlook": "High", "required_skills": "Python, SQL"},
        )

        assert response.status_code == 200
        assert response.json()["growth_outlook"] == "High"
        args = service.update_career.await_args.args
        assert args[1] == "650000000000000000000001"
        assert args[2] == {"growth_outlook": "High", "required_skills": ["Python", "SQL"]}

    def test_service_authorization_error_maps_to_403(self, client, as_admin, override):
        override(get_career_service, update_career=AuthorizationError("Admin access required"))

        response = client.patch("/api/v1/careers/650000000000000000000001", json={"title": "X"})

        assert response.status_code == 403
