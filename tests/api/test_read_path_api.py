"""API tests for the dashboard polling endpoints."""

from fastapi.testclient import TestClient

from blood_drive.api.v1.dependencies import get_app_settings
from blood_drive.core.config import Settings
from blood_drive.domain.exceptions import StorageUnavailableError


def register(client, name: str, group: str = "A+") -> None:
    response = client.post(
        "/api/donate",
        json={"fullName": name, "bloodGroup": group, "age": 25, "year": "TY"},
    )
    assert response.status_code == 201


class TestStats:
    def test_initial_stats_are_zero(self, client):
        response = client.get("/api/stats")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["totalUnits"] == 0
        assert body["data"]["lastUpdated"].endswith("Z")

    def test_reads_are_idempotent(self, client):
        register(client, "Jane Doe")

        first = client.get("/api/stats").json()
        second = client.get("/api/stats").json()

        assert first == second

    def test_storage_failure(self, client, stats_repository, monkeypatch):
        def unavailable():
            raise StorageUnavailableError("stats read")

        monkeypatch.setattr(stats_repository, "get", unavailable)

        response = client.get("/api/stats")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Error fetching statistics"}


class TestDonors:
    def test_lists_public_fields_most_recent_first(self, client):
        register(client, "First Donor", "A+")
        register(client, "Second Donor", "B-")

        response = client.get("/api/donors")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [donor["fullName"] for donor in data] == ["Second Donor", "First Donor"]
        assert data[0]["bloodGroup"] == "B-"
        assert set(data[0]) == {"fullName", "bloodGroup", "donatedAt"}

    def test_default_limit_is_ten(self, client):
        for i in range(12):
            register(client, f"Donor {i}")

        data = client.get("/api/donors").json()["data"]

        assert len(data) == 10
        assert data[0]["fullName"] == "Donor 11"

    def test_explicit_limit(self, client):
        for i in range(4):
            register(client, f"Donor {i}")

        data = client.get("/api/donors", params={"limit": 3}).json()["data"]

        assert [donor["fullName"] for donor in data] == ["Donor 3", "Donor 2", "Donor 1"]

    def test_invalid_limit_falls_back_to_default(self, client):
        for i in range(3):
            register(client, f"Donor {i}")

        for limit in ["abc", "0", "-4"]:
            data = client.get("/api/donors", params={"limit": limit}).json()["data"]
            assert len(data) == 3

    def test_limit_is_capped(self, app, monkeypatch):
        monkeypatch.setenv("DONORS_MAX_LIMIT", "2")
        app.dependency_overrides[get_app_settings] = Settings
        client = TestClient(app)
        for i in range(4):
            register(client, f"Donor {i}")

        data = client.get("/api/donors", params={"limit": 50}).json()["data"]

        assert len(data) == 2

    def test_storage_failure(self, client, donor_repository, monkeypatch):
        def unavailable(limit):
            raise StorageUnavailableError("donor listing")

        monkeypatch.setattr(donor_repository, "list_recent", unavailable)

        response = client.get("/api/donors")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Error fetching donors"}


class TestServiceEndpoints:
    def test_root_describes_service(self, client):
        body = client.get("/").json()

        assert body["status"] == "running"
        assert body["docs"] == "/docs"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Not Found"}

    def test_unhandled_error_is_internal_server_error(self, app, donation_service, monkeypatch):
        def broken():
            raise RuntimeError("boom")

        monkeypatch.setattr(donation_service, "get_stats", broken)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/api/stats")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Internal server error"}
