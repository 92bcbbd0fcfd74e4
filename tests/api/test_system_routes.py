"""API tests for system routes (root, health, config)."""

from fastapi.testclient import TestClient

from src.core.config import settings
from src.main import app

client = TestClient(app)


class TestSystemRoutes:
    def test_root(self):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == settings.app_name
        assert data["status"] == "operational"
        assert data["version"] == settings.app_version

    def test_health(self):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_config_hidden_outside_development(self):
        response = client.get("/config")

        assert response.status_code == 403
        assert response.json()["detail"] == "Config endpoint only available in development"

    def test_trace_id_header_returned(self):
        response = client.get("/health")

        assert "x-trace-id" in {key.lower() for key in response.headers}

    def test_unknown_route_is_problem_details(self):
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json()["status"] == 404
