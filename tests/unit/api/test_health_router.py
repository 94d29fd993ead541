"""Unit tests for health and info endpoints."""

import pytest
from fastapi.testclient import TestClient

from src.constants import SERVICE_NAME, SERVICE_VERSION


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_healthy(self, client):
        """Test the service reports healthy with the registry loaded."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == SERVICE_VERSION
        assert data["components"]["pattern_registry"] == {"status": "healthy", "patterns": 15}
        assert "timestamp" in data


class TestRootEndpoint:
    """Tests for GET /."""

    def test_root(self, client):
        """Test the service info and documentation links."""
        data = client.get("/").json()
        assert data["service"] == SERVICE_NAME
        assert data["docs"] == "/docs"
        assert data["patterns"] == "/api/patterns"


class TestOpenApi:
    """Tests for the generated API documentation."""

    def test_schema(self, client):
        """Test the OpenAPI schema lists pattern routes and contact info."""
        schema = client.get("/openapi.json").json()
        assert schema["info"]["title"] == SERVICE_NAME
        assert "url" in schema["info"]["contact"]
        assert schema["servers"][0]["url"] == "http://127.0.0.1:5000"
        assert "/api/patterns/{pattern_id}/compare" in schema["paths"]

    def test_docs(self, client):
        """Test Swagger UI is served."""
        assert client.get("/docs").status_code == 200


class TestLifespan:
    """Tests for application startup."""

    def test_startup_builds_registry(self, app):
        """Test the registry is built when the app starts."""
        from src.core import registry as registry_module

        with TestClient(app) as client:
            assert registry_module._registry is not None
            assert client.get("/health").status_code == 200

    def test_duplicate_catalog_fails_startup(self, monkeypatch):
        """Test a duplicated pattern id stops the application at startup."""
        from src.api.app import create_app
        from src.core.exceptions import DuplicatePatternError
        from src.core.registry import reset_registry
        from src.demos import catalog

        monkeypatch.setattr(catalog, "PATTERN_CATALOG", catalog.PATTERN_CATALOG + [catalog.PATTERN_CATALOG[0]])
        reset_registry()

        with pytest.raises(DuplicatePatternError):
            with TestClient(create_app()):
                pass
