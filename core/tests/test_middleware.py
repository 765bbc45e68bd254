"""
Tests for API routing surfaces: versioned prefix, deprecation headers,
health check and JSON error pages.

Run with: python -m pytest core/tests/test_middleware.py -v
"""

import pytest

from inkwell.config import config


@pytest.mark.django_db
class TestApiPrefixes:

    def test_health_check(self, api_client):
        response = api_client.get("/api/v1/health/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_versioned_routes_not_deprecated(self, api_client):
        response = api_client.get("/api/v1/posts/")
        assert response.status_code == 200
        assert "Deprecation" not in response

    def test_unversioned_routes_carry_deprecation_headers(self, api_client):
        response = api_client.get("/api/posts/")
        assert response.status_code == 200
        assert response["Deprecation"] == "true"
        assert response["Sunset"] == config.api.sunset_date
        assert "/api/v1/" in response["X-API-Warn"]

    def test_security_headers(self, api_client):
        response = api_client.get("/api/v1/health/")
        assert response["X-Content-Type-Options"] == "nosniff"

    def test_unknown_route_is_json_404(self, api_client):
        response = api_client.get("/api/v1/nothing-here/")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "not_found", "message": "Route not found"}
