"""
Tests for application wiring: health check, static files, API docs,
error rendering and the startup log line.
"""

import logging
import pytest
from unittest.mock import patch
from fastapi import status
from fastapi.testclient import TestClient


@pytest.mark.unit
class TestApplication:

    def test_health_check_returns_200(self, test_client):
        response = test_client.get("/health")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "healthy"}

    def test_index_page_is_served(self, test_client):
        response = test_client.get("/")
        assert response.status_code == status.HTTP_200_OK
        assert "text/html" in response.headers["content-type"]
        assert "signup-form" in response.text

    def test_unknown_static_path_returns_json_404(self, test_client):
        response = test_client.get("/does-not-exist.txt")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "message" in response.json()

    def test_get_on_signup_is_not_allowed(self, test_client):
        response = test_client.get("/signup")
        assert response.status_code in [status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED]

    def test_scalar_docs(self, test_client):
        response = test_client.get("/scalar")
        assert response.status_code == status.HTTP_200_OK

    def test_unexpected_error_returns_500(self, test_client, user_store, sample_credentials):
        with patch.object(user_store, "load", side_effect=RuntimeError("disk on fire")):
            response = test_client.post("/signup", json=sample_credentials)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"message": "disk on fire"}

    def test_startup_logs_listening_address(self, test_app, caplog):
        from flatauth.config.settings import HOST, PORT

        with caplog.at_level(logging.INFO, logger="flatauth_log"):
            with TestClient(test_app):
                pass
        assert f"Server listening on http://{HOST}:{PORT}" in caplog.text
