"""
Test suite for the HTTP error envelope and authentication.

System role: Verification of status mapping and error rendering
"""

import uuid
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from coachdesk.api.deps.auth import get_current_user
from coachdesk.api.deps.dependencies import (
    get_client_service,
    get_session_ai_service,
    get_user_service,
)
from coachdesk.boundary.db.models import UserModel
from coachdesk.core.exceptions import (
    AIServiceError,
    APIKeyNotConfiguredError,
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class TestDomainErrors:
    """Domain exceptions become {success: false, error} with mapped status."""

    def test_not_found_should_return_404(self, client: TestClient, override_service) -> None:
        # Arrange
        client_id = uuid.uuid4()
        service = override_service(get_client_service)
        service.get_client.side_effect = NotFoundError("Client", client_id)

        # Act
        response = client.get(f"/api/v1/clients/{client_id}")

        # Assert
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Client not found",
            "details": {"client_id": str(client_id)},
        }

    def test_validation_error_should_return_400(self, client: TestClient, override_service) -> None:
        service = override_service(get_client_service)
        service.create_client.side_effect = ValidationError("Name is required", field="name")

        response = client.post("/api/v1/clients", json={"name": ""})

        assert response.status_code == 400
        assert response.json()["error"] == "Name is required"
        assert response.json()["details"] == {"field": "name"}

    def test_conflict_should_return_400(self, client: TestClient, override_service) -> None:
        service = override_service(get_client_service)
        service.add_team_member.side_effect = ConflictError("Already team members")

        response = client.post(
            f"/api/v1/clients/{uuid.uuid4()}/team-members", json={"member_id": str(uuid.uuid4())}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Already team members"

    def test_missing_api_key_should_return_400(self, client: TestClient, override_service) -> None:
        service = override_service(get_session_ai_service)
        service.analyze_session.side_effect = APIKeyNotConfiguredError(
            "Please configure your Claude API key in settings to use AI analysis"
        )

        response = client.post(f"/api/v1/sessions/{uuid.uuid4()}/analyze")

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_upstream_failure_should_return_502(self, client: TestClient, override_service) -> None:
        service = override_service(get_session_ai_service)
        service.analyze_session.side_effect = AIServiceError(
            "Rate limit exceeded. Please try again in a moment.", status_code=429
        )

        response = client.post(f"/api/v1/sessions/{uuid.uuid4()}/analyze")

        assert response.status_code == 502
        assert response.json()["error"] == "Rate limit exceeded. Please try again in a moment."


class TestUnexpectedErrors:
    """Unexpected failures are replaced by a per-operation message."""

    def test_should_hide_internal_error_text(self, client: TestClient, override_service) -> None:
        service = override_service(get_client_service)
        service.list_clients.side_effect = RuntimeError("connection string with password")

        response = client.get("/api/v1/clients")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Failed to fetch clients", "details": None}

    def test_response_mapping_bug_should_be_server_error(
        self, client: TestClient, override_service
    ) -> None:
        # Arrange
        service = override_service(get_client_service)
        service.list_clients.return_value = [{"name": "Missing id and timestamps"}]

        # Act
        response = client.get("/api/v1/clients")

        # Assert
        assert response.status_code == 500
        assert response.json()["error"] == "Failed to fetch clients"


class TestRequestValidation:
    """Malformed requests are rejected before reaching services."""

    def test_invalid_uuid_should_return_422(self, client: TestClient, override_service) -> None:
        override_service(get_client_service)

        response = client.get("/api/v1/clients/not-a-uuid")

        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_invalid_template_type_should_return_422(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/templates", json={"name": "X", "type": "summary", "content": "Y"}
        )

        assert response.status_code == 422
        assert response.json()["details"] == {"field": "type"}


class TestAuthentication:
    """Requests without a valid Firebase token are rejected."""

    def test_missing_token_should_return_401(self, app, client: TestClient) -> None:
        del app.dependency_overrides[get_current_user]

        response = client.get("/api/v1/profile")

        assert response.status_code == 401
        assert response.json()["error"] == "Authentication required"

    def test_invalid_token_should_return_401(self, app, client: TestClient) -> None:
        del app.dependency_overrides[get_current_user]

        with patch(
            "coachdesk.api.deps.auth.verify_id_token",
            side_effect=AuthenticationError("Invalid authentication token"),
        ):
            response = client.get("/api/v1/profile", headers={"Authorization": "Bearer bad"})

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid authentication token"

    def test_valid_token_should_provision_user(self, app, client: TestClient) -> None:
        # Arrange
        del app.dependency_overrides[get_current_user]
        user = UserModel(id="firebase-uid", email="new@example.com", name="new")
        user_service = AsyncMock()
        user_service.get_or_provision.return_value = user
        user_service.get_profile.return_value = {"id": user.id, "email": user.email, "name": user.name}

        app.dependency_overrides[get_user_service] = lambda: user_service

        # Act
        with patch(
            "coachdesk.api.deps.auth.verify_id_token",
            return_value={"uid": "firebase-uid", "email": "new@example.com"},
        ), patch("coachdesk.api.deps.auth.UserService", return_value=user_service):
            response = client.get("/api/v1/profile", headers={"Authorization": "Bearer good"})

        # Assert
        assert response.status_code == 200
        assert response.json()["data"]["id"] == "firebase-uid"
        user_service.get_or_provision.assert_awaited_once_with(
            user_id="firebase-uid", email="new@example.com", name=None
        )


class TestCorrelationId:
    """Responses echo the request correlation id."""

    def test_should_echo_incoming_header(self, client: TestClient) -> None:
        response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})

        assert response.status_code == 200
        assert response.headers["X-Correlation-ID"] == "abc-123"
