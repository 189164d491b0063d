"""
Test suite for API routes.

Services are replaced with AsyncMocks; these tests cover routing,
request parsing and the success envelope.

System role: Verification of HTTP contracts
"""

import uuid
from datetime import datetime, timezone

from fastapi.testclient import TestClient

from coachdesk.api.deps.dependencies import (
    get_client_service,
    get_context_document_service,
    get_resource_service,
    get_session_ai_service,
    get_session_service,
)
from coachdesk.core.ai.schemas import ParsedResource

NOW = datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc)


def client_payload(**overrides) -> dict:
    payload = {
        "id": uuid.uuid4(),
        "name": "Jordan Exec",
        "role": "VP Engineering",
        "company": "Acme",
        "email": None,
        "phone": None,
        "birthday": None,
        "coaching_since": None,
        "career_goal": None,
        "key_challenge": None,
        "key_stakeholders": None,
        "reports_to_id": None,
        "session_count": 2,
        "created_at": NOW,
        "updated_at": NOW,
    }
    payload.update(overrides)
    return payload


class TestClientRoutes:
    """Tests for /clients endpoints."""

    def test_list_should_wrap_clients_in_envelope(self, client: TestClient, override_service) -> None:
        # Arrange
        service = override_service(get_client_service)
        service.list_clients.return_value = [client_payload()]

        # Act
        response = client.get("/api/v1/clients")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"][0]["name"] == "Jordan Exec"
        assert body["data"][0]["session_count"] == 2
        service.list_clients.assert_awaited_once_with("coach-uid-1")

    def test_create_should_return_201_and_pass_form_fields(
        self, client: TestClient, override_service
    ) -> None:
        # Arrange
        service = override_service(get_client_service)
        service.create_client.return_value = client_payload(name="Riley")

        # Act
        response = client.post(
            "/api/v1/clients",
            json={"name": "Riley", "company": "Acme", "birthday": "", "reports_to_id": ""},
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["data"]["name"] == "Riley"
        _, data = service.create_client.await_args.args
        assert data["name"] == "Riley"
        assert data["birthday"] is None
        assert data["reports_to_id"] is None

    def test_delete_should_return_deleted_id(self, client: TestClient, override_service) -> None:
        client_id = uuid.uuid4()
        override_service(get_client_service)

        response = client.delete(f"/api/v1/clients/{client_id}")

        assert response.status_code == 200
        assert response.json()["data"] == {"id": str(client_id), "deleted": True}


class TestSessionRoutes:
    """Tests for /sessions endpoints."""

    def test_tags_path_should_not_be_read_as_session_id(
        self, client: TestClient, override_service
    ) -> None:
        # Arrange
        service = override_service(get_session_service)
        service.list_session_tags.return_value = [
            {"id": uuid.uuid4(), "name": "leadership", "category": "session"}
        ]

        # Act
        response = client.get("/api/v1/sessions/tags")

        # Assert
        assert response.status_code == 200
        assert response.json()["data"][0]["name"] == "leadership"

    def test_update_should_only_send_provided_fields(
        self, client: TestClient, override_service
    ) -> None:
        session_id = uuid.uuid4()
        service = override_service(get_session_service)
        service.update_session.side_effect = RuntimeError("stop after capture")

        client.put(f"/api/v1/sessions/{session_id}", json={"summary": None, "title": "New"})

        service.update_session.assert_awaited_once_with(
            "coach-uid-1", session_id, {"summary": None, "title": "New"}
        )


class TestAIRoutes:
    """Tests for analysis endpoints."""

    def test_analyze_should_return_analysis_result(self, client: TestClient, override_service) -> None:
        # Arrange
        session_id = uuid.uuid4()
        service = override_service(get_session_ai_service)
        service.analyze_session.return_value = {
            "summary": "Summary",
            "follow_up_email": "Email",
            "analysis": None,
            "tags": ["leadership"],
            "resources": [ParsedResource(title="Radical Candor", type="book")],
        }

        # Act
        response = client.post(f"/api/v1/sessions/{session_id}/analyze")

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["summary"] == "Summary"
        assert data["analysis"] is None
        assert data["resources"][0]["title"] == "Radical Candor"
        service.analyze_session.assert_awaited_once_with("coach-uid-1", session_id)

    def test_prepare_should_return_notes(self, client: TestClient, override_service) -> None:
        client_id = uuid.uuid4()
        service = override_service(get_session_ai_service)
        service.prepare_for_session.return_value = {"preparation_notes": "Ask about the board."}

        response = client.post(f"/api/v1/clients/{client_id}/prepare")

        assert response.status_code == 200
        assert response.json()["data"] == {"preparation_notes": "Ask about the board."}


class TestContextDocumentRoutes:
    """Tests for /context-documents endpoints."""

    def test_upload_should_forward_file_bytes(self, client: TestClient, override_service) -> None:
        # Arrange
        service = override_service(get_context_document_service)
        service.upload_document.return_value = {
            "id": uuid.uuid4(),
            "name": "values.md",
            "file_url": "https://docs.example.com/values.md",
            "file_type": "text/markdown",
            "content": "# Values",
            "created_at": NOW,
        }

        # Act
        response = client.post(
            "/api/v1/context-documents",
            files={"file": ("values.md", b"# Values", "text/markdown")},
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["data"]["name"] == "values.md"
        kwargs = service.upload_document.await_args.kwargs
        assert kwargs["filename"] == "values.md"
        assert kwargs["data"] == b"# Values"

    def test_combined_should_return_content_and_count(
        self, client: TestClient, override_service
    ) -> None:
        service = override_service(get_context_document_service)
        service.get_combined_content.return_value = "=== a.txt ===\nA"
        service.list_documents.return_value = [{"id": uuid.uuid4()}]

        response = client.get("/api/v1/context-documents/combined")

        assert response.status_code == 200
        assert response.json()["data"]["content"] == "=== a.txt ===\nA"


class TestSettingsRoutes:
    """Tests for /settings endpoints."""

    def test_models_should_list_claude_models(self, client: TestClient) -> None:
        response = client.get("/api/v1/settings/models")

        assert response.status_code == 200
        assert response.json()["success"] is True


class TestHealthRoutes:
    def test_health_should_report_healthy(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "healthy"


class TestResourceRoutes:
    """Tests for the resource library endpoints."""

    def test_create_should_return_201(self, client: TestClient, override_service) -> None:
        # Arrange
        service = override_service(get_resource_service)
        service.create_resource.return_value = {
            "id": uuid.uuid4(),
            "title": "SBI",
            "type": "framework",
            "url": "https://example.com/sbi",
            "description": None,
            "tags": ["feedback"],
        }

        # Act
        response = client.post(
            "/api/v1/resources",
            json={"title": "SBI", "url": "https://example.com/sbi", "type": "framework", "tags": ["feedback"]},
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["data"]["tags"] == ["feedback"]
        service.create_resource.assert_awaited_once_with(
            title="SBI",
            url="https://example.com/sbi",
            type="framework",
            description=None,
            tags=["feedback"],
        )

    def test_share_should_return_coach_suggestion(self, client: TestClient, override_service) -> None:
        # Arrange
        client_id = uuid.uuid4()
        resource_id = uuid.uuid4()
        service = override_service(get_resource_service)
        service.share_with_client.return_value = {
            "id": uuid.uuid4(),
            "session_id": None,
            "suggested_by": "coach",
            "created_at": NOW,
            "resource": {
                "id": resource_id,
                "title": "SBI",
                "type": "framework",
                "url": "https://example.com/sbi",
                "description": None,
                "tags": [],
            },
        }

        # Act
        response = client.post(
            f"/api/v1/clients/{client_id}/resources", json={"resource_id": str(resource_id)}
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["data"]["suggested_by"] == "coach"
        service.share_with_client.assert_awaited_once_with("coach-uid-1", client_id, resource_id)
