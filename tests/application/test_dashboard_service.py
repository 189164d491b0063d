"""
Test suite for DashboardService and TagService.

System role: Verification of read-only aggregate services
"""

from datetime import datetime, timezone

import pytest

from coachdesk.application.services.dashboard_service import DashboardService
from coachdesk.application.services.tag_service import TagService
from coachdesk.boundary.db.CRUD.resource_crud import resource_crud
from coachdesk.core.exceptions import ValidationError

NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)


class TestDashboardService:
    """Test suite for DashboardService.get_metrics()."""

    @pytest.mark.asyncio
    async def test_metrics_should_count_user_activity(
        self, test_async_db, sample_user, other_user, make_client, make_session
    ) -> None:
        # Arrange
        client = await make_client(sample_user.id, "Jordan")
        await make_client(sample_user.id, "Riley")
        await make_client(other_user.id, "Hidden")
        this_month = await make_session(
            sample_user.id, client.id, "June", datetime(2026, 6, 3, tzinfo=timezone.utc), summary="Done"
        )
        await make_session(sample_user.id, client.id, "May", datetime(2026, 5, 20, tzinfo=timezone.utc))
        resource = await resource_crud.create(test_async_db, title="GROW model", type="framework")
        await resource_crud.link_to_client(
            test_async_db, client_id=client.id, resource_id=resource.id, session_id=this_month.id
        )

        # Act
        metrics = await DashboardService(test_async_db).get_metrics(sample_user.id, now=NOW)

        # Assert
        assert metrics["total_clients"] == 2
        assert metrics["sessions_this_month"] == 1
        assert metrics["resources_shared"] == 1
        assert metrics["analyzed_sessions"] == 1
        assert [s["title"] for s in metrics["recent_sessions"]] == ["June", "May"]
        assert metrics["recent_sessions"][0]["client_name"] == "Jordan"

    @pytest.mark.asyncio
    async def test_metrics_should_be_zero_for_new_user(self, test_async_db, sample_user) -> None:
        metrics = await DashboardService(test_async_db).get_metrics(sample_user.id, now=NOW)

        assert metrics == {
            "total_clients": 0,
            "sessions_this_month": 0,
            "resources_shared": 0,
            "analyzed_sessions": 0,
            "recent_sessions": [],
        }


class TestTagService:
    """Test suite for TagService."""

    @pytest.mark.asyncio
    async def test_list_tags_should_filter_by_category(self, test_async_db, seeded_tags) -> None:
        tags = await TagService(test_async_db).list_tags("resource")

        assert len(tags) == 22
        assert {t["category"] for t in tags} == {"resource"}

    @pytest.mark.asyncio
    async def test_list_tags_should_reject_unknown_category(self, test_async_db) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await TagService(test_async_db).list_tags("people")

        assert exc_info.value.message == "Invalid tag category"
