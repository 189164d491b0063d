"""
Dashboard service.

Dependencies: coachdesk.boundary.db.CRUD
System role: Practice overview metrics for the home page
"""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from coachdesk.boundary.db.CRUD.client_crud import client_crud
from coachdesk.boundary.db.CRUD.resource_crud import resource_crud
from coachdesk.boundary.db.CRUD.session_crud import session_crud

RECENT_SESSIONS_LIMIT = 5


class DashboardService:
    """Aggregate counts over the user's practice."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_metrics(self, user_id: str, now: datetime | None = None) -> dict:
        """
        Compute dashboard metrics.

        Args:
            user_id: Current user id
            now: Reference time for "this month" (defaults to UTC now)

        Returns:
            dict: total_clients, sessions_this_month, resources_shared,
                analyzed_sessions, recent_sessions
        """
        now = now or datetime.now(timezone.utc)
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

        recent = await session_crud.list_recent(self.db, user_id, RECENT_SESSIONS_LIMIT)
        return {
            "total_clients": await client_crud.count_for_user(self.db, user_id),
            "sessions_this_month": await session_crud.count_since(self.db, user_id, month_start),
            "resources_shared": await resource_crud.count_links_for_user(self.db, user_id),
            "analyzed_sessions": await session_crud.count_analyzed(self.db, user_id),
            "recent_sessions": [
                {
                    "id": s.id,
                    "title": s.title,
                    "date": s.date,
                    "client_id": s.client_id,
                    "client_name": s.client.name,
                }
                for s in recent
            ],
        }
