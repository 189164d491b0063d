"""
Dashboard schemas.

Dependencies: pydantic
System role: Dashboard API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel


class RecentSession(BaseModel):
    id: uuid.UUID
    title: str
    date: datetime
    client_id: uuid.UUID
    client_name: str


class DashboardMetricsResponse(BaseModel):
    total_clients: int
    sessions_this_month: int
    resources_shared: int
    analyzed_sessions: int
    recent_sessions: list[RecentSession]
