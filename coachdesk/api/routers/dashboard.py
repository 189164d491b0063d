"""
Dashboard API endpoints.

Routes: GET /dashboard/metrics

Dependencies: coachdesk.application.services.dashboard_service
System role: Dashboard HTTP API
"""

from fastapi import APIRouter, Depends

from coachdesk.api.deps.auth import get_current_user
from coachdesk.api.deps.dependencies import get_dashboard_service
from coachdesk.api.error_handling import handle_action_errors
from coachdesk.application.services import DashboardService
from coachdesk.boundary.db.models import UserModel
from coachdesk.models.common import SuccessResponse
from coachdesk.models.dashboard import DashboardMetricsResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/metrics", response_model=SuccessResponse[DashboardMetricsResponse])
@handle_action_errors("Failed to fetch dashboard metrics")
async def get_dashboard_metrics(
    user: UserModel = Depends(get_current_user),
    dashboard_service: DashboardService = Depends(get_dashboard_service),
):
    metrics = await dashboard_service.get_metrics(user.id)
    return SuccessResponse(data=DashboardMetricsResponse(**metrics))
