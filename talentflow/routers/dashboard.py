"""
Dashboard router - overview statistics.
"""
from fastapi import APIRouter, Depends

from talentflow.dependencies import get_dashboard_service
from talentflow.models.dashboard import DashboardResponse
from talentflow.services import DashboardService

router = APIRouter(prefix="/api", tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """Job, candidate and interview stats plus recent activity and all jobs."""
    return await service.get_dashboard()
