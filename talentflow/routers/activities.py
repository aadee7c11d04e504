"""
Activity log router - the dashboard timeline.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from talentflow.dependencies import get_activity_repo
from talentflow.models.activity import ActivityLog
from talentflow.repositories import ActivityRepository

router = APIRouter(prefix="/api", tags=["Activities"])


@router.get("/activity-logs", response_model=list[ActivityLog])
async def list_activity_logs(
    limit: Optional[int] = Query(None, ge=1, description="Return only the N most recent entries"),
    repo: ActivityRepository = Depends(get_activity_repo),
):
    """Activity entries, newest first."""
    return await repo.list_recent(limit)
