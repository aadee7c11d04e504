"""
Dashboard service - aggregates pipeline statistics for the overview page.
"""
from talentflow.config import DASHBOARD_RECENT_ACTIVITY_LIMIT
from talentflow.database import InMemoryDatabase
from talentflow.models.dashboard import DashboardResponse, DashboardStats
from talentflow.repositories import ActivityRepository, CandidateRepository, InterviewRepository, JobRepository


class DashboardService:
    """Service for dashboard data."""

    def __init__(self, db: InMemoryDatabase):
        self.db = db
        self.job_repo = JobRepository(db)
        self.candidate_repo = CandidateRepository(db)
        self.interview_repo = InterviewRepository(db)
        self.activity_repo = ActivityRepository(db)

    async def get_dashboard(self) -> DashboardResponse:
        return DashboardResponse(
            stats=DashboardStats(
                jobs=await self.job_repo.get_stats(),
                candidates=await self.candidate_repo.get_stats(),
                interviews=await self.interview_repo.get_stats(),
            ),
            recent_activities=await self.activity_repo.list_recent(DASHBOARD_RECENT_ACTIVITY_LIMIT),
            jobs=await self.job_repo.list_all(),
        )
