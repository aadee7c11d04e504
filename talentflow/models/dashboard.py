"""
Dashboard aggregate models.
"""
from pydantic import BaseModel

from .activity import ActivityLog
from .candidate import CandidateStats
from .interview import InterviewStats
from .job import Job, JobStats


class DashboardStats(BaseModel):
    jobs: JobStats
    candidates: CandidateStats
    interviews: InterviewStats


class DashboardResponse(BaseModel):
    stats: DashboardStats
    recent_activities: list[ActivityLog]
    jobs: list[Job]
