"""
Job repository - handles job postings and job statistics.
"""
from typing import Optional

from talentflow.database import Table
from talentflow.models.activity import AgentName
from talentflow.models.enums import JobStatus
from talentflow.models.job import Job, JobCreate, JobStats, JobUpdate
from .activity_repo import ActivityRepository
from .base import BaseRepository


class JobRepository(BaseRepository[Job]):
    """Repository for job operations."""

    @property
    def table(self) -> Table:
        return self.db.jobs

    def _check_references(self, fields: dict) -> None:
        if fields.get("created_by") is not None:
            self._require(self.db.users, fields["created_by"], "User")

    async def create(self, data: JobCreate) -> Job:
        """Create a job and log it on the activity timeline."""
        self._check_references(data.model_dump())

        job = Job(**data.model_dump(), id=self.table.next_id(), created_at=self.db.now())
        job = self.table.insert(job)

        await ActivityRepository(self.db).log(
            agent=AgentName.JD_GENERATOR.value,
            action="Created job description",
            details=f'Created job description for "{job.title}"',
        )
        return job

    async def update(self, job_id: int, data: JobUpdate) -> Optional[Job]:
        """Update a job. Returns None if the job doesn't exist."""
        return await self._update(job_id, data)

    async def get_stats(self) -> JobStats:
        """Count total, active and closed jobs (closed = anything not active)."""
        jobs = self.table.all()
        active = sum(1 for job in jobs if job.status == JobStatus.ACTIVE.value)
        return JobStats(total=len(jobs), active=active, closed=len(jobs) - active)
