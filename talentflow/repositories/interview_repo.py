"""
Interview repository - handles interviews and interview statistics.
"""
from typing import Optional

from talentflow.database import Table
from talentflow.models.activity import AgentName
from talentflow.models.enums import InterviewStatus
from talentflow.models.interview import Interview, InterviewCreate, InterviewStats, InterviewUpdate
from .activity_repo import ActivityRepository
from .base import BaseRepository


class InterviewRepository(BaseRepository[Interview]):
    """Repository for interview operations."""

    @property
    def table(self) -> Table:
        return self.db.interviews

    def _check_references(self, fields: dict) -> None:
        if fields.get("candidate_id") is not None:
            self._require(self.db.candidates, fields["candidate_id"], "Candidate")
        if fields.get("job_id") is not None:
            self._require(self.db.jobs, fields["job_id"], "Job")

    async def list_by_candidate(self, candidate_id: int) -> list[Interview]:
        return self.table.filter(lambda i: i.candidate_id == candidate_id)

    async def list_by_job(self, job_id: int) -> list[Interview]:
        return self.table.filter(lambda i: i.job_id == job_id)

    async def create(self, data: InterviewCreate) -> Interview:
        """Create an interview and log it on the activity timeline."""
        self._check_references(data.model_dump())

        interview = Interview(**data.model_dump(), id=self.table.next_id(), created_at=self.db.now())
        interview = self.table.insert(interview)

        candidate = self.db.candidates.get(interview.candidate_id)
        job = self.db.jobs.get(interview.job_id)
        await ActivityRepository(self.db).log(
            agent=AgentName.INTERVIEW_SCHEDULER.value,
            action="Scheduled interview",
            details=f'Scheduled interview with {candidate.name} for "{job.title}"',
        )
        return interview

    async def update(self, interview_id: int, data: InterviewUpdate) -> Optional[Interview]:
        """Update an interview. Returns None if the interview doesn't exist."""
        return await self._update(interview_id, data)

    async def get_stats(self) -> InterviewStats:
        """Count interviews per status."""
        interviews = self.table.all()
        counts = {
            status.value: sum(1 for i in interviews if i.status == status)
            for status in InterviewStatus
        }
        return InterviewStats(total=len(interviews), **counts)
