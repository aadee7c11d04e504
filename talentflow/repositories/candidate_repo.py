"""
Candidate repository - handles candidate operations and pipeline statistics.
"""
from typing import Optional

from talentflow.database import Table
from talentflow.exceptions import ConflictError
from talentflow.models.candidate import Candidate, CandidateCreate, CandidateStats, CandidateUpdate
from talentflow.models.enums import CandidateStatus
from .base import BaseRepository


class CandidateRepository(BaseRepository[Candidate]):
    """Repository for candidate operations."""

    @property
    def table(self) -> Table:
        return self.db.candidates

    def _check_references(self, fields: dict) -> None:
        if fields.get("job_id") is not None:
            self._require(self.db.jobs, fields["job_id"], "Job")

    async def get_by_email(self, email: str) -> Optional[Candidate]:
        """Get a candidate by email (case-insensitive)."""
        email = email.lower()
        matches = self.table.filter(lambda c: c.email.lower() == email)
        return matches[0] if matches else None

    async def list_by_job(self, job_id: int) -> list[Candidate]:
        """All candidates that applied to a job."""
        return self.table.filter(lambda c: c.job_id == job_id)

    async def create(self, data: CandidateCreate) -> Candidate:
        """Create a candidate. The job must exist and the email must be unused."""
        self._check_references(data.model_dump())
        if await self.get_by_email(data.email):
            raise ConflictError(f"Candidate with email {data.email} already exists")

        candidate = Candidate(**data.model_dump(), id=self.table.next_id(), created_at=self.db.now())
        return self.table.insert(candidate)

    async def update(self, candidate_id: int, data: CandidateUpdate) -> Optional[Candidate]:
        """Update candidate information. Returns None if the candidate doesn't exist."""
        return await self._update(candidate_id, data)

    async def get_stats(self) -> CandidateStats:
        """Count candidates per pipeline status."""
        candidates = self.table.all()
        counts = {
            status.value: sum(1 for c in candidates if c.status == status)
            for status in CandidateStatus
        }
        return CandidateStats(total=len(candidates), **counts)
