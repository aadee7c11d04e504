"""
Screening service - ranks resumes against a job.
"""
import logging
from typing import Optional

from talentflow.database import InMemoryDatabase
from talentflow.exceptions import NotFoundError
from talentflow.models.activity import AgentName
from talentflow.models.candidate import (
    Candidate,
    CandidateCreate,
    CandidateUpdate,
    RankedCandidate,
    ResumeRankRequest,
    ResumeSubmission,
)
from talentflow.models.enums import CandidateStatus
from talentflow.models.job import Job
from talentflow.repositories import ActivityRepository, CandidateRepository, JobRepository
from .inference_service import MockInferenceService

logger = logging.getLogger(__name__)


class ScreeningService:
    """Service for the Resume Ranker agent."""

    def __init__(self, db: InMemoryDatabase, inference: MockInferenceService):
        self.db = db
        self.inference = inference
        self.job_repo = JobRepository(db)
        self.candidate_repo = CandidateRepository(db)
        self.activity_repo = ActivityRepository(db)

    async def rank_resumes(self, request: ResumeRankRequest) -> list[RankedCandidate]:
        """
        Score every resume for the job and return them best first.

        Resumes carrying an `id` update that candidate's score. Resumes
        without an `id` are matched to the job's candidate with the same
        email, or become a new candidate for the job. Resumes pointing at an
        unknown candidate or at a candidate of another job are skipped and
        leave that candidate untouched.

        Raises:
            NotFoundError: If the job doesn't exist
        """
        job = await self.job_repo.get_by_id(request.job_id)
        if not job:
            raise NotFoundError("Job", request.job_id)

        results = await self.inference.score_resumes([r.resume_text for r in request.resumes], job)

        ranked: list[RankedCandidate] = []
        for resume, result in zip(request.resumes, results):
            candidate = await self._store_score(resume, job, result.score)
            if candidate is None:
                continue

            ranked.append(
                RankedCandidate(
                    **candidate.model_dump(),
                    match_score=result.score,
                    matched_keywords=result.matched_keywords,
                )
            )

        ranked.sort(key=lambda c: c.match_score, reverse=True)

        await self.activity_repo.log(
            agent=AgentName.RESUME_RANKER.value,
            action="Ranked resumes",
            details=f'Ranked {len(ranked)} resumes for "{job.title}" position',
        )
        logger.info(f"Ranked {len(ranked)} resumes for job {job.id}")
        return ranked

    async def _store_score(self, resume: ResumeSubmission, job: Job, score: int) -> Optional[Candidate]:
        """Find or create the job's candidate behind a resume and persist its score."""
        if resume.id is not None:
            existing = await self.candidate_repo.get_by_id(resume.id)
            if existing is None:
                logger.warning(f"Skipping resume for unknown candidate {resume.id}")
                return None
        else:
            existing = await self.candidate_repo.get_by_email(resume.email)

        if existing is not None:
            if existing.job_id != job.id:
                logger.warning(
                    f"Skipping resume for candidate {existing.id}: applied to job {existing.job_id}, not {job.id}"
                )
                return None
            return await self.candidate_repo.update(existing.id, CandidateUpdate(score=score))

        return await self.candidate_repo.create(
            CandidateCreate(
                name=resume.name,
                email=resume.email,
                phone=resume.phone,
                resume_text=resume.resume_text,
                resume_url=resume.resume_url,
                status=CandidateStatus.NEW,
                job_id=job.id,
                score=score,
            )
        )
