"""
Demo service - seeds the in-memory database with demo data.
"""
import logging
import random
from datetime import timedelta
from typing import Optional

from fixtures import load_activities, load_email_templates, load_jobs, load_users
from talentflow.database import InMemoryDatabase
from talentflow.models.candidate import CandidateCreate
from talentflow.models.email import EmailLogCreate, EmailTemplateCreate
from talentflow.models.enums import CandidateStatus, EmailStatus, InterviewStatus, Recommendation
from talentflow.models.interview import InterviewCreate, SentimentBreakdown
from talentflow.models.job import JobCreate
from talentflow.models.user import UserCreate
from talentflow.repositories import (
    ActivityRepository,
    CandidateRepository,
    EmailLogRepository,
    EmailTemplateRepository,
    InterviewRepository,
    JobRepository,
    UserRepository,
)
from .email_service import EmailService

logger = logging.getLogger(__name__)

DEMO_CANDIDATE_COUNT = 15


def _demo_status(i: int) -> CandidateStatus:
    if i % 5 == 0:
        return CandidateStatus.HIRED
    if i % 4 == 0:
        return CandidateStatus.REJECTED
    if i % 3 == 0:
        return CandidateStatus.INTERVIEW
    if i % 2 == 0:
        return CandidateStatus.SCREENING
    return CandidateStatus.NEW


def _demo_job_index(i: int) -> int:
    """Spread candidates over the four demo jobs (0-based index)."""
    if i % 4 == 0:
        return 3
    if i % 3 == 0:
        return 2
    if i % 2 == 0:
        return 1
    return 0


class DemoService:
    """Service for demo data operations."""

    def __init__(self, db: InMemoryDatabase, seed: Optional[int] = None):
        self.db = db
        self.rng = random.Random(seed)
        self.user_repo = UserRepository(db)
        self.job_repo = JobRepository(db)
        self.candidate_repo = CandidateRepository(db)
        self.interview_repo = InterviewRepository(db)
        self.template_repo = EmailTemplateRepository(db)
        self.email_log_repo = EmailLogRepository(db)
        self.activity_repo = ActivityRepository(db)

    async def seed_demo_data(self) -> dict:
        """
        Seed the database with demo data.

        Returns:
            Dictionary with counts of created records
        """
        users = [await self.user_repo.create(UserCreate(**data)) for data in load_users()]
        owner_id = users[0].id

        jobs = [
            await self.job_repo.create(JobCreate(**data, created_by=owner_id))
            for data in load_jobs()
        ]

        candidates = []
        for i in range(1, DEMO_CANDIDATE_COUNT + 1):
            candidates.append(await self.candidate_repo.create(
                CandidateCreate(
                    name=f"Candidate {i}",
                    email=f"candidate{i}@example.com",
                    phone=f"555-000-{1000 + i}",
                    resume_text=f"Resume text for candidate {i}...",
                    resume_url=f"https://example.com/resumes/candidate{i}.pdf",
                    status=_demo_status(i),
                    job_id=jobs[_demo_job_index(i)].id,
                    score=self.rng.randint(0, 99),
                )
            ))

        templates = [
            await self.template_repo.create(EmailTemplateCreate(**data))
            for data in load_email_templates()
        ]

        now = self.db.now()
        interviews = []
        # Upcoming interviews for candidates 1-5
        for i in range(1, 6):
            interviews.append(await self.interview_repo.create(
                InterviewCreate(
                    candidate_id=candidates[i - 1].id,
                    job_id=jobs[_demo_job_index(i)].id,
                    scheduled_at=now + timedelta(days=i),
                    status=InterviewStatus.SCHEDULED,
                )
            ))

        # Completed interviews for candidates 6-10
        for i in range(6, 11):
            interviews.append(await self.interview_repo.create(
                InterviewCreate(
                    candidate_id=candidates[i - 1].id,
                    job_id=jobs[_demo_job_index(i)].id,
                    scheduled_at=now - timedelta(days=i - 5),
                    status=InterviewStatus.COMPLETED,
                    transcript="Interview transcript content...",
                    feedback_summary="Candidate showed good technical skills but needs improvement in communication...",
                    recommendation=Recommendation.HIRE if i % 2 == 0 else Recommendation.REJECT,
                    sentiment_score=self.rng.randint(0, 99),
                    sentiment_analysis=SentimentBreakdown(positive=0.7, negative=0.1, neutral=0.2),
                )
            ))

        # Invitation emails for the first ten candidates
        invitation = next(t for t in templates if t.type == "interview_invitation")
        email_logs = []
        for candidate in candidates[:10]:
            job = next(j for j in jobs if j.id == candidate.job_id)
            subject, body = EmailService.render(invitation, candidate, job)
            email_logs.append(await self.email_log_repo.create(
                EmailLogCreate(
                    candidate_id=candidate.id,
                    template_id=invitation.id,
                    subject=subject,
                    body=body,
                    status=EmailStatus.SENT,
                )
            ))

        # Back-dated timeline entries, 30 minutes apart
        for i, data in enumerate(load_activities()):
            entry = await self.activity_repo.log(**data)
            await self.activity_repo.set_created_at(entry.id, now - timedelta(minutes=(i + 1) * 30))

        counts = {
            "users_created": len(users),
            "jobs_created": len(jobs),
            "candidates_created": len(candidates),
            "email_templates_created": len(templates),
            "interviews_created": len(interviews),
            "email_logs_created": len(email_logs),
        }
        logger.info(f"Seeded demo data: {counts}")
        return counts
