"""
Pytest fixtures for TalentFlow Backend tests.

Every test gets its own in-memory database and a seeded mock inference
service with no artificial latency, served through httpx's ASGI transport.
"""
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from app import create_app
from talentflow.database import InMemoryDatabase
from talentflow.models.candidate import CandidateCreate
from talentflow.models.email import EmailTemplateCreate
from talentflow.models.interview import InterviewCreate
from talentflow.models.job import JobCreate
from talentflow.models.user import UserCreate
from talentflow.repositories import (
    CandidateRepository,
    EmailTemplateRepository,
    InterviewRepository,
    JobRepository,
    UserRepository,
)
from talentflow.services import MockInferenceService

BASE_URL = "http://test"


class FakeClock:
    """Clock that advances one second per reading."""

    def __init__(self, start: datetime = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def database() -> InMemoryDatabase:
    """Empty in-memory database with a deterministic clock."""
    return InMemoryDatabase(clock=FakeClock())


@pytest.fixture
def inference() -> MockInferenceService:
    return MockInferenceService(seed=42, latency_seconds=0)


@pytest.fixture
def app(database: InMemoryDatabase, inference: MockInferenceService):
    return create_app(database=database, inference_service=inference)


@pytest.fixture
async def client(app):
    """Async HTTP client talking to the app in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url=BASE_URL, timeout=30.0) as client:
        yield client


@pytest.fixture
async def user(database: InMemoryDatabase):
    return await UserRepository(database).create(
        UserCreate(
            username="jane.smith",
            password="password123",
            full_name="Jane Smith",
            role="HR Manager",
        )
    )


@pytest.fixture
async def job(database: InMemoryDatabase, user):
    return await JobRepository(database).create(
        JobCreate(
            title="Backend Engineer",
            department="Engineering",
            description="Build APIs",
            requirements="Python, FastAPI, PostgreSQL",
            experience="3+ years",
            created_by=user.id,
        )
    )


@pytest.fixture
async def candidate(database: InMemoryDatabase, job):
    return await CandidateRepository(database).create(
        CandidateCreate(
            name="Alex Doe",
            email="alex@example.com",
            resume_text="Python developer with FastAPI experience",
            job_id=job.id,
        )
    )


@pytest.fixture
async def invitation_template(database: InMemoryDatabase):
    return await EmailTemplateRepository(database).create(
        EmailTemplateCreate(
            type="interview_invitation",
            subject="Interview for {{position}}",
            body="Dear {{candidate_name}}, see you on {{interview_date}} at {{interview_time}} for {{position}}.",
        )
    )


@pytest.fixture
async def scheduled_interview(database: InMemoryDatabase, candidate, job):
    return await InterviewRepository(database).create(
        InterviewCreate(
            candidate_id=candidate.id,
            job_id=job.id,
            scheduled_at=datetime(2025, 3, 5, 14, 30, tzinfo=timezone.utc),
        )
    )


@pytest.fixture
async def completed_interview(database: InMemoryDatabase, candidate, job):
    return await InterviewRepository(database).create(
        InterviewCreate(
            candidate_id=candidate.id,
            job_id=job.id,
            scheduled_at=datetime(2025, 2, 1, 10, 0, tzinfo=timezone.utc),
            status="completed",
            transcript="Q: Tell me about yourself\nA: I build APIs.",
        )
    )
