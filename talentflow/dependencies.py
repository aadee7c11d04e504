"""
FastAPI dependency injection factories.

The database and inference service are created once by the app factory
and stored on `app.state`; these factories hand them (and the services
built on them) to routers.
"""
from fastapi import Depends, Request

from talentflow.database import InMemoryDatabase
from talentflow.repositories import (
    ActivityRepository,
    CandidateRepository,
    EmailLogRepository,
    EmailTemplateRepository,
    InterviewRepository,
    JobRepository,
)
from talentflow.services import (
    AuthService,
    DashboardService,
    EmailService,
    EvaluationService,
    InterviewService,
    JobService,
    MockInferenceService,
    ScreeningService,
)


# =============================================================================
# Core Dependencies
# =============================================================================

def get_database(request: Request) -> InMemoryDatabase:
    """Get the process-wide in-memory database."""
    return request.app.state.database


def get_inference(request: Request) -> MockInferenceService:
    """Get the mock inference service."""
    return request.app.state.inference


# =============================================================================
# Repository Dependencies
# =============================================================================

def get_job_repo(db: InMemoryDatabase = Depends(get_database)) -> JobRepository:
    return JobRepository(db)


def get_candidate_repo(db: InMemoryDatabase = Depends(get_database)) -> CandidateRepository:
    return CandidateRepository(db)


def get_interview_repo(db: InMemoryDatabase = Depends(get_database)) -> InterviewRepository:
    return InterviewRepository(db)


def get_email_template_repo(db: InMemoryDatabase = Depends(get_database)) -> EmailTemplateRepository:
    return EmailTemplateRepository(db)


def get_email_log_repo(db: InMemoryDatabase = Depends(get_database)) -> EmailLogRepository:
    return EmailLogRepository(db)


def get_activity_repo(db: InMemoryDatabase = Depends(get_database)) -> ActivityRepository:
    return ActivityRepository(db)


# =============================================================================
# Service Dependencies
# =============================================================================

def get_job_service(
    db: InMemoryDatabase = Depends(get_database),
    inference: MockInferenceService = Depends(get_inference),
) -> JobService:
    return JobService(db, inference)


def get_screening_service(
    db: InMemoryDatabase = Depends(get_database),
    inference: MockInferenceService = Depends(get_inference),
) -> ScreeningService:
    return ScreeningService(db, inference)


def get_interview_service(
    db: InMemoryDatabase = Depends(get_database),
    inference: MockInferenceService = Depends(get_inference),
) -> InterviewService:
    return InterviewService(db, inference)


def get_evaluation_service(
    db: InMemoryDatabase = Depends(get_database),
    inference: MockInferenceService = Depends(get_inference),
) -> EvaluationService:
    return EvaluationService(db, inference)


def get_email_service(db: InMemoryDatabase = Depends(get_database)) -> EmailService:
    return EmailService(db)


def get_dashboard_service(db: InMemoryDatabase = Depends(get_database)) -> DashboardService:
    return DashboardService(db)


def get_auth_service(db: InMemoryDatabase = Depends(get_database)) -> AuthService:
    return AuthService(db)
