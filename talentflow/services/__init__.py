"""
Service layer for business logic.
"""
from .inference_service import MockInferenceService
from .job_service import JobService
from .screening_service import ScreeningService
from .email_service import EmailService, render_template
from .interview_service import InterviewService
from .evaluation_service import EvaluationService
from .dashboard_service import DashboardService
from .auth_service import AuthService
from .demo_service import DemoService

__all__ = [
    "MockInferenceService",
    "JobService",
    "ScreeningService",
    "EmailService",
    "render_template",
    "InterviewService",
    "EvaluationService",
    "DashboardService",
    "AuthService",
    "DemoService",
]
