"""
Repository layer for data access.
"""
from .user_repo import UserRepository
from .job_repo import JobRepository
from .candidate_repo import CandidateRepository
from .interview_repo import InterviewRepository
from .email_template_repo import EmailTemplateRepository
from .email_log_repo import EmailLogRepository
from .activity_repo import ActivityRepository

__all__ = [
    "UserRepository",
    "JobRepository",
    "CandidateRepository",
    "InterviewRepository",
    "EmailTemplateRepository",
    "EmailLogRepository",
    "ActivityRepository",
]
