"""
Enums for TalentFlow Backend API.
"""
from enum import Enum


class JobStatus(str, Enum):
    """Well-known job statuses. Any value other than ACTIVE counts as closed."""
    ACTIVE = "active"
    CLOSED = "closed"


class CandidateStatus(str, Enum):
    """Candidate pipeline status (new -> screening -> interview -> hired/rejected)."""
    NEW = "new"
    SCREENING = "screening"
    INTERVIEW = "interview"
    HIRED = "hired"
    REJECTED = "rejected"


class InterviewStatus(str, Enum):
    """Interview lifecycle status."""
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Recommendation(str, Enum):
    HIRE = "hire"
    REJECT = "reject"


class EmailStatus(str, Enum):
    SENT = "sent"
    FAILED = "failed"
