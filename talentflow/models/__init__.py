"""
TalentFlow Backend API Models.

This module re-exports all model classes for convenient importing.
"""

# Enums
from .enums import JobStatus, CandidateStatus, InterviewStatus, Recommendation, EmailStatus

# User models
from .user import UserCreate, UserUpdate, User, UserResponse, LoginRequest

# Job models
from .job import JobCreate, JobUpdate, Job, JobDescriptionRequest, JobStats

# Candidate models
from .candidate import (
    CandidateCreate,
    CandidateUpdate,
    Candidate,
    ResumeSubmission,
    ResumeRankRequest,
    RankedCandidate,
    CandidateStats,
)

# Interview models
from .interview import (
    SentimentBreakdown,
    InterviewCreate,
    InterviewUpdate,
    Interview,
    InterviewStats,
    ScheduleInterviewRequest,
    InterviewResponseItem,
    ConductInterviewRequest,
    ConductInterviewResponse,
    VideoQuestion,
    VideoInterviewRequest,
    VideoInterviewResponse,
    InterviewQuestionsRequest,
    InterviewIdRequest,
    HireRecommendationResponse,
    SentimentAnalysisResponse,
)

# Email models
from .email import EmailTemplateCreate, EmailTemplate, EmailLogCreate, EmailLog, SendEmailRequest

# Activity models
from .activity import AgentName, ActivityLogCreate, ActivityLog

# Dashboard models
from .dashboard import DashboardStats, DashboardResponse

# Inference result variants
from .inference import (
    JobDescriptionResult,
    ResumeScoreResult,
    InterviewQuestionsResult,
    VideoInterviewResult,
    Assessment,
    InterviewAnalysisResult,
    HireRecommendationResult,
    SentimentResult,
    InferenceResult,
)

__all__ = [
    "JobStatus",
    "CandidateStatus",
    "InterviewStatus",
    "Recommendation",
    "EmailStatus",
    "UserCreate",
    "UserUpdate",
    "User",
    "UserResponse",
    "LoginRequest",
    "JobCreate",
    "JobUpdate",
    "Job",
    "JobDescriptionRequest",
    "JobStats",
    "CandidateCreate",
    "CandidateUpdate",
    "Candidate",
    "ResumeSubmission",
    "ResumeRankRequest",
    "RankedCandidate",
    "CandidateStats",
    "SentimentBreakdown",
    "InterviewCreate",
    "InterviewUpdate",
    "Interview",
    "InterviewStats",
    "ScheduleInterviewRequest",
    "InterviewResponseItem",
    "ConductInterviewRequest",
    "ConductInterviewResponse",
    "VideoQuestion",
    "VideoInterviewRequest",
    "VideoInterviewResponse",
    "InterviewQuestionsRequest",
    "InterviewIdRequest",
    "HireRecommendationResponse",
    "SentimentAnalysisResponse",
    "EmailTemplateCreate",
    "EmailTemplate",
    "EmailLogCreate",
    "EmailLog",
    "SendEmailRequest",
    "AgentName",
    "ActivityLogCreate",
    "ActivityLog",
    "DashboardStats",
    "DashboardResponse",
    "JobDescriptionResult",
    "ResumeScoreResult",
    "InterviewQuestionsResult",
    "VideoInterviewResult",
    "Assessment",
    "InterviewAnalysisResult",
    "HireRecommendationResult",
    "SentimentResult",
    "InferenceResult",
]
