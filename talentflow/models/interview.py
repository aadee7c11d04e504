"""
Interview models, including the request shapes for the interview agents.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .enums import InterviewStatus, Recommendation


class SentimentBreakdown(BaseModel):
    """Structured sentiment detail attached to an interview."""
    positive: float = Field(..., ge=0, le=1)
    negative: float = Field(..., ge=0, le=1)
    neutral: float = Field(..., ge=0, le=1)
    confidence: Optional[float] = Field(None, ge=0, le=1)
    tone_indicators: dict[str, float] = Field(default_factory=dict)


class InterviewCreate(BaseModel):
    """Request model for creating an interview."""
    candidate_id: int
    job_id: int
    scheduled_at: datetime
    status: InterviewStatus = InterviewStatus.SCHEDULED
    transcript: Optional[str] = None
    feedback_summary: Optional[str] = None
    recommendation: Optional[Recommendation] = None
    sentiment_score: Optional[int] = Field(None, ge=0, le=100)
    sentiment_analysis: Optional[SentimentBreakdown] = None


class InterviewUpdate(BaseModel):
    """Partial update for an interview."""
    candidate_id: Optional[int] = None
    job_id: Optional[int] = None
    scheduled_at: Optional[datetime] = None
    status: Optional[InterviewStatus] = None
    transcript: Optional[str] = None
    feedback_summary: Optional[str] = None
    recommendation: Optional[Recommendation] = None
    sentiment_score: Optional[int] = Field(None, ge=0, le=100)
    sentiment_analysis: Optional[SentimentBreakdown] = None


class Interview(InterviewCreate):
    """Stored interview record."""
    id: int
    created_at: datetime


class InterviewStats(BaseModel):
    total: int
    scheduled: int
    completed: int
    cancelled: int


# =============================================================================
# Agent request / response models
# =============================================================================

class ScheduleInterviewRequest(BaseModel):
    candidate_id: int
    job_id: int
    scheduled_at: datetime


class InterviewResponseItem(BaseModel):
    """One answered question in a text interview."""
    question: str
    answer: str


class ConductInterviewRequest(BaseModel):
    interview_id: int
    responses: Optional[list[InterviewResponseItem]] = None


class ConductInterviewResponse(BaseModel):
    interview_id: int
    message: str
    status: str  # "in_progress" or "completed"
    question: Optional[str] = None


class VideoQuestion(BaseModel):
    """A video interview question and the candidate's (transcribed) answer."""
    question: str
    answer: Optional[str] = None


class VideoInterviewRequest(BaseModel):
    interview_id: int
    video_response: Optional[str] = None
    previous_questions: Optional[list[VideoQuestion]] = None


class VideoInterviewResponse(BaseModel):
    status: str  # "started", "in-progress" or "completed"
    message: Optional[str] = None
    question: Optional[str] = None
    question_number: Optional[int] = None
    total_questions: Optional[int] = None
    instructions: Optional[str] = None


class InterviewQuestionsRequest(BaseModel):
    job_id: int
    candidate_id: Optional[int] = None
    previous_responses: list[InterviewResponseItem] = Field(default_factory=list)


class InterviewIdRequest(BaseModel):
    """Body shared by the analysis, recommendation and sentiment endpoints."""
    interview_id: int


class HireRecommendationResponse(BaseModel):
    interview_id: int
    recommendation: Recommendation
    strengths: list[str]
    weaknesses: list[str]
    summary: str


class SentimentAnalysisResponse(BaseModel):
    interview_id: int
    sentiment_score: int = Field(..., ge=0, le=100)
    sentiment_analysis: SentimentBreakdown
