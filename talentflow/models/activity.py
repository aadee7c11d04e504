"""
Activity log models for the dashboard timeline.
"""
from datetime import datetime
from enum import Enum
from pydantic import BaseModel


class AgentName(str, Enum):
    """Labels of the pipeline stages that write activity entries."""
    JD_GENERATOR = "JD Generator"
    RESUME_RANKER = "Resume Ranker"
    INTERVIEW_SCHEDULER = "Interview Scheduler"
    INTERVIEW_AGENT = "Interview Agent"
    VIDEO_INTERVIEW_AGENT = "Video Interview Agent"
    HIRE_RECOMMENDATION = "Hire Recommendation"
    SENTIMENT_ANALYZER = "Sentiment Analyzer"
    EMAIL_AUTOMATION = "Email Automation"


class ActivityLogCreate(BaseModel):
    """Request model for creating an activity entry."""
    agent: str
    action: str
    details: str


class ActivityLog(ActivityLogCreate):
    """Stored activity entry."""
    id: int
    created_at: datetime
