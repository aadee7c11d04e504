"""
Candidate models.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from .enums import CandidateStatus


class CandidateCreate(BaseModel):
    """Request model for creating a candidate."""
    name: str
    email: EmailStr
    phone: Optional[str] = None
    resume_text: str
    resume_url: Optional[str] = None
    status: CandidateStatus = CandidateStatus.NEW
    job_id: int
    score: Optional[int] = Field(None, ge=0, le=100)


class CandidateUpdate(BaseModel):
    """Partial update for a candidate. Email uniqueness is not re-checked."""
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    resume_text: Optional[str] = None
    resume_url: Optional[str] = None
    status: Optional[CandidateStatus] = None
    job_id: Optional[int] = None
    score: Optional[int] = Field(None, ge=0, le=100)


class Candidate(CandidateCreate):
    """Stored candidate record."""
    id: int
    created_at: datetime


class ResumeSubmission(BaseModel):
    """A resume handed to the ranker; `id` refers to an existing candidate."""
    id: Optional[int] = None
    name: str
    email: EmailStr
    phone: Optional[str] = None
    resume_text: str
    resume_url: Optional[str] = None


class ResumeRankRequest(BaseModel):
    job_id: int
    resumes: list[ResumeSubmission]


class RankedCandidate(Candidate):
    """Candidate annotated with the score the ranker assigned this run."""
    match_score: int = Field(..., ge=0, le=100)
    matched_keywords: list[str] = Field(default_factory=list)


class CandidateStats(BaseModel):
    total: int
    new: int
    screening: int
    interview: int
    hired: int
    rejected: int
