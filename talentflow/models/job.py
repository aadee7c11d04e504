"""
Job models.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .enums import JobStatus


class JobCreate(BaseModel):
    """Request model for creating a job."""
    title: str
    department: str
    description: str
    requirements: str
    experience: str
    status: str = JobStatus.ACTIVE.value  # free text; anything but "active" is closed
    created_by: int


class JobUpdate(BaseModel):
    """Partial update for a job."""
    title: Optional[str] = None
    department: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    experience: Optional[str] = None
    status: Optional[str] = None
    created_by: Optional[int] = None


class Job(JobCreate):
    """Stored job record."""
    id: int
    created_at: datetime


class JobDescriptionRequest(BaseModel):
    """Input for the JD generator."""
    title: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    experience: str
    skills: str = Field(..., description="Comma separated list of required skills")
    created_by: int


class JobStats(BaseModel):
    total: int
    active: int
    closed: int
