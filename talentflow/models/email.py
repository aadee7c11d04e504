"""
Email template and email log models.
"""
from datetime import datetime
from pydantic import BaseModel, Field

from .enums import EmailStatus


class EmailTemplateCreate(BaseModel):
    """Template with {{placeholder}} tokens in subject and body."""
    type: str = Field(..., min_length=1)
    subject: str
    body: str


class EmailTemplate(EmailTemplateCreate):
    id: int
    created_at: datetime


class EmailLogCreate(BaseModel):
    candidate_id: int
    template_id: int
    subject: str
    body: str
    status: EmailStatus = EmailStatus.SENT


class EmailLog(EmailLogCreate):
    id: int
    sent_at: datetime


class SendEmailRequest(BaseModel):
    candidate_id: int
    template_type: str
    customizations: dict[str, str] = Field(default_factory=dict)
