"""
Email endpoints: templates, sent email log and the email automation agent.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from talentflow.dependencies import get_email_log_repo, get_email_service, get_email_template_repo
from talentflow.models.email import EmailLog, EmailTemplate, EmailTemplateCreate, SendEmailRequest
from talentflow.repositories import EmailLogRepository, EmailTemplateRepository
from talentflow.services import EmailService

router = APIRouter(prefix="/api", tags=["Emails"])


@router.get("/email-templates", response_model=list[EmailTemplate])
async def list_email_templates(repo: EmailTemplateRepository = Depends(get_email_template_repo)):
    return await repo.list_all()


@router.post("/email-templates", response_model=EmailTemplate, status_code=status.HTTP_201_CREATED)
async def create_email_template(
    request: EmailTemplateCreate,
    repo: EmailTemplateRepository = Depends(get_email_template_repo),
):
    """Create a template. Use {{position}}, {{candidate_name}} or custom placeholders."""
    return await repo.create(request)


@router.get("/email-logs", response_model=list[EmailLog])
async def list_email_logs(
    candidate_id: Optional[int] = Query(None, description="Only emails sent to this candidate"),
    legacy_candidate_id: Optional[int] = Query(None, alias="candidateId", include_in_schema=False),
    repo: EmailLogRepository = Depends(get_email_log_repo),
):
    if candidate_id is None:
        candidate_id = legacy_candidate_id
    if candidate_id is not None:
        return await repo.list_by_candidate(candidate_id)
    return await repo.list_all()


@router.post("/send-email", response_model=EmailLog)
async def send_email(request: SendEmailRequest, service: EmailService = Depends(get_email_service)):
    """Render a template for a candidate and record the email as sent."""
    return await service.send_email(request)
