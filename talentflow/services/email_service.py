"""
Email service - renders templates and records sent emails.

Emails are never delivered; rendering and logging is the whole job.
"""
import logging
from typing import Mapping, Optional

from talentflow.config import INTERVIEW_INVITATION_TEMPLATE
from talentflow.database import InMemoryDatabase
from talentflow.exceptions import NotFoundError
from talentflow.models.candidate import Candidate
from talentflow.models.email import EmailLog, EmailLogCreate, EmailTemplate, SendEmailRequest
from talentflow.models.enums import EmailStatus
from talentflow.models.interview import Interview
from talentflow.models.job import Job
from talentflow.repositories import CandidateRepository, EmailLogRepository, EmailTemplateRepository, JobRepository

logger = logging.getLogger(__name__)


def render_template(text: str, values: Mapping[str, str]) -> str:
    """
    Replace every `{{key}}` token with its value.

    Placeholders without a value are left untouched.
    """
    for key, value in values.items():
        text = text.replace("{{" + key + "}}", value)
    return text


class EmailService:
    """Service for the Email Automation agent."""

    def __init__(self, db: InMemoryDatabase):
        self.db = db
        self.candidate_repo = CandidateRepository(db)
        self.job_repo = JobRepository(db)
        self.template_repo = EmailTemplateRepository(db)
        self.log_repo = EmailLogRepository(db)

    @staticmethod
    def render(
        template: EmailTemplate,
        candidate: Candidate,
        job: Job,
        extra: Optional[Mapping[str, str]] = None,
    ) -> tuple[str, str]:
        """
        Render subject and body.

        `position` and `candidate_name` are filled first, then `extra`, so
        customizations can't override the standard placeholders.
        """
        defaults = {"position": job.title, "candidate_name": candidate.name}
        subject = render_template(render_template(template.subject, defaults), extra or {})
        body = render_template(render_template(template.body, defaults), extra or {})
        return subject, body

    async def send_email(self, request: SendEmailRequest) -> EmailLog:
        """
        Render a template for a candidate and log the email as sent.

        Raises:
            NotFoundError: If the candidate, the template type or the
                candidate's job doesn't exist
        """
        candidate = await self.candidate_repo.get_by_id(request.candidate_id)
        if not candidate:
            raise NotFoundError("Candidate", request.candidate_id)

        template = await self.template_repo.get_by_type(request.template_type)
        if not template:
            raise NotFoundError("Email template", request.template_type)

        job = await self.job_repo.get_by_id(candidate.job_id)
        if not job:
            raise NotFoundError("Job", candidate.job_id)

        subject, body = self.render(template, candidate, job, request.customizations)
        email_log = await self.log_repo.create(
            EmailLogCreate(
                candidate_id=candidate.id,
                template_id=template.id,
                subject=subject,
                body=body,
                status=EmailStatus.SENT,
            )
        )
        logger.info(f"Sent '{template.type}' email to candidate {candidate.id}")
        return email_log

    async def send_interview_invitation(
        self,
        interview: Interview,
        candidate: Candidate,
        job: Job,
    ) -> Optional[EmailLog]:
        """Send the interview invitation, if that template exists."""
        template = await self.template_repo.get_by_type(INTERVIEW_INVITATION_TEMPLATE)
        if not template:
            logger.warning("No interview invitation template configured, skipping email")
            return None

        subject, body = self.render(
            template,
            candidate,
            job,
            {
                "interview_date": interview.scheduled_at.strftime("%m/%d/%Y"),
                "interview_time": interview.scheduled_at.strftime("%I:%M %p"),
            },
        )
        return await self.log_repo.create(
            EmailLogCreate(
                candidate_id=candidate.id,
                template_id=template.id,
                subject=subject,
                body=body,
                status=EmailStatus.SENT,
            )
        )
