"""
Email log repository - records every rendered email.
"""
from talentflow.database import Table
from talentflow.models.activity import AgentName
from talentflow.models.email import EmailLog, EmailLogCreate
from .activity_repo import ActivityRepository
from .base import BaseRepository


class EmailLogRepository(BaseRepository[EmailLog]):
    """Repository for email log entries."""

    @property
    def table(self) -> Table:
        return self.db.email_logs

    def _check_references(self, fields: dict) -> None:
        if fields.get("candidate_id") is not None:
            self._require(self.db.candidates, fields["candidate_id"], "Candidate")
        if fields.get("template_id") is not None:
            self._require(self.db.email_templates, fields["template_id"], "Email template")

    async def list_by_candidate(self, candidate_id: int) -> list[EmailLog]:
        return self.table.filter(lambda log: log.candidate_id == candidate_id)

    async def create(self, data: EmailLogCreate) -> EmailLog:
        """Record an email and log it on the activity timeline."""
        self._check_references(data.model_dump())

        email_log = EmailLog(**data.model_dump(), id=self.table.next_id(), sent_at=self.db.now())
        email_log = self.table.insert(email_log)

        candidate = self.db.candidates.get(email_log.candidate_id)
        await ActivityRepository(self.db).log(
            agent=AgentName.EMAIL_AUTOMATION.value,
            action="Sent email",
            details=f"Sent email to {candidate.name}: {email_log.subject}",
        )
        return email_log
