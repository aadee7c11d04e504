"""
Email template repository.
"""
from typing import Optional

from talentflow.database import Table
from talentflow.models.email import EmailTemplate, EmailTemplateCreate
from .base import BaseRepository


class EmailTemplateRepository(BaseRepository[EmailTemplate]):
    """Repository for email templates."""

    @property
    def table(self) -> Table:
        return self.db.email_templates

    async def get_by_type(self, template_type: str) -> Optional[EmailTemplate]:
        """First template of the given type, in insertion order."""
        matches = self.table.filter(lambda t: t.type == template_type)
        return matches[0] if matches else None

    async def create(self, data: EmailTemplateCreate) -> EmailTemplate:
        """Create a template. Template types are unique by convention only."""
        template = EmailTemplate(**data.model_dump(), id=self.table.next_id(), created_at=self.db.now())
        return self.table.insert(template)
