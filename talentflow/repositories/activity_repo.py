"""
Activity repository - stores the dashboard activity log.
"""
from typing import Optional

from talentflow.database import Table
from talentflow.models.activity import ActivityLog, ActivityLogCreate
from .base import BaseRepository


class ActivityRepository(BaseRepository[ActivityLog]):
    """Repository for activity log entries."""

    @property
    def table(self) -> Table:
        return self.db.activity_logs

    async def create(self, data: ActivityLogCreate) -> ActivityLog:
        """Create a new activity log entry."""
        entry = ActivityLog(
            **data.model_dump(),
            id=self.table.next_id(),
            created_at=self.db.now(),
        )
        return self.table.insert(entry)

    async def log(self, agent: str, action: str, details: str) -> ActivityLog:
        """Shorthand for create()."""
        return await self.create(ActivityLogCreate(agent=agent, action=action, details=details))

    async def list_recent(self, limit: Optional[int] = None) -> list[ActivityLog]:
        """
        List entries newest first.

        Entries sharing a timestamp are ordered by id, newest id first.
        When `limit` is given only the `limit` most recent entries are returned.
        """
        entries = sorted(
            self.table.all(),
            key=lambda entry: (entry.created_at, entry.id),
            reverse=True,
        )
        return entries[:limit] if limit is not None else entries

    async def set_created_at(self, entry_id: int, created_at) -> Optional[ActivityLog]:
        """Back-date an entry (used when seeding demo data)."""
        entry = self.table.get(entry_id)
        if entry is None:
            return None
        return self.table.replace(entry.model_copy(update={"created_at": created_at}))
