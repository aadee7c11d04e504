"""
Shared plumbing for the in-memory repositories.
"""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from talentflow.database import InMemoryDatabase, Table
from talentflow.exceptions import NotFoundError

RecordT = TypeVar("RecordT", bound=BaseModel)


class BaseRepository(Generic[RecordT]):
    """Point lookup, full scan and partial update over one table."""

    def __init__(self, db: InMemoryDatabase):
        self.db = db

    @property
    def table(self) -> Table:
        raise NotImplementedError

    async def get_by_id(self, record_id: int) -> Optional[RecordT]:
        """Get a record by ID, or None if it doesn't exist."""
        return self.table.get(record_id)

    async def list_all(self) -> list[RecordT]:
        """All records in insertion order."""
        return self.table.all()

    async def _update(self, record_id: int, patch: BaseModel) -> Optional[RecordT]:
        """
        Shallow-merge the explicitly set, non-null fields of `patch`.

        Returns None (and changes nothing) when the record doesn't exist.
        """
        existing = self.table.get(record_id)
        if existing is None:
            return None

        changes = {
            field: getattr(patch, field)
            for field in patch.model_fields_set
            if getattr(patch, field) is not None
        }
        self._check_references(changes)
        updated = existing.model_copy(update=changes)
        return self.table.replace(updated)

    def _check_references(self, fields: dict) -> None:
        """Raise NotFoundError if a foreign key in `fields` is dangling."""

    @staticmethod
    def _require(table: Table, record_id: int, resource: str) -> None:
        if not table.exists(record_id):
            raise NotFoundError(resource, record_id)
