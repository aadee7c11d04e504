"""
In-memory storage arena.

Every entity type lives in its own keyed table with a monotonic id counter.
A single InMemoryDatabase is created per process by the app factory and
handed to repositories, the same way a connection pool would be.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, Generic, Iterator, Optional, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def utc_now() -> datetime:
    """Default clock for created_at / sent_at timestamps."""
    return datetime.now(timezone.utc)


class Table(Generic[RecordT]):
    """Keyed collection of records of one entity type.

    Ids start at 1 and are never reused. Records are stored as pydantic
    models and always handed out as deep copies, so callers can't mutate
    stored state behind the repository's back.
    """

    def __init__(self, name: str):
        self.name = name
        self._rows: dict[int, RecordT] = {}
        self._next_id = 1

    def next_id(self) -> int:
        row_id = self._next_id
        self._next_id += 1
        return row_id

    def insert(self, record: RecordT) -> RecordT:
        self._rows[record.id] = record
        return record.model_copy(deep=True)

    def get(self, row_id: int) -> Optional[RecordT]:
        record = self._rows.get(row_id)
        return record.model_copy(deep=True) if record is not None else None

    def exists(self, row_id: int) -> bool:
        return row_id in self._rows

    def replace(self, record: RecordT) -> RecordT:
        if record.id not in self._rows:
            raise KeyError(f"{self.name} row {record.id} does not exist")
        self._rows[record.id] = record
        return record.model_copy(deep=True)

    def all(self) -> list[RecordT]:
        """All records in insertion order."""
        return [record.model_copy(deep=True) for record in self._rows.values()]

    def filter(self, predicate: Callable[[RecordT], bool]) -> list[RecordT]:
        return [record.model_copy(deep=True) for record in self._rows.values() if predicate(record)]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self.all())


class InMemoryDatabase:
    """Canonical state for all seven entity types.

    Args:
        clock: Callable returning the current timestamp; injectable so tests
            can control created_at ordering.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self.clock = clock
        self.users: Table = Table("users")
        self.jobs: Table = Table("jobs")
        self.candidates: Table = Table("candidates")
        self.interviews: Table = Table("interviews")
        self.email_templates: Table = Table("email_templates")
        self.email_logs: Table = Table("email_logs")
        self.activity_logs: Table = Table("activity_logs")

    def now(self) -> datetime:
        return self.clock()

    def counts(self) -> dict[str, int]:
        """Row counts per table, used by the health endpoint."""
        return {
            table.name: len(table)
            for table in (
                self.users,
                self.jobs,
                self.candidates,
                self.interviews,
                self.email_templates,
                self.email_logs,
                self.activity_logs,
            )
        }


def create_database(clock: Callable[[], datetime] = utc_now) -> InMemoryDatabase:
    """Create an empty database."""
    db = InMemoryDatabase(clock=clock)
    logger.info("In-memory database created")
    return db
