"""
User repository - handles dashboard users.
"""
from typing import Optional

from talentflow.database import Table
from talentflow.exceptions import ConflictError
from talentflow.models.user import User, UserCreate, UserUpdate
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user operations."""

    @property
    def table(self) -> Table:
        return self.db.users

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get a user by username."""
        matches = self.table.filter(lambda user: user.username == username)
        return matches[0] if matches else None

    async def create(self, data: UserCreate) -> User:
        """Create a user. Usernames are unique."""
        if await self.get_by_username(data.username):
            raise ConflictError(f"Username already taken: {data.username}")

        user = User(**data.model_dump(), id=self.table.next_id())
        return self.table.insert(user)

    async def update(self, user_id: int, data: UserUpdate) -> Optional[User]:
        """Update user information."""
        return await self._update(user_id, data)
