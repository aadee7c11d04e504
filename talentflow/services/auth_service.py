"""
Auth service - demo login for the dashboard.

Passwords are compared as stored; this is a demo login, not a security layer.
"""
import logging

from talentflow.database import InMemoryDatabase
from talentflow.exceptions import UnauthorizedError
from talentflow.models.user import LoginRequest, UserResponse
from talentflow.repositories import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: InMemoryDatabase):
        self.db = db
        self.user_repo = UserRepository(db)

    async def login(self, request: LoginRequest) -> UserResponse:
        """Return the user (without password) if the credentials match."""
        user = await self.user_repo.get_by_username(request.username)
        if not user or user.password != request.password:
            logger.warning(f"Failed login attempt for {request.username}")
            raise UnauthorizedError()

        return UserResponse.model_validate(user)
