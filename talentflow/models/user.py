"""
User models.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """Request model for creating a user."""
    username: str
    password: str
    full_name: str
    role: str
    avatar_url: Optional[str] = None


class UserUpdate(BaseModel):
    """Partial update for a user."""
    password: Optional[str] = None
    full_name: Optional[str] = None
    role: Optional[str] = None
    avatar_url: Optional[str] = None


class User(UserCreate):
    """Stored user record."""
    id: int


class UserResponse(BaseModel):
    """User as returned by the API (never includes the password)."""
    id: int
    username: str
    full_name: str
    role: str
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
    username: str
    password: str
