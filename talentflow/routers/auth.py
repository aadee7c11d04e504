"""
Auth router - demo login.
"""
from fastapi import APIRouter, Depends

from talentflow.dependencies import get_auth_service
from talentflow.models.user import LoginRequest, UserResponse
from talentflow.services import AuthService

router = APIRouter(prefix="/api", tags=["Auth"])


@router.post("/login", response_model=UserResponse)
async def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Check username and password; returns the user without the password."""
    return await service.login(request)
