"""
API routers for endpoint organization.
"""
from .health import router as health_router
from .auth import router as auth_router
from .dashboard import router as dashboard_router
from .jobs import router as jobs_router
from .candidates import router as candidates_router
from .interviews import router as interviews_router
from .evaluations import router as evaluations_router
from .emails import router as emails_router
from .activities import router as activities_router

__all__ = [
    "health_router",
    "auth_router",
    "dashboard_router",
    "jobs_router",
    "candidates_router",
    "interviews_router",
    "evaluations_router",
    "emails_router",
    "activities_router",
]
