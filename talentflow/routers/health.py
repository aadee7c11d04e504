"""
Health check router.
"""
from fastapi import APIRouter, Depends

from talentflow.database import InMemoryDatabase
from talentflow.dependencies import get_database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(db: InMemoryDatabase = Depends(get_database)):
    """Health check endpoint with per-table row counts."""
    return {"status": "healthy", "service": "talentflow-backend", "tables": db.counts()}
