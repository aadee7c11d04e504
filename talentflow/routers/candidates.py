"""
Candidate endpoints, including the resume ranker agent.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from talentflow.dependencies import get_candidate_repo, get_screening_service
from talentflow.exceptions import NotFoundError
from talentflow.models.candidate import (
    Candidate,
    CandidateCreate,
    CandidateUpdate,
    RankedCandidate,
    ResumeRankRequest,
)
from talentflow.repositories import CandidateRepository
from talentflow.services import ScreeningService

router = APIRouter(prefix="/api", tags=["Candidates"])


@router.get("/candidates", response_model=list[Candidate])
async def list_candidates(
    job_id: Optional[int] = Query(None, description="Only candidates for this job"),
    legacy_job_id: Optional[int] = Query(None, alias="jobId", include_in_schema=False),
    repo: CandidateRepository = Depends(get_candidate_repo),
):
    """List candidates, optionally for a single job."""
    if job_id is None:
        job_id = legacy_job_id
    if job_id is not None:
        return await repo.list_by_job(job_id)
    return await repo.list_all()


@router.get("/candidates/{candidate_id}", response_model=Candidate)
async def get_candidate(candidate_id: int, repo: CandidateRepository = Depends(get_candidate_repo)):
    """Get a single candidate."""
    candidate = await repo.get_by_id(candidate_id)
    if not candidate:
        raise NotFoundError("Candidate", candidate_id)
    return candidate


@router.post("/candidates", response_model=Candidate, status_code=status.HTTP_201_CREATED)
async def create_candidate(request: CandidateCreate, repo: CandidateRepository = Depends(get_candidate_repo)):
    """Create a candidate for an existing job."""
    return await repo.create(request)


@router.put("/candidates/{candidate_id}", response_model=Candidate)
async def update_candidate(
    candidate_id: int,
    request: CandidateUpdate,
    repo: CandidateRepository = Depends(get_candidate_repo),
):
    """Update a candidate (e.g. move it along the pipeline)."""
    candidate = await repo.update(candidate_id, request)
    if not candidate:
        raise NotFoundError("Candidate", candidate_id)
    return candidate


@router.post("/resume-ranker", response_model=list[RankedCandidate])
async def rank_resumes(
    request: ResumeRankRequest,
    service: ScreeningService = Depends(get_screening_service),
):
    """Score resumes against a job and return them best match first."""
    return await service.rank_resumes(request)
