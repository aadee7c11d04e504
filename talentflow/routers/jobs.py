"""
Job endpoints, including the JD generator agent.
"""
from fastapi import APIRouter, Depends, status

from talentflow.dependencies import get_job_repo, get_job_service
from talentflow.exceptions import NotFoundError
from talentflow.models.job import Job, JobCreate, JobDescriptionRequest, JobUpdate
from talentflow.repositories import JobRepository
from talentflow.services import JobService

router = APIRouter(prefix="/api", tags=["Jobs"])


@router.get("/jobs", response_model=list[Job])
async def list_jobs(repo: JobRepository = Depends(get_job_repo)):
    """List all jobs."""
    return await repo.list_all()


@router.get("/jobs/{job_id}", response_model=Job)
async def get_job(job_id: int, repo: JobRepository = Depends(get_job_repo)):
    """Get a single job."""
    job = await repo.get_by_id(job_id)
    if not job:
        raise NotFoundError("Job", job_id)
    return job


@router.post("/jobs", response_model=Job, status_code=status.HTTP_201_CREATED)
async def create_job(request: JobCreate, repo: JobRepository = Depends(get_job_repo)):
    """Create a job."""
    return await repo.create(request)


@router.put("/jobs/{job_id}", response_model=Job)
async def update_job(job_id: int, request: JobUpdate, repo: JobRepository = Depends(get_job_repo)):
    """Update a job. Only the fields present in the body change."""
    job = await repo.update(job_id, request)
    if not job:
        raise NotFoundError("Job", job_id)
    return job


@router.post("/jd-generator", response_model=Job, status_code=status.HTTP_201_CREATED)
async def generate_job_description(
    request: JobDescriptionRequest,
    service: JobService = Depends(get_job_service),
):
    """Generate a job description from title, department, experience and skills."""
    return await service.generate_job(request)
