"""
Job service - job description generation.
"""
import logging

from talentflow.database import InMemoryDatabase
from talentflow.models.enums import JobStatus
from talentflow.models.job import Job, JobCreate, JobDescriptionRequest
from talentflow.repositories import JobRepository
from .inference_service import MockInferenceService

logger = logging.getLogger(__name__)


class JobService:
    """Service for the JD generator agent."""

    def __init__(self, db: InMemoryDatabase, inference: MockInferenceService):
        self.db = db
        self.inference = inference
        self.repo = JobRepository(db)

    async def generate_job(self, request: JobDescriptionRequest) -> Job:
        """
        Generate a job description and requirements, then publish the job.

        The created job is active; creating it logs the JD Generator activity.
        """
        result = await self.inference.generate_job_description(
            title=request.title,
            department=request.department,
            experience=request.experience,
            skills=request.skills,
        )

        job = await self.repo.create(
            JobCreate(
                title=request.title,
                department=request.department,
                description=result.description,
                requirements=result.requirements,
                experience=request.experience,
                status=JobStatus.ACTIVE.value,
                created_by=request.created_by,
            )
        )
        logger.info(f"Generated job description for job {job.id} ({job.title})")
        return job
