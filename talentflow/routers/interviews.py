"""
Interview endpoints: CRUD, scheduling and the interview agents.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from talentflow.dependencies import get_interview_repo, get_interview_service
from talentflow.exceptions import NotFoundError
from talentflow.models.inference import InterviewQuestionsResult
from talentflow.models.interview import (
    ConductInterviewRequest,
    ConductInterviewResponse,
    Interview,
    InterviewCreate,
    InterviewQuestionsRequest,
    InterviewUpdate,
    ScheduleInterviewRequest,
    VideoInterviewRequest,
    VideoInterviewResponse,
)
from talentflow.repositories import InterviewRepository
from talentflow.services import InterviewService

router = APIRouter(prefix="/api", tags=["Interviews"])


@router.get("/interviews", response_model=list[Interview])
async def list_interviews(
    candidate_id: Optional[int] = Query(None, description="Only interviews for this candidate"),
    job_id: Optional[int] = Query(None, description="Only interviews for this job"),
    legacy_candidate_id: Optional[int] = Query(None, alias="candidateId", include_in_schema=False),
    legacy_job_id: Optional[int] = Query(None, alias="jobId", include_in_schema=False),
    repo: InterviewRepository = Depends(get_interview_repo),
):
    """List interviews. candidate_id takes precedence over job_id."""
    if candidate_id is None:
        candidate_id = legacy_candidate_id
    if job_id is None:
        job_id = legacy_job_id
    if candidate_id is not None:
        return await repo.list_by_candidate(candidate_id)
    if job_id is not None:
        return await repo.list_by_job(job_id)
    return await repo.list_all()


@router.get("/interviews/{interview_id}", response_model=Interview)
async def get_interview(interview_id: int, repo: InterviewRepository = Depends(get_interview_repo)):
    interview = await repo.get_by_id(interview_id)
    if not interview:
        raise NotFoundError("Interview", interview_id)
    return interview


@router.post("/interviews", response_model=Interview, status_code=status.HTTP_201_CREATED)
async def create_interview(request: InterviewCreate, repo: InterviewRepository = Depends(get_interview_repo)):
    """Create an interview record directly (no invitation email)."""
    return await repo.create(request)


@router.put("/interviews/{interview_id}", response_model=Interview)
async def update_interview(
    interview_id: int,
    request: InterviewUpdate,
    repo: InterviewRepository = Depends(get_interview_repo),
):
    interview = await repo.update(interview_id, request)
    if not interview:
        raise NotFoundError("Interview", interview_id)
    return interview


@router.post("/schedule-interview", response_model=Interview, status_code=status.HTTP_201_CREATED)
async def schedule_interview(
    request: ScheduleInterviewRequest,
    service: InterviewService = Depends(get_interview_service),
):
    """Schedule an interview and send the candidate an invitation email."""
    return await service.schedule(request)


@router.post("/conduct-interview", response_model=ConductInterviewResponse)
async def conduct_interview(
    request: ConductInterviewRequest,
    service: InterviewService = Depends(get_interview_service),
):
    """Start a text interview, or complete it by submitting the responses."""
    return await service.conduct(request)


@router.post("/video-interview", response_model=VideoInterviewResponse, response_model_exclude_none=True)
async def video_interview(
    request: VideoInterviewRequest,
    service: InterviewService = Depends(get_interview_service),
):
    """Advance a video interview by one question."""
    return await service.video_interview(request)


@router.post("/interview-questions", response_model=InterviewQuestionsResult)
async def suggest_interview_questions(
    request: InterviewQuestionsRequest,
    service: InterviewService = Depends(get_interview_service),
):
    """Suggest technical and behavioral questions, or a follow-up question."""
    return await service.suggest_questions(request)
