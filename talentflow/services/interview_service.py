"""
Interview service - scheduling and the text/video interview agents.
"""
import logging

from talentflow.database import InMemoryDatabase
from talentflow.exceptions import NotFoundError
from talentflow.config import VIDEO_INTERVIEW_COMPLETION_THRESHOLD
from talentflow.models.activity import AgentName
from talentflow.models.candidate import Candidate
from talentflow.models.enums import InterviewStatus
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
from talentflow.models.job import Job
from talentflow.repositories import ActivityRepository, CandidateRepository, InterviewRepository, JobRepository
from .email_service import EmailService
from .inference_service import MockInferenceService

logger = logging.getLogger(__name__)

VIDEO_ANSWER_PLACEHOLDER = "[Video Response]"


def build_transcript(pairs: list[tuple[str, str]]) -> str:
    """Render question/answer pairs as `Q: ...\\nA: ...` blocks separated by blank lines."""
    return "\n\n".join(f"Q: {question}\nA: {answer}" for question, answer in pairs)


class InterviewService:
    """Service for the Interview Scheduler, Interview Agent and Video Interview Agent."""

    def __init__(self, db: InMemoryDatabase, inference: MockInferenceService):
        self.db = db
        self.inference = inference
        self.interview_repo = InterviewRepository(db)
        self.candidate_repo = CandidateRepository(db)
        self.job_repo = JobRepository(db)
        self.activity_repo = ActivityRepository(db)
        self.email_service = EmailService(db)

    async def get_interview(self, interview_id: int) -> Interview:
        interview = await self.interview_repo.get_by_id(interview_id)
        if not interview:
            raise NotFoundError("Interview", interview_id)
        return interview

    async def get_participants(self, interview: Interview) -> tuple[Candidate, Job]:
        """Candidate and job an interview refers to."""
        candidate = await self.candidate_repo.get_by_id(interview.candidate_id)
        if not candidate:
            raise NotFoundError("Candidate", interview.candidate_id)
        job = await self.job_repo.get_by_id(interview.job_id)
        if not job:
            raise NotFoundError("Job", interview.job_id)
        return candidate, job

    async def schedule(self, request: ScheduleInterviewRequest) -> Interview:
        """
        Schedule an interview and email the candidate an invitation.

        Raises:
            NotFoundError: If the candidate or job doesn't exist
        """
        interview = await self.interview_repo.create(
            InterviewCreate(
                candidate_id=request.candidate_id,
                job_id=request.job_id,
                scheduled_at=request.scheduled_at,
                status=InterviewStatus.SCHEDULED,
            )
        )

        candidate, job = await self.get_participants(interview)
        await self.email_service.send_interview_invitation(interview, candidate, job)

        logger.info(f"Scheduled interview {interview.id} for candidate {candidate.id}")
        return interview

    async def conduct(self, request: ConductInterviewRequest) -> ConductInterviewResponse:
        """
        Run the text interview agent.

        Without responses the interview starts and the first question is
        returned. With responses the transcript is stored and the interview
        is marked completed.
        """
        interview = await self.get_interview(request.interview_id)
        candidate, job = await self.get_participants(interview)

        if not request.responses:
            suggestions = await self.inference.suggest_interview_questions(job.title)
            return ConductInterviewResponse(
                interview_id=interview.id,
                message="Interview started",
                status="in_progress",
                question=suggestions.technical[0],
            )

        transcript = build_transcript([(r.question, r.answer) for r in request.responses])
        await self.interview_repo.update(
            interview.id,
            InterviewUpdate(transcript=transcript, status=InterviewStatus.COMPLETED),
        )
        await self.activity_repo.log(
            agent=AgentName.INTERVIEW_AGENT.value,
            action="Completed interview",
            details=f'Completed interview with {candidate.name} for "{job.title}"',
        )
        logger.info(f"Interview {interview.id} completed with {len(request.responses)} responses")

        return ConductInterviewResponse(
            interview_id=interview.id,
            message="Interview completed",
            status="completed",
        )

    async def video_interview(self, request: VideoInterviewRequest) -> VideoInterviewResponse:
        """
        Run the video interview agent.

        Answered questions are written to the transcript. Once enough
        questions have been answered the interview is completed; otherwise
        the next question is returned.
        """
        interview = await self.get_interview(request.interview_id)
        candidate, job = await self.get_participants(interview)
        previous = request.previous_questions or []

        if previous:
            completed = len(previous) >= VIDEO_INTERVIEW_COMPLETION_THRESHOLD
            transcript = build_transcript(
                [(q.question, q.answer or VIDEO_ANSWER_PLACEHOLDER) for q in previous]
            )
            await self.interview_repo.update(
                interview.id,
                InterviewUpdate(
                    transcript=transcript,
                    status=InterviewStatus.COMPLETED if completed else InterviewStatus.SCHEDULED,
                ),
            )
            verb = "Completed" if completed else "Updated"
            await self.activity_repo.log(
                agent=AgentName.VIDEO_INTERVIEW_AGENT.value,
                action=f"{verb} video interview",
                details=f'{verb} video interview with {candidate.name} for "{job.title}"',
            )

            if completed:
                logger.info(f"Video interview {interview.id} completed")
                return VideoInterviewResponse(
                    status="completed",
                    message="Video interview completed successfully.",
                )

        result = await self.inference.conduct_video_interview(
            job_title=job.title,
            candidate_name=candidate.name,
            previous_questions=previous,
        )
        return VideoInterviewResponse(**result.model_dump(exclude={"task"}))

    async def suggest_questions(self, request: InterviewQuestionsRequest) -> InterviewQuestionsResult:
        """Suggest interview questions for a job, or a follow-up on the last answer."""
        job = await self.job_repo.get_by_id(request.job_id)
        if not job:
            raise NotFoundError("Job", request.job_id)
        if request.candidate_id is not None and not await self.candidate_repo.get_by_id(request.candidate_id):
            raise NotFoundError("Candidate", request.candidate_id)

        return await self.inference.suggest_interview_questions(job.title, request.previous_responses)
