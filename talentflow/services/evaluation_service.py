"""
Evaluation service - post-interview analysis, sentiment and hire recommendation.

All three require a completed interview.
"""
import logging

from talentflow.database import InMemoryDatabase
from talentflow.exceptions import PreconditionFailedError
from talentflow.models.activity import AgentName
from talentflow.models.candidate import CandidateUpdate
from talentflow.models.enums import CandidateStatus, InterviewStatus, Recommendation
from talentflow.models.inference import InterviewAnalysisResult
from talentflow.models.interview import (
    HireRecommendationResponse,
    Interview,
    InterviewUpdate,
    SentimentAnalysisResponse,
)
from talentflow.repositories import ActivityRepository, CandidateRepository, InterviewRepository
from .inference_service import MockInferenceService
from .interview_service import InterviewService

logger = logging.getLogger(__name__)


class EvaluationService:
    """Service for the Hire Recommendation and Sentiment Analyzer agents."""

    def __init__(self, db: InMemoryDatabase, inference: MockInferenceService):
        self.db = db
        self.inference = inference
        self.interviews = InterviewService(db, inference)
        self.interview_repo = InterviewRepository(db)
        self.candidate_repo = CandidateRepository(db)
        self.activity_repo = ActivityRepository(db)

    async def _get_completed_interview(self, interview_id: int) -> Interview:
        interview = await self.interviews.get_interview(interview_id)
        if interview.status != InterviewStatus.COMPLETED:
            raise PreconditionFailedError(
                "Interview must be completed first",
                details={"interview_id": interview_id, "status": interview.status.value},
            )
        return interview

    async def recommend(self, interview_id: int) -> HireRecommendationResponse:
        """
        Generate a hire/reject recommendation for a completed interview.

        Stores the feedback summary and recommendation on the interview and
        moves the candidate to hired or rejected accordingly.

        Raises:
            NotFoundError: If the interview doesn't exist
            PreconditionFailedError: If the interview isn't completed
        """
        interview = await self._get_completed_interview(interview_id)
        candidate, job = await self.interviews.get_participants(interview)

        result = await self.inference.generate_hire_recommendation(
            candidate_name=candidate.name,
            job_title=job.title,
            transcript=interview.transcript,
        )

        await self.interview_repo.update(
            interview.id,
            InterviewUpdate(feedback_summary=result.summary, recommendation=result.recommendation),
        )
        await self.activity_repo.log(
            agent=AgentName.HIRE_RECOMMENDATION.value,
            action="Generated recommendation",
            details=f"Generated {result.recommendation.value} recommendation for {candidate.name} ({job.title})",
        )
        new_status = CandidateStatus.HIRED if result.recommendation == Recommendation.HIRE else CandidateStatus.REJECTED
        await self.candidate_repo.update(candidate.id, CandidateUpdate(status=new_status))

        logger.info(f"Interview {interview.id}: recommended {result.recommendation.value} for candidate {candidate.id}")
        return HireRecommendationResponse(
            interview_id=interview.id,
            recommendation=result.recommendation,
            strengths=result.strengths,
            weaknesses=result.weaknesses,
            summary=result.summary,
        )

    async def analyze_sentiment(self, interview_id: int) -> SentimentAnalysisResponse:
        """
        Score the tone of a completed interview and store the breakdown.

        Raises:
            NotFoundError: If the interview doesn't exist
            PreconditionFailedError: If the interview isn't completed
        """
        interview = await self._get_completed_interview(interview_id)
        candidate, job = await self.interviews.get_participants(interview)

        result = await self.inference.analyze_sentiment(interview.transcript or "")

        await self.interview_repo.update(
            interview.id,
            InterviewUpdate(
                sentiment_score=result.sentiment_score,
                sentiment_analysis=result.sentiment_analysis,
            ),
        )
        await self.activity_repo.log(
            agent=AgentName.SENTIMENT_ANALYZER.value,
            action="Analyzed sentiment",
            details=f"Analyzed sentiment for {candidate.name}'s interview ({job.title})",
        )

        return SentimentAnalysisResponse(
            interview_id=interview.id,
            sentiment_score=result.sentiment_score,
            sentiment_analysis=result.sentiment_analysis,
        )

    async def analyze_interview(self, interview_id: int) -> InterviewAnalysisResult:
        """Assess technical, communication and cultural fit. Read-only."""
        interview = await self._get_completed_interview(interview_id)
        result = await self.inference.analyze_interview(interview.transcript or "")
        return result.model_copy(update={"interview_id": interview.id})
