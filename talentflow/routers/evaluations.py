"""
Post-interview evaluation endpoints: analysis, sentiment and hire recommendation.
"""
from fastapi import APIRouter, Depends

from talentflow.dependencies import get_evaluation_service
from talentflow.models.inference import InterviewAnalysisResult
from talentflow.models.interview import HireRecommendationResponse, InterviewIdRequest, SentimentAnalysisResponse
from talentflow.services import EvaluationService

router = APIRouter(prefix="/api", tags=["Evaluations"])


@router.post("/hire-recommendation", response_model=HireRecommendationResponse)
async def hire_recommendation(
    request: InterviewIdRequest,
    service: EvaluationService = Depends(get_evaluation_service),
):
    """Recommend hire or reject for a completed interview and update the candidate."""
    return await service.recommend(request.interview_id)


@router.post("/sentiment-analysis", response_model=SentimentAnalysisResponse)
async def sentiment_analysis(
    request: InterviewIdRequest,
    service: EvaluationService = Depends(get_evaluation_service),
):
    """Analyze the tone of a completed interview."""
    return await service.analyze_sentiment(request.interview_id)


@router.post("/interview-analysis", response_model=InterviewAnalysisResult)
async def interview_analysis(
    request: InterviewIdRequest,
    service: EvaluationService = Depends(get_evaluation_service),
):
    """Technical, communication and cultural-fit assessment of a completed interview."""
    return await service.analyze_interview(request.interview_id)
