"""
Mock inference result variants.

Each inference task has its own result model tagged with a literal `task`
field, so a result can be parsed back into the right variant through the
`InferenceResult` discriminated union.
"""
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

from .enums import Recommendation
from .interview import SentimentBreakdown


class JobDescriptionResult(BaseModel):
    task: Literal["generate_job_description"] = "generate_job_description"
    description: str
    requirements: str


class ResumeScoreResult(BaseModel):
    task: Literal["score_resume"] = "score_resume"
    score: int = Field(..., ge=0, le=100)
    matched_keywords: list[str] = Field(default_factory=list)


class InterviewQuestionsResult(BaseModel):
    """Either an initial question set or a single follow-up question."""
    task: Literal["suggest_interview_questions"] = "suggest_interview_questions"
    technical: list[str] = Field(default_factory=list)
    behavioral: list[str] = Field(default_factory=list)
    recommendation: Optional[str] = None
    follow_up_question: Optional[str] = None


class VideoInterviewResult(BaseModel):
    task: Literal["conduct_video_interview"] = "conduct_video_interview"
    status: Literal["started", "in-progress", "completed"]
    question: Optional[str] = None
    question_number: Optional[int] = None
    total_questions: Optional[int] = None
    instructions: Optional[str] = None
    message: Optional[str] = None


class Assessment(BaseModel):
    score: int = Field(..., ge=1, le=5)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    notes: Optional[str] = None


class InterviewAnalysisResult(BaseModel):
    task: Literal["analyze_interview"] = "analyze_interview"
    interview_id: Optional[int] = None
    technical_assessment: Assessment
    communication_assessment: Assessment
    cultural_fit_assessment: Assessment


class HireRecommendationResult(BaseModel):
    task: Literal["generate_hire_recommendation"] = "generate_hire_recommendation"
    recommendation: Recommendation
    strengths: list[str]
    weaknesses: list[str]
    summary: str


class SentimentResult(BaseModel):
    task: Literal["analyze_sentiment"] = "analyze_sentiment"
    sentiment_score: int = Field(..., ge=0, le=100)
    sentiment_analysis: SentimentBreakdown
    key_emotional_indicators: list[str] = Field(default_factory=list)


InferenceResult = Annotated[
    Union[
        JobDescriptionResult,
        ResumeScoreResult,
        InterviewQuestionsResult,
        VideoInterviewResult,
        InterviewAnalysisResult,
        HireRecommendationResult,
        SentimentResult,
    ],
    Field(discriminator="task"),
]
