"""
Mock inference service - simulates the LLM calls behind each recruitment agent.

Nothing here learns or calls out: every task is a template or keyword match
plus draws from an owned, seedable random source. A fixed artificial delay
mimics remote-call latency so the dashboard can show progress spinners.
"""
import asyncio
import logging
import random
import re
from typing import Optional

from talentflow.config import HIRE_THRESHOLD, VIDEO_INTERVIEW_COMPLETION_THRESHOLD, VIDEO_INTERVIEW_TOTAL_QUESTIONS
from talentflow.models.enums import Recommendation
from talentflow.models.interview import InterviewResponseItem, SentimentBreakdown, VideoQuestion
from talentflow.models.job import Job
from talentflow.models.inference import (
    Assessment,
    HireRecommendationResult,
    InterviewAnalysisResult,
    InterviewQuestionsResult,
    JobDescriptionResult,
    ResumeScoreResult,
    SentimentResult,
    VideoInterviewResult,
)

logger = logging.getLogger(__name__)

# Words ignored when extracting keywords from a job posting
STOPWORDS = {
    "and", "the", "for", "with", "our", "you", "are", "will", "have", "has",
    "years", "year", "experience", "required", "skills", "skill", "join",
    "team", "looking", "talented", "ideal", "candidate", "field", "who",
    "that", "this", "from", "into", "their", "your", "proficient", "excellent",
}

TECHNICAL_QUESTIONS = [
    "Can you describe your experience with technologies required for the {job_title} role?",
    "How do you approach testing in your development process?",
    "Can you explain a complex technical challenge you faced and how you solved it?",
    "What's your experience with modern frameworks and how have they improved your workflow?",
    "How do you stay up-to-date with the latest technologies and best practices?",
]

BEHAVIORAL_QUESTIONS = [
    "Tell me about a time you had to work under pressure to meet a deadline.",
    "How do you handle disagreements with team members?",
    "Describe a situation where you had to learn a new technology quickly.",
    "Tell me about a project you're particularly proud of.",
    "How do you approach mentoring more junior team members?",
]

VIDEO_INTERVIEW_QUESTIONS = [
    "Please introduce yourself and tell us about your background in your own words.",
    "What specifically attracted you to this {job_title} role and our company?",
    "Can you describe a challenging project related to {job_title} that you worked on and how you approached it?",
    "How do you handle working under pressure or tight deadlines?",
    "Where do you see yourself professionally in the next few years?",
    "Do you have any questions for us about the role or company culture?",
]

RECOMMENDATION_STRENGTHS = [
    "Strong technical skills",
    "Good communication",
    "Problem-solving abilities",
]

RECOMMENDATION_WEAKNESSES = [
    "Limited experience in specific domain",
    "Could improve cultural fit",
]

EMOTIONAL_INDICATORS = [
    "Confidence when discussing technical experience",
    "Slight nervousness when addressing gaps in knowledge",
    "Enthusiasm when describing past projects",
]


def extract_keywords(text: str) -> set[str]:
    """Lowercase words of 3+ characters that aren't stopwords."""
    words = re.findall(r"[a-zA-Z][a-zA-Z0-9+#.]{2,}", text.lower())
    return {word.rstrip(".") for word in words} - STOPWORDS


def format_feedback_summary(strengths: list[str], weaknesses: list[str]) -> str:
    return f"Strengths: {', '.join(strengths)}. Areas for improvement: {', '.join(weaknesses)}."


class MockInferenceService:
    """
    Deterministic stand-in for the recruitment LLM.

    Args:
        seed: Seed for the random source. Same seed and same call sequence
            give the same results.
        latency_seconds: Artificial delay applied to every task.
        rng: Optional pre-built random source (takes precedence over seed).
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        latency_seconds: float = 0.0,
        rng: Optional[random.Random] = None,
    ):
        self.rng = rng or random.Random(seed)
        self.latency_seconds = latency_seconds

    async def _simulate_latency(self, task: str) -> None:
        if self.latency_seconds > 0:
            logger.debug(f"Simulating {self.latency_seconds:.1f}s latency for {task}")
            await asyncio.sleep(self.latency_seconds)

    def _ratio(self, upper: float) -> float:
        return round(self.rng.random() * upper, 2)

    async def generate_job_description(
        self,
        title: str,
        department: str,
        experience: str,
        skills: str,
    ) -> JobDescriptionResult:
        """Templated job description plus a bullet list of the requested skills."""
        await self._simulate_latency("generate_job_description")

        description = (
            f"We are looking for a talented {title} to join our {department} team. "
            f"The ideal candidate will have {experience} of experience in the field."
        )
        skill_list = [skill.strip() for skill in skills.split(",") if skill.strip()]
        requirements = "Required Skills:\n- " + "\n- ".join(skill_list)
        return JobDescriptionResult(description=description, requirements=requirements)

    async def score_resume(self, resume_text: str, job: Job) -> ResumeScoreResult:
        """Score a single resume against a job."""
        await self._simulate_latency("score_resume")
        return self._score(resume_text, job)

    async def score_resumes(self, resume_texts: list[str], job: Job) -> list[ResumeScoreResult]:
        """Score a batch of resumes against a job. Latency applies once per batch."""
        await self._simulate_latency("score_resumes")
        return [self._score(text, job) for text in resume_texts]

    def _score(self, resume_text: str, job: Job) -> ResumeScoreResult:
        """
        A random base score (0-60) plus 8 points per job keyword found in the
        resume, capped at 40 bonus points.
        """
        job_keywords = extract_keywords(f"{job.title} {job.requirements}")
        matched = sorted(job_keywords & extract_keywords(resume_text))
        base = self.rng.randint(0, 60)
        bonus = min(40, 8 * len(matched))
        return ResumeScoreResult(score=min(100, base + bonus), matched_keywords=matched)

    async def suggest_interview_questions(
        self,
        job_title: str,
        previous_responses: Optional[list[InterviewResponseItem]] = None,
    ) -> InterviewQuestionsResult:
        """Initial question set, or a follow-up on the last answer."""
        await self._simulate_latency("suggest_interview_questions")

        if previous_responses:
            opening = " ".join(previous_responses[-1].answer.split()[:3])
            return InterviewQuestionsResult(
                follow_up_question=(
                    f"That's interesting. Can you elaborate more on the {opening}... aspect you mentioned?"
                )
            )

        return InterviewQuestionsResult(
            technical=[q.format(job_title=job_title) for q in TECHNICAL_QUESTIONS],
            behavioral=list(BEHAVIORAL_QUESTIONS),
            recommendation="Start with a technical question to assess skills, then move to behavioral questions.",
        )

    async def conduct_video_interview(
        self,
        job_title: str,
        candidate_name: str,
        previous_questions: Optional[list[VideoQuestion]] = None,
    ) -> VideoInterviewResult:
        """Next video interview question, or the closing message."""
        await self._simulate_latency("conduct_video_interview")

        questions = [q.format(job_title=job_title) for q in VIDEO_INTERVIEW_QUESTIONS]
        total = min(VIDEO_INTERVIEW_TOTAL_QUESTIONS, len(questions))
        asked = len(previous_questions or [])

        if asked >= VIDEO_INTERVIEW_COMPLETION_THRESHOLD:
            return VideoInterviewResult(
                status="completed",
                message=(
                    f"Thank you for completing this video interview, {candidate_name}. "
                    "We'll review your responses and get back to you soon."
                ),
            )

        if asked:
            index = min(asked, len(questions) - 1)
            return VideoInterviewResult(
                status="in-progress",
                question=questions[index],
                question_number=index + 1,
                total_questions=total,
            )

        return VideoInterviewResult(
            status="started",
            question=questions[0],
            question_number=1,
            total_questions=total,
            instructions=(
                f"Hello {candidate_name}, welcome to your interview for the {job_title} position. "
                "Please enable your camera and microphone to begin. Answer each question clearly and concisely."
            ),
        )

    async def analyze_interview(self, transcript: str) -> InterviewAnalysisResult:
        await self._simulate_latency("analyze_interview")

        return InterviewAnalysisResult(
            technical_assessment=Assessment(
                score=self.rng.randint(1, 5),
                strengths=["Problem-solving", "Technical knowledge", "System design"],
                weaknesses=["Could improve on architectural patterns", "Limited experience with distributed systems"],
            ),
            communication_assessment=Assessment(
                score=self.rng.randint(1, 5),
                strengths=["Clear explanations", "Thoughtful responses"],
                weaknesses=["Could be more concise", "Some technical terms were misused"],
            ),
            cultural_fit_assessment=Assessment(
                score=self.rng.randint(1, 5),
                notes="Candidate shows alignment with company values and seems collaborative.",
            ),
        )

    async def generate_hire_recommendation(
        self,
        candidate_name: str,
        job_title: str,
        transcript: Optional[str] = None,
    ) -> HireRecommendationResult:
        """Hire when the draw lands above HIRE_THRESHOLD."""
        await self._simulate_latency("generate_hire_recommendation")

        recommendation = Recommendation.HIRE if self.rng.random() > HIRE_THRESHOLD else Recommendation.REJECT
        strengths = list(RECOMMENDATION_STRENGTHS)
        weaknesses = list(RECOMMENDATION_WEAKNESSES)
        return HireRecommendationResult(
            recommendation=recommendation,
            strengths=strengths,
            weaknesses=weaknesses,
            summary=format_feedback_summary(strengths, weaknesses),
        )

    async def analyze_sentiment(self, transcript: str) -> SentimentResult:
        await self._simulate_latency("analyze_sentiment")

        breakdown = SentimentBreakdown(
            positive=self._ratio(0.7),
            negative=self._ratio(0.3),
            neutral=self._ratio(0.4),
            confidence=0.85,
            tone_indicators={
                "excited": self._ratio(0.3),
                "neutral": self._ratio(0.4),
                "hesitant": self._ratio(0.2),
                "confident": self._ratio(0.5),
            },
        )
        return SentimentResult(
            sentiment_score=self.rng.randint(0, 100),
            sentiment_analysis=breakdown,
            key_emotional_indicators=list(EMOTIONAL_INDICATORS),
        )
