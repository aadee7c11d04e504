"""
Tests for the mock inference service.
"""
from datetime import datetime, timezone

import pytest
from pydantic import TypeAdapter

from talentflow.models.inference import InferenceResult, SentimentResult, VideoInterviewResult
from talentflow.models.interview import InterviewResponseItem, VideoQuestion
from talentflow.models.job import Job
from talentflow.services import MockInferenceService
from talentflow.services.inference_service import extract_keywords


def make_job() -> Job:
    return Job(
        id=1,
        title="Backend Engineer",
        department="Engineering",
        description="Build APIs",
        requirements="Python, FastAPI, PostgreSQL, Docker",
        experience="3+ years",
        created_by=1,
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


class TestMockInferenceService:

    @pytest.mark.asyncio
    async def test_same_seed_gives_same_results(self):
        first = MockInferenceService(seed=7)
        second = MockInferenceService(seed=7)
        job = make_job()

        for _ in range(3):
            assert await first.score_resume("Python and Docker", job) == await second.score_resume("Python and Docker", job)
        assert await first.analyze_sentiment("text") == await second.analyze_sentiment("text")
        assert await first.generate_hire_recommendation("A", "B") == await second.generate_hire_recommendation("A", "B")

    @pytest.mark.asyncio
    async def test_job_description_lists_each_skill(self):
        service = MockInferenceService(seed=1)

        result = await service.generate_job_description("Data Engineer", "Data", "4 years", "Python, Spark , SQL")

        assert "Data Engineer" in result.description
        assert "Data team" in result.description
        assert result.requirements == "Required Skills:\n- Python\n- Spark\n- SQL"

    @pytest.mark.asyncio
    async def test_resume_score_rewards_keyword_matches(self):
        service = MockInferenceService(seed=3)
        job = make_job()

        result = await service.score_resume("Seasoned Python engineer, FastAPI and Docker in production", job)

        assert 0 <= result.score <= 100
        assert {"python", "fastapi", "docker"} <= set(result.matched_keywords)
        assert result.score >= 8 * 3

    @pytest.mark.asyncio
    async def test_batch_scoring_matches_single_scoring(self):
        job = make_job()
        texts = ["Python and Docker", "Gardening", "FastAPI PostgreSQL"]

        batch = await MockInferenceService(seed=9).score_resumes(texts, job)
        single = MockInferenceService(seed=9)

        assert batch == [await single.score_resume(text, job) for text in texts]

    @pytest.mark.asyncio
    async def test_initial_questions_then_follow_up(self):
        service = MockInferenceService(seed=1)

        initial = await service.suggest_interview_questions("QA Lead")
        assert initial.follow_up_question is None
        assert "QA Lead" in initial.technical[0]
        assert initial.behavioral

        follow_up = await service.suggest_interview_questions(
            "QA Lead",
            [InterviewResponseItem(question="Q", answer="I automated regression suites")],
        )
        assert follow_up.technical == []
        assert "I automated regression..." in follow_up.follow_up_question

    @pytest.mark.asyncio
    async def test_video_interview_progression(self):
        service = MockInferenceService(seed=1)

        started = await service.conduct_video_interview("Designer", "Sam")
        assert started.status == "started"
        assert started.question_number == 1
        assert "Sam" in started.instructions

        answered = [VideoQuestion(question=f"Q{n}", answer="A") for n in range(3)]
        in_progress = await service.conduct_video_interview("Designer", "Sam", answered)
        assert in_progress.status == "in-progress"
        assert in_progress.question_number == 4

        answered.append(VideoQuestion(question="Q3"))
        completed = await service.conduct_video_interview("Designer", "Sam", answered)
        assert completed.status == "completed"
        assert "Sam" in completed.message
        assert completed.question is None

    @pytest.mark.asyncio
    async def test_sentiment_ratios_stay_in_range(self):
        service = MockInferenceService(seed=11)

        result = await service.analyze_sentiment("Q: x\nA: y")
        breakdown = result.sentiment_analysis

        assert 0 <= result.sentiment_score <= 100
        for value in (breakdown.positive, breakdown.negative, breakdown.neutral):
            assert 0 <= value <= 1
        assert set(breakdown.tone_indicators) == {"excited", "neutral", "hesitant", "confident"}

    @pytest.mark.asyncio
    async def test_hire_recommendation_follows_threshold(self):
        service = MockInferenceService(seed=5)

        results = [await service.generate_hire_recommendation("A", "B") for _ in range(50)]

        assert {r.recommendation.value for r in results} == {"hire", "reject"}
        assert all(r.summary.startswith("Strengths: ") for r in results)

    @pytest.mark.asyncio
    async def test_results_parse_back_through_the_tagged_union(self):
        service = MockInferenceService(seed=2)
        adapter = TypeAdapter(InferenceResult)

        sentiment = await service.analyze_sentiment("text")
        video = await service.conduct_video_interview("Designer", "Sam")

        assert isinstance(adapter.validate_python(sentiment.model_dump()), SentimentResult)
        assert isinstance(adapter.validate_python(video.model_dump()), VideoInterviewResult)


def test_extract_keywords_drops_stopwords_and_short_words():
    keywords = extract_keywords("5+ years of experience with Python, C#, and the React ecosystem.")

    assert {"python", "react", "ecosystem"} <= keywords
    assert "years" not in keywords
    assert "the" not in keywords
