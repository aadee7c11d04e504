"""
Tests for the agent services: screening, interviews and evaluation.

Run with: pytest tests/test_services.py -v
"""
import time
from datetime import datetime, timezone

import pytest

from talentflow.exceptions import NotFoundError, PreconditionFailedError
from talentflow.models.activity import AgentName
from talentflow.models.candidate import ResumeRankRequest, ResumeSubmission
from talentflow.models.enums import CandidateStatus, InterviewStatus, Recommendation
from talentflow.models.job import JobCreate
from talentflow.models.interview import (
    ConductInterviewRequest,
    InterviewResponseItem,
    ScheduleInterviewRequest,
    VideoInterviewRequest,
    VideoQuestion,
)
from talentflow.repositories import ActivityRepository, CandidateRepository, InterviewRepository, JobRepository
from talentflow.services import EvaluationService, InterviewService, MockInferenceService, ScreeningService
from talentflow.services.interview_service import build_transcript


async def latest_activity(database):
    return (await ActivityRepository(database).list_recent(1))[0]


def test_build_transcript_format():
    transcript = build_transcript([("Q1", "A1"), ("Q2", "A2")])

    assert transcript == "Q: Q1\nA: A1\n\nQ: Q2\nA: A2"


class TestScreeningService:

    @pytest.mark.asyncio
    async def test_rank_creates_new_candidates_sorted_by_score(self, database, inference, job):
        service = ScreeningService(database, inference)
        request = ResumeRankRequest(
            job_id=job.id,
            resumes=[
                ResumeSubmission(name="Low", email="low@example.com", resume_text="Gardening and cooking"),
                ResumeSubmission(name="High", email="high@example.com", resume_text="Python FastAPI PostgreSQL expert"),
                ResumeSubmission(name="Mid", email="mid@example.com", resume_text="Some Python"),
            ],
        )

        ranked = await service.rank_resumes(request)

        assert len(ranked) == 3
        assert [c.match_score for c in ranked] == sorted((c.match_score for c in ranked), reverse=True)
        stored = await CandidateRepository(database).list_by_job(job.id)
        assert {c.email for c in stored} == {"low@example.com", "high@example.com", "mid@example.com"}
        assert all(c.status == CandidateStatus.NEW for c in stored)
        assert {c.id: c.score for c in stored} == {c.id: c.match_score for c in ranked}

        activity = await latest_activity(database)
        assert activity.agent == AgentName.RESUME_RANKER.value
        assert activity.details == f'Ranked 3 resumes for "{job.title}" position'

    @pytest.mark.asyncio
    async def test_rank_updates_existing_candidate_score(self, database, inference, job, candidate):
        service = ScreeningService(database, inference)

        ranked = await service.rank_resumes(
            ResumeRankRequest(
                job_id=job.id,
                resumes=[
                    ResumeSubmission(
                        id=candidate.id,
                        name=candidate.name,
                        email=candidate.email,
                        resume_text=candidate.resume_text,
                    )
                ],
            )
        )

        assert len(database.candidates) == 1
        assert ranked[0].id == candidate.id
        assert (await CandidateRepository(database).get_by_id(candidate.id)).score == ranked[0].match_score

    @pytest.mark.asyncio
    async def test_rank_for_unknown_job_is_not_found(self, database, inference):
        service = ScreeningService(database, inference)

        with pytest.raises(NotFoundError):
            await service.rank_resumes(ResumeRankRequest(job_id=999, resumes=[]))

        assert len(database.activity_logs) == 0

    @pytest.mark.asyncio
    async def test_rank_applies_latency_once_per_run(self, database, job):
        service = ScreeningService(database, MockInferenceService(seed=1, latency_seconds=0.1))
        resumes = [
            ResumeSubmission(name=f"R{n}", email=f"r{n}@example.com", resume_text="Python")
            for n in range(10)
        ]

        started = time.perf_counter()
        ranked = await service.rank_resumes(ResumeRankRequest(job_id=job.id, resumes=resumes))
        elapsed = time.perf_counter() - started

        assert len(ranked) == 10
        assert elapsed < 0.5, f"Ranking 10 resumes took {elapsed:.2f}s"

    @pytest.mark.asyncio
    async def test_rank_matches_email_within_the_same_job(self, database, inference, job, candidate):
        service = ScreeningService(database, inference)

        ranked = await service.rank_resumes(
            ResumeRankRequest(
                job_id=job.id,
                resumes=[ResumeSubmission(name="Alex D.", email="ALEX@example.com", resume_text="Python")],
            )
        )

        assert len(database.candidates) == 1
        assert ranked[0].id == candidate.id
        assert (await CandidateRepository(database).get_by_id(candidate.id)).score == ranked[0].match_score

    @pytest.mark.asyncio
    async def test_rank_skips_email_of_another_jobs_candidate(self, database, inference, user, candidate):
        other_job = await JobRepository(database).create(
            JobCreate(
                title="Painter",
                department="Facilities",
                description="Paint walls",
                requirements="Brushes, rollers",
                experience="1 year",
                created_by=user.id,
            )
        )
        service = ScreeningService(database, inference)

        ranked = await service.rank_resumes(
            ResumeRankRequest(
                job_id=other_job.id,
                resumes=[ResumeSubmission(name=candidate.name, email=candidate.email, resume_text="Brushes")],
            )
        )

        assert ranked == []
        assert await CandidateRepository(database).get_by_id(candidate.id) == candidate
        assert len(database.candidates) == 1
        assert (await latest_activity(database)).details == 'Ranked 0 resumes for "Painter" position'

    @pytest.mark.asyncio
    async def test_rank_skips_id_of_another_jobs_candidate(self, database, inference, user, candidate):
        other_job = await JobRepository(database).create(
            JobCreate(
                title="Painter",
                department="Facilities",
                description="Paint walls",
                requirements="Brushes, rollers",
                experience="1 year",
                created_by=user.id,
            )
        )
        service = ScreeningService(database, inference)

        ranked = await service.rank_resumes(
            ResumeRankRequest(
                job_id=other_job.id,
                resumes=[
                    ResumeSubmission(id=candidate.id, name=candidate.name, email=candidate.email, resume_text="x"),
                    ResumeSubmission(id=999, name="Ghost", email="ghost@example.com", resume_text="x"),
                ],
            )
        )

        assert ranked == []
        assert await CandidateRepository(database).get_by_id(candidate.id) == candidate


class TestInterviewService:

    @pytest.mark.asyncio
    async def test_schedule_creates_interview_and_sends_invitation(self, database, inference, candidate, job, invitation_template):
        service = InterviewService(database, inference)

        interview = await service.schedule(
            ScheduleInterviewRequest(
                candidate_id=candidate.id,
                job_id=job.id,
                scheduled_at=datetime(2025, 6, 2, 10, 0, tzinfo=timezone.utc),
            )
        )

        assert interview.status == InterviewStatus.SCHEDULED
        assert len(database.email_logs) == 1
        email_log = database.email_logs.all()[0]
        assert email_log.candidate_id == candidate.id
        assert "06/02/2025" in email_log.body
        agents = [a.agent for a in await ActivityRepository(database).list_recent(2)]
        assert agents == [AgentName.EMAIL_AUTOMATION.value, AgentName.INTERVIEW_SCHEDULER.value]

    @pytest.mark.asyncio
    async def test_schedule_for_unknown_candidate_creates_nothing(self, database, inference, job, invitation_template):
        service = InterviewService(database, inference)

        with pytest.raises(NotFoundError):
            await service.schedule(
                ScheduleInterviewRequest(
                    candidate_id=999,
                    job_id=job.id,
                    scheduled_at=datetime(2025, 6, 2, 10, 0, tzinfo=timezone.utc),
                )
            )

        assert len(database.interviews) == 0
        assert len(database.email_logs) == 0

    @pytest.mark.asyncio
    async def test_conduct_without_responses_starts_interview(self, database, inference, scheduled_interview, job):
        service = InterviewService(database, inference)

        response = await service.conduct(ConductInterviewRequest(interview_id=scheduled_interview.id))

        assert response.status == "in_progress"
        assert job.title in response.question
        stored = await InterviewRepository(database).get_by_id(scheduled_interview.id)
        assert stored.status == InterviewStatus.SCHEDULED

    @pytest.mark.asyncio
    async def test_conduct_with_responses_completes_interview(self, database, inference, scheduled_interview, candidate):
        service = InterviewService(database, inference)

        response = await service.conduct(
            ConductInterviewRequest(
                interview_id=scheduled_interview.id,
                responses=[
                    InterviewResponseItem(question="Why us?", answer="Great team"),
                    InterviewResponseItem(question="Strengths?", answer="Debugging"),
                ],
            )
        )

        assert response.status == "completed"
        stored = await InterviewRepository(database).get_by_id(scheduled_interview.id)
        assert stored.status == InterviewStatus.COMPLETED
        assert stored.transcript == "Q: Why us?\nA: Great team\n\nQ: Strengths?\nA: Debugging"
        activity = await latest_activity(database)
        assert activity.agent == AgentName.INTERVIEW_AGENT.value
        assert candidate.name in activity.details

    @pytest.mark.asyncio
    async def test_conduct_unknown_interview_is_not_found(self, database, inference):
        service = InterviewService(database, inference)

        with pytest.raises(NotFoundError):
            await service.conduct(ConductInterviewRequest(interview_id=999))

    @pytest.mark.asyncio
    async def test_video_interview_below_threshold_stays_scheduled(self, database, inference, scheduled_interview):
        service = InterviewService(database, inference)

        response = await service.video_interview(
            VideoInterviewRequest(
                interview_id=scheduled_interview.id,
                previous_questions=[VideoQuestion(question="Intro?", answer="Hi"), VideoQuestion(question="Why?")],
            )
        )

        assert response.status == "in-progress"
        assert response.question_number == 3
        stored = await InterviewRepository(database).get_by_id(scheduled_interview.id)
        assert stored.status == InterviewStatus.SCHEDULED
        assert stored.transcript == "Q: Intro?\nA: Hi\n\nQ: Why?\nA: [Video Response]"
        assert (await latest_activity(database)).action == "Updated video interview"

    @pytest.mark.asyncio
    async def test_video_interview_completes_at_four_answers(self, database, inference, scheduled_interview):
        service = InterviewService(database, inference)

        response = await service.video_interview(
            VideoInterviewRequest(
                interview_id=scheduled_interview.id,
                previous_questions=[VideoQuestion(question=f"Q{n}", answer=f"A{n}") for n in range(4)],
            )
        )

        assert response.status == "completed"
        assert response.message == "Video interview completed successfully."
        stored = await InterviewRepository(database).get_by_id(scheduled_interview.id)
        assert stored.status == InterviewStatus.COMPLETED
        assert (await latest_activity(database)).action == "Completed video interview"

    @pytest.mark.asyncio
    async def test_video_interview_start_does_not_write(self, database, inference, scheduled_interview):
        service = InterviewService(database, inference)
        before = len(database.activity_logs)

        response = await service.video_interview(VideoInterviewRequest(interview_id=scheduled_interview.id))

        assert response.status == "started"
        assert response.instructions is not None
        assert len(database.activity_logs) == before


class TestEvaluationService:

    @pytest.mark.asyncio
    async def test_recommend_updates_interview_and_candidate(self, database, inference, completed_interview, candidate):
        service = EvaluationService(database, inference)

        result = await service.recommend(completed_interview.id)

        stored = await InterviewRepository(database).get_by_id(completed_interview.id)
        assert stored.recommendation == result.recommendation
        assert stored.feedback_summary == result.summary
        expected = CandidateStatus.HIRED if result.recommendation == Recommendation.HIRE else CandidateStatus.REJECTED
        assert (await CandidateRepository(database).get_by_id(candidate.id)).status == expected
        assert (await latest_activity(database)).agent == AgentName.HIRE_RECOMMENDATION.value

    @pytest.mark.asyncio
    async def test_recommend_requires_completed_interview(self, database, inference, scheduled_interview, candidate):
        service = EvaluationService(database, inference)
        before = len(database.activity_logs)

        with pytest.raises(PreconditionFailedError):
            await service.recommend(scheduled_interview.id)

        assert await InterviewRepository(database).get_by_id(scheduled_interview.id) == scheduled_interview
        assert (await CandidateRepository(database).get_by_id(candidate.id)).status == candidate.status
        assert len(database.activity_logs) == before

    @pytest.mark.asyncio
    async def test_sentiment_is_stored_on_interview(self, database, inference, completed_interview):
        service = EvaluationService(database, inference)

        result = await service.analyze_sentiment(completed_interview.id)

        stored = await InterviewRepository(database).get_by_id(completed_interview.id)
        assert stored.sentiment_score == result.sentiment_score
        assert stored.sentiment_analysis == result.sentiment_analysis
        assert (await latest_activity(database)).agent == AgentName.SENTIMENT_ANALYZER.value

    @pytest.mark.asyncio
    async def test_analysis_is_read_only(self, database, inference, completed_interview):
        service = EvaluationService(database, inference)
        before = len(database.activity_logs)

        result = await service.analyze_interview(completed_interview.id)

        assert result.interview_id == completed_interview.id
        assert 1 <= result.technical_assessment.score <= 5
        assert await InterviewRepository(database).get_by_id(completed_interview.id) == completed_interview
        assert len(database.activity_logs) == before

    @pytest.mark.asyncio
    async def test_sentiment_requires_completed_interview(self, database, inference, scheduled_interview):
        service = EvaluationService(database, inference)

        with pytest.raises(PreconditionFailedError) as exc_info:
            await service.analyze_sentiment(scheduled_interview.id)

        assert exc_info.value.message == "Interview must be completed first"
