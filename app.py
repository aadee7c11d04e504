"""
TalentFlow Backend - recruitment pipeline dashboard API.

Serves jobs, candidates, interviews, email templates/logs and the activity
timeline from an in-memory store, plus the mock AI agent endpoints.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from talentflow.config import (
    CORS_ORIGINS,
    ENVIRONMENT,
    MOCK_LATENCY_SECONDS,
    MOCK_RANDOM_SEED,
    PORT,
    SEED_DEMO_DATA,
)
from talentflow.database import InMemoryDatabase, create_database
from talentflow.exceptions import register_exception_handlers
from talentflow.routers import (
    activities_router,
    auth_router,
    candidates_router,
    dashboard_router,
    emails_router,
    evaluations_router,
    health_router,
    interviews_router,
    jobs_router,
)
from talentflow.services import DemoService, MockInferenceService

logger = logging.getLogger(__name__)


def create_app(
    database: Optional[InMemoryDatabase] = None,
    inference_service: Optional[MockInferenceService] = None,
    seed_demo_data: Optional[bool] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        database: Store to serve from. A fresh one is created when omitted.
        inference_service: Mock AI backend. Defaults to one configured from
            MOCK_RANDOM_SEED and MOCK_LATENCY_SECONDS.
        seed_demo_data: Seed demo data on startup. Defaults to SEED_DEMO_DATA
            for a freshly created store, False for a store passed in.
    """
    if seed_demo_data is None:
        seed_demo_data = SEED_DEMO_DATA and database is None
    if database is None:
        database = create_database()
    if inference_service is None:
        inference_service = MockInferenceService(
            seed=MOCK_RANDOM_SEED,
            latency_seconds=MOCK_LATENCY_SECONDS,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Seed demo data on startup when enabled."""
        logger.info(f"Starting TalentFlow backend ({ENVIRONMENT})")
        if seed_demo_data:
            await DemoService(app.state.database, seed=MOCK_RANDOM_SEED).seed_demo_data()
        yield
        logger.info("Shutting down TalentFlow backend")

    app = FastAPI(
        title="TalentFlow API",
        description="Recruitment pipeline dashboard backend with mock AI agents",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.inference = inference_service

    # CORS middleware for the dashboard frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(jobs_router)
    app.include_router(candidates_router)
    app.include_router(interviews_router)
    app.include_router(evaluations_router)
    app.include_router(emails_router)
    app.include_router(activities_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)
