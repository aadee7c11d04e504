"""
Configuration module for TalentFlow Backend.
Centralizes environment variables, logging setup, and constants.
"""
import os
import logging
from dotenv import load_dotenv

# Load .env file for local development
load_dotenv()

# ============================================================================
# Environment Configuration
# ============================================================================

# Environment identifier (production, staging, development, etc.)
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

PORT = int(os.environ.get("PORT", 8080))

# Comma separated list of allowed origins for the dashboard frontend
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# ============================================================================
# Storage Configuration
# ============================================================================

# Seed the in-memory store with demo jobs, candidates and interviews on startup
SEED_DEMO_DATA = os.environ.get("SEED_DEMO_DATA", "true").lower() in ("1", "true", "yes")

# ============================================================================
# Mock Inference Configuration
# ============================================================================

# Artificial latency (seconds) applied to every mock inference call so the
# dashboard can show progress spinners
MOCK_LATENCY_SECONDS = float(os.environ.get("MOCK_LATENCY_SECONDS", "1.0"))

# Seed for the mock inference random source; unset means non-reproducible
_raw_seed = os.environ.get("MOCK_RANDOM_SEED")
MOCK_RANDOM_SEED = int(_raw_seed) if _raw_seed else None

# ============================================================================
# Logging Configuration
# ============================================================================

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# ============================================================================
# Application Constants
# ============================================================================

# Number of activity entries shown on the dashboard
DASHBOARD_RECENT_ACTIVITY_LIMIT = 5

# Template used to invite candidates when an interview is scheduled
INTERVIEW_INVITATION_TEMPLATE = "interview_invitation"

# A recommendation draw above this threshold means "hire"
HIRE_THRESHOLD = 0.3

# Video interviews conclude once this many questions have been answered
VIDEO_INTERVIEW_COMPLETION_THRESHOLD = 4
VIDEO_INTERVIEW_TOTAL_QUESTIONS = 5
