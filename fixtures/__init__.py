"""
Demo fixtures for seeding the in-memory database.

Edit the JSON files to update demo data:
- users.json: Dashboard users
- jobs.json: Job postings
- email_templates.json: Email templates with {{placeholder}} tokens
- activities.json: Back-dated activity timeline entries
"""

import json
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name, "r", encoding="utf-8") as f:
        return json.load(f)


def load_users() -> list[dict]:
    """Load demo users from JSON file."""
    return _load("users.json")


def load_jobs() -> list[dict]:
    """Load demo jobs from JSON file."""
    return _load("jobs.json")


def load_email_templates() -> list[dict]:
    """Load demo email templates from JSON file."""
    return _load("email_templates.json")


def load_activities() -> list[dict]:
    """Load demo activity entries from JSON file."""
    return _load("activities.json")
