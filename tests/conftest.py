"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def java_user():
    """Job seeker with Java/React skills who prefers remote work."""
    from recommender.scoring.models import UserProfile

    return UserProfile(id=1, skills="java,react", preferred_location="Remote")


@pytest.fixture
def job_board():
    """A small board: two open jobs, one posted by user 1, one user 1 applied to."""
    from recommender.scoring.models import JobPosting

    return [
        JobPosting(
            id=1,
            title="Java Developer",
            skills="java,spring",
            company="Acme",
            location="Remote",
            posted_by=2,
        ),
        JobPosting(
            id=2,
            title="Sales Associate",
            company="Globex",
            location="Onsite",
            posted_by=2,
        ),
        JobPosting(
            id=3,
            title="Java Architect",
            company="Own Co",
            location="Remote",
            posted_by=1,
        ),
        JobPosting(
            id=4,
            title="Frontend Engineer",
            company="Initech",
            location="Remote",
            posted_by=2,
        ),
    ]


@pytest.fixture
def applications():
    """User 1 has a single pending application to job 4."""
    from recommender.scoring.models import ApplicationRecord

    return [ApplicationRecord(id=1, user_id=1, job_id=4, status="Pending")]


@pytest.fixture
def stores(job_board, applications):
    """In-memory job and application stores over the sample board."""
    from recommender.store.memory import InMemoryApplicationStore, InMemoryJobStore

    return InMemoryJobStore(job_board), InMemoryApplicationStore(applications)


@pytest.fixture
def history_config():
    """Recommendation config pinned to history mode, ignoring .env files."""
    from recommender.scoring.config import RecommendationConfig

    return RecommendationConfig(_env_file=None, scoring_mode="history")  # type: ignore[call-arg]
