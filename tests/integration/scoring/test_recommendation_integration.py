"""Integration tests for the recommendation flow end-to-end."""

from __future__ import annotations

import pytest

BOARD_YAML = """\
jobs:
  - id: 1
    title: Data Engineer
    company: Acme
    location: Remote
    posted_by: 99
  - id: 2
    title: Data Analyst
    company: Acme
    location: Remote
    posted_by: 99
  - id: 3
    title: Senior Data Engineer
    description: python sql pipelines
    company: Acme
    location: Remote
    posted_by: 99
  - id: 4
    title: Python Web Developer
    description: python sql django
    company: Globex
    location: Remote
    posted_by: 99
applications:
  - user_id: 10
    job_id: 1
    status: Accepted
  - user_id: 10
    job_id: 2
    status: Rejected
"""


@pytest.fixture
def board_service(tmp_path):
    from recommender.scoring.config import RecommendationConfig
    from recommender.scoring.service import RecommendationService
    from recommender.store.file import FileDataStore

    path = tmp_path / "board.yaml"
    path.write_text(BOARD_YAML, encoding="utf-8")
    store = FileDataStore(path)
    config = RecommendationConfig(_env_file=None, scoring_mode="history")  # type: ignore[call-arg]
    return RecommendationService(job_store=store, application_store=store, config=config)


def test_history_lifts_jobs_like_accepted_applications(board_service):
    """Two jobs with equal profile scores are separated by application history."""
    from recommender.scoring.models import UserProfile

    user = UserProfile(id=10, skills="python, sql", preferred_location="Remote")

    result = board_service.rank(user, 10)

    assert [rec.job.id for rec in result.recommendations] == [3, 4]
    assert result.total_jobs_analyzed == 2
    top = result.recommendations[0]
    assert top.reasons[0] == "Skills match: python, sql"
    assert "Similar to your successfully accepted data applications" in top.reasons
    assert result.insights[0] == (
        "Based on your 2 applications, we're learning your preferences"
    )


def test_new_user_gets_profile_only_ranking(board_service):
    """Without history, equal scores fall back to newest job first."""
    from recommender.scoring.models import UserProfile

    user = UserProfile(id=11, skills="python, sql", preferred_location="Remote")

    result = board_service.rank(user, 10)

    assert [rec.job.id for rec in result.recommendations] == [4, 3, 2, 1]
    assert result.recommendations[0].score == pytest.approx(1.0)
    assert result.recommendations[2].score == pytest.approx(1 / 3)
    assert result.insights[0].startswith("Start building your job history")


def test_profile_analysis_alongside_ranking(board_service):
    from recommender.scoring.models import UserProfile

    user = UserProfile(id=11, skills="python, sql", preferred_location="Remote")

    analysis = board_service.analyze_profile(user)

    assert analysis.score == 25
    assert analysis.suggestion_source == "rules"
    assert board_service.completeness(user) == pytest.approx(100 / 3)
