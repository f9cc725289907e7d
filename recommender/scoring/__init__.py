"""Job recommendation scoring engine.

This module ranks a pool of job postings for a user by combining
heuristic profile matching with preferences mined from the user's
application history, and explains each recommendation.

Public API:
    - RecommendationService: Filter, score, rank and annotate jobs
    - ProfileAdvisor: Profile strength score and improvement suggestion
    - ProfileService: Load and validate user profiles
    - UserProfile / JobPosting / ApplicationRecord: Input models
    - RecommendationResult / RecommendationScore: Ranking output models
    - RecommendationConfig: Configuration settings
"""

from recommender.scoring.advisor import ProfileAdvisor
from recommender.scoring.config import (
    RecommendationConfig,
    get_recommendation_config,
    reset_recommendation_config,
)
from recommender.scoring.models import (
    ApplicationRecord,
    ApplicationStatus,
    JobPosting,
    PreferenceSummary,
    ProfileAnalysis,
    RecommendationResult,
    RecommendationScore,
    UserProfile,
)
from recommender.scoring.profile import ProfileService, completeness
from recommender.scoring.service import (
    DependencyUnavailableError,
    InvalidArgumentError,
    RecommendationService,
)

__all__ = [
    "RecommendationService",
    "ProfileAdvisor",
    "ProfileService",
    "completeness",
    "UserProfile",
    "JobPosting",
    "ApplicationRecord",
    "ApplicationStatus",
    "PreferenceSummary",
    "RecommendationScore",
    "RecommendationResult",
    "ProfileAnalysis",
    "RecommendationConfig",
    "get_recommendation_config",
    "reset_recommendation_config",
    "InvalidArgumentError",
    "DependencyUnavailableError",
]
