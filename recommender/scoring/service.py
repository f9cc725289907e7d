"""Recommendation ranking service."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from recommender.scoring.advisor import ProfileAdvisor
from recommender.scoring.config import RecommendationConfig, get_recommendation_config
from recommender.scoring.history import HistoryAnalyzer
from recommender.scoring.matchers import matched_skills
from recommender.scoring.models import (
    MAX_INSIGHTS,
    MAX_REASONS,
    ApplicationRecord,
    JobPosting,
    PreferenceSummary,
    ProfileAnalysis,
    RecommendationResult,
    RecommendationScore,
    UserProfile,
    is_blank,
)
from recommender.scoring.profile import completeness
from recommender.scoring.scorer import history_score, job_skills_text, job_text
from recommender.store.protocols import ApplicationStore, JobStore
from recommender.utils.logging import get_logger

logger = get_logger(__name__)

ScoringMode = Literal["history", "neutral"]
SCORING_MODES: tuple[str, ...] = ("history", "neutral")

GENERAL_REASON = "General profile compatibility"
NEUTRAL_REASONS: tuple[str, ...] = (
    "Recently posted opportunity",
    "Explore this new opening",
    "Great company with growth potential",
)
NEUTRAL_INSIGHT = (
    "Personalized scoring is paused; showing the most recently posted opportunities"
)


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside its contract."""


class DependencyUnavailableError(RuntimeError):
    """Raised when the job or application store cannot be queried."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class RecommendationService:
    """Rank a job pool for one user and explain the ranking."""

    def __init__(
        self,
        job_store: JobStore,
        application_store: ApplicationStore,
        config: RecommendationConfig | None = None,
        advisor: ProfileAdvisor | None = None,
    ) -> None:
        self.job_store = job_store
        self.application_store = application_store
        self.config = config or get_recommendation_config()
        self.history_analyzer = HistoryAnalyzer(job_store)
        self._advisor = advisor

    def completeness(self, user: UserProfile) -> float:
        """Percentage (0-100) of recommendation profile fields filled in."""
        return completeness(user)

    def analyze_profile(self, user: UserProfile) -> ProfileAnalysis:
        """Profile strength score with an improvement suggestion."""
        if self._advisor is None:
            self._advisor = ProfileAdvisor(config=self.config)
        return self._advisor.analyze_profile(user)

    def rank(
        self,
        user: UserProfile,
        limit: int,
        mode: ScoringMode | None = None,
    ) -> RecommendationResult:
        """Return up to `limit` recommended jobs for `user`, best first.

        Jobs the user posted or already applied to are never returned.

        Raises:
            InvalidArgumentError: If `limit` is negative or `mode` is unknown.
            DependencyUnavailableError: If a store query fails.
        """
        if limit < 0:
            raise InvalidArgumentError(f"limit must be >= 0 (got {limit})")

        scoring_mode = mode or self.config.scoring_mode
        if scoring_mode not in SCORING_MODES:
            raise InvalidArgumentError(
                f"mode must be one of {', '.join(SCORING_MODES)} (got {scoring_mode!r})"
            )

        jobs, history = self._gather(user)
        candidates = self.filter_jobs(user, jobs, history)

        if scoring_mode == "neutral":
            recommendations = self._neutral_recommendations(candidates, limit)
            insights = [NEUTRAL_INSIGHT]
        else:
            prefs = self.history_analyzer.analyze(user, history)
            ranked = sorted(
                ((job, history_score(user, job, prefs)) for job in candidates),
                key=lambda item: (-item[1], -item[0].id),
            )
            recommendations = [
                RecommendationScore(
                    job=job, score=score, reasons=self.match_reasons(user, job, prefs)
                )
                for job, score in ranked[:limit]
            ]
            insights = self.insights(user, recommendations, prefs)

        logger.info(
            "Ranked %d of %d candidate jobs for user %s (mode=%s)",
            len(recommendations),
            len(candidates),
            user.id,
            scoring_mode,
        )

        return RecommendationResult(
            recommendations=recommendations,
            profile_completeness=completeness(user),
            insights=insights,
            total_jobs_analyzed=len(candidates),
            scoring_mode=scoring_mode,
        )

    def _gather(
        self, user: UserProfile
    ) -> tuple[Sequence[JobPosting], Sequence[ApplicationRecord]]:
        try:
            jobs = self.job_store.list_jobs()
        except Exception as e:
            raise DependencyUnavailableError(f"Job store unavailable: {e}", e) from e

        try:
            history = self.application_store.list_applications_by_user(user.id)
        except Exception as e:
            raise DependencyUnavailableError(
                f"Application store unavailable: {e}", e
            ) from e

        return jobs, history

    @staticmethod
    def filter_jobs(
        user: UserProfile,
        jobs: Sequence[JobPosting],
        history: Sequence[ApplicationRecord],
    ) -> list[JobPosting]:
        """Drop jobs the user already applied to or posted themselves."""
        applied_ids = {application.job_id for application in history}
        return [
            job
            for job in jobs
            if job.id not in applied_ids and job.posted_by != user.id
        ]

    def _neutral_recommendations(
        self, candidates: Sequence[JobPosting], limit: int
    ) -> list[RecommendationScore]:
        newest_first = sorted(candidates, key=lambda job: job.id, reverse=True)
        return [
            RecommendationScore(
                job=job, score=self.config.neutral_score, reasons=list(NEUTRAL_REASONS)
            )
            for job in newest_first[:limit]
        ]

    def match_reasons(
        self, user: UserProfile, job: JobPosting, prefs: PreferenceSummary
    ) -> list[str]:
        """Human-readable reasons a job was recommended, most specific first."""
        reasons: list[str] = []

        skills = matched_skills(user.skills, job_skills_text(job))
        if skills:
            reasons.append(f"Skills match: {', '.join(skills)}")

        if not is_blank(user.preferred_location) and job.location:
            if user.preferred_location.lower() in job.location.lower():
                reasons.append(f"Location preference: {job.location}")

        if not is_blank(user.preferred_job_type) and job.description:
            if user.preferred_job_type.lower() in job.description.lower():
                reasons.append(f"Job type match: {user.preferred_job_type}")

        if not reasons:
            reasons.append(GENERAL_REASON)

        if prefs.total_applications > 0:
            text = job_text(job)
            for keyword in prefs.historical_keywords:
                if keyword in text:
                    reasons.append(f"Matches your past interest in {keyword} roles")
            for keyword in prefs.successful_keywords:
                if keyword in text:
                    reasons.append(
                        f"Similar to your successfully accepted {keyword} applications"
                    )
            if job.company and job.company.lower() in prefs.preferred_companies:
                reasons.append(f"You've previously applied to {job.company}")
            if job.location and any(
                location in job.location.lower()
                for location in prefs.preferred_locations
            ):
                reasons.append("Location matches your application history preferences")

        return reasons[:MAX_REASONS]

    def insights(
        self,
        user: UserProfile,
        recommendations: Sequence[RecommendationScore],
        prefs: PreferenceSummary,
    ) -> list[str]:
        """Aggregate commentary on the history, the match quality and the profile."""
        insights: list[str] = []
        total = prefs.total_applications

        if total == 0:
            insights.append(
                "Start building your job history by applying to positions that "
                "match your skills"
            )
            insights.append(
                "As you apply to more jobs, recommendations will learn your preferences"
            )
        elif total < 5:
            insights.append(
                f"Based on your {total} applications, we're learning your preferences"
            )
            insights.append(
                "Apply to more positions to help us understand your career interests"
            )
        else:
            insights.append(
                f"We analyzed your {total} job applications to personalize these "
                "recommendations"
            )
            if prefs.has_successful_applications:
                insights.append(
                    "Prioritizing jobs similar to your "
                    f"{prefs.successful_applications} successful applications"
                )
            if prefs.preferred_locations:
                insights.append(
                    "Focusing on your preferred locations: "
                    + ", ".join(prefs.preferred_locations)
                )
            if prefs.historical_keywords:
                insights.append(
                    "Matching your interests in: " + ", ".join(prefs.historical_keywords)
                )

        insights.extend(self._profile_insights(user, recommendations))
        return insights[:MAX_INSIGHTS]

    @staticmethod
    def _profile_insights(
        user: UserProfile, recommendations: Sequence[RecommendationScore]
    ) -> list[str]:
        if not recommendations:
            return [
                "No personalized recommendations available. Complete your profile "
                "to get better matches."
            ]

        insights: list[str] = []
        average = sum(rec.score for rec in recommendations) / len(recommendations)
        if average > 0.7:
            insights.append(
                "Excellent matches found! Your profile aligns well with available "
                "opportunities."
            )
        elif average > 0.5:
            insights.append(
                "Good matches available. Consider updating your profile for even "
                "better recommendations."
            )
        else:
            insights.append(
                "Basic matches found. Enhance your profile with more skills and "
                "preferences for better results."
            )

        if is_blank(user.skills):
            insights.append("Add your skills to get more targeted job recommendations.")
        if is_blank(user.preferred_location):
            insights.append(
                "Set your preferred location to find jobs in your desired area."
            )
        if is_blank(user.bio):
            insights.append("Add a professional bio to improve matching accuracy.")

        return insights
