"""Data models for the recommendation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_REASONS = 5
MAX_INSIGHTS = 4


def is_blank(value: str | None) -> bool:
    """Return True for missing or whitespace-only text."""
    return value is None or not value.strip()


class ApplicationStatus(str, Enum):
    """Status of a job application."""

    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class UserProfile(BaseModel):
    """Job seeker profile used for recommendations.

    Every text field is optional; a missing value is treated the same as
    an empty string by the scorers.
    """

    id: int = Field(..., description="User identifier")

    # Identity
    full_name: str | None = Field(default=None, description="Full name")
    username: str | None = Field(default=None, description="Login name")
    email: str | None = Field(default=None, description="Contact email")

    # Profile fields
    skills: str | None = Field(
        default=None, description="Comma-separated skills, e.g. 'java, react'"
    )
    experience: str | None = Field(
        default=None, description="Experience level and description"
    )
    bio: str | None = Field(default=None, description="Professional summary")
    preferred_location: str | None = Field(
        default=None, description="Preferred work location"
    )
    preferred_job_type: str | None = Field(
        default=None, description="full-time, part-time, contract, remote, ..."
    )
    salary_expectation: str | None = Field(
        default=None, description="Expected salary (free text)"
    )

    # Additional details
    job_title: str | None = Field(
        default=None, description="Current or desired job title"
    )
    years_experience: int | None = Field(
        default=None, ge=0, description="Years of professional experience"
    )
    industries: str | None = Field(
        default=None, description="Comma-separated preferred industries"
    )
    certifications: str | None = Field(
        default=None, description="Professional certifications"
    )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> UserProfile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class JobPosting(BaseModel):
    """A job posted on the board.

    `salary`, `job_type` and `experience` are listing details carried
    through to results unscored. The experience level a job asks for is
    read from its description.
    """

    id: int = Field(..., description="Job identifier (higher is more recent)")
    title: str = Field(default="", description="Job title")
    description: str | None = Field(default=None, description="Job description")
    company: str | None = Field(default=None, description="Company name")
    location: str | None = Field(default=None, description="Job location")
    salary: str | None = Field(default=None, description="Salary (free text)")
    job_type: str | None = Field(default=None, description="Job category")
    skills: str | None = Field(
        default=None, description="Comma-separated required skills"
    )
    experience: str | None = Field(
        default=None, description="Experience requirement as listed (not scored)"
    )
    posted_by: int | None = Field(
        default=None, description="Identifier of the user who posted the job"
    )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> JobPosting:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class ApplicationRecord(BaseModel):
    """A user's application to a job.

    The user and job links are fixed once the record exists; only the
    status changes as the application is approved or rejected.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int | None = Field(default=None, description="Record identifier")
    user_id: int = Field(..., frozen=True, description="Applicant identifier")
    job_id: int = Field(..., frozen=True, description="Job identifier")
    status: ApplicationStatus = Field(
        default=ApplicationStatus.PENDING, description="Application status"
    )
    applied_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When applied"
    )
    job_title: str | None = Field(default=None, description="Job title at apply time")
    company: str | None = Field(default=None, description="Company at apply time")

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: object) -> object:
        """Accept status strings in any letter case."""
        if isinstance(v, str):
            for status in ApplicationStatus:
                if status.value.lower() == v.strip().lower():
                    return status
        return v

    @property
    def is_accepted(self) -> bool:
        return self.status is ApplicationStatus.ACCEPTED

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> ApplicationRecord:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


@dataclass
class PreferenceSummary:
    """Preferences mined from a user's application history."""

    preferred_companies: list[str] = field(default_factory=list)
    preferred_locations: list[str] = field(default_factory=list)
    historical_keywords: list[str] = field(default_factory=list)
    successful_keywords: list[str] = field(default_factory=list)
    has_successful_applications: bool = False
    total_applications: int = 0
    successful_applications: int = 0


@dataclass
class RecommendationScore:
    """A scored job with the reasons it was recommended."""

    job: JobPosting
    score: float
    reasons: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not (0.0 <= self.score <= 1.0):
            raise ValueError(f"score must be between 0.0 and 1.0 (got {self.score})")
        if len(self.reasons) > MAX_REASONS:
            raise ValueError(
                f"at most {MAX_REASONS} reasons allowed (got {len(self.reasons)})"
            )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "job": self.job.to_dict(),
            "score": self.score,
            "reasons": list(self.reasons),
        }


@dataclass
class RecommendationResult:
    """Ranked recommendations for one user, best first."""

    recommendations: list[RecommendationScore]
    profile_completeness: float
    insights: list[str]
    total_jobs_analyzed: int
    scoring_mode: Literal["history", "neutral"] = "history"
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not (0.0 <= self.profile_completeness <= 100.0):
            raise ValueError(
                "profile_completeness must be between 0 and 100 "
                f"(got {self.profile_completeness})"
            )
        if len(self.insights) > MAX_INSIGHTS:
            raise ValueError(
                f"at most {MAX_INSIGHTS} insights allowed (got {len(self.insights)})"
            )
        if self.total_jobs_analyzed < 0:
            raise ValueError("total_jobs_analyzed must be non-negative")

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "recommendations": [rec.to_dict() for rec in self.recommendations],
            "profile_completeness": self.profile_completeness,
            "insights": list(self.insights),
            "total_jobs_analyzed": self.total_jobs_analyzed,
            "scoring_mode": self.scoring_mode,
            "generated_at": self.generated_at.isoformat(),
        }


@dataclass
class ProfileAnalysis:
    """Profile strength score with an improvement suggestion."""

    user_id: int
    score: int
    suggestion: str
    suggestion_source: Literal["rules", "llm"] = "rules"
    analyzed_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "user_id": self.user_id,
            "score": self.score,
            "suggestion": self.suggestion,
            "suggestion_source": self.suggestion_source,
            "analyzed_at": self.analyzed_at.isoformat(),
        }
