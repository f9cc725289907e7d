"""Configuration settings for the recommendation engine."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecommendationConfig(BaseSettings):
    """Recommendation engine configuration settings.

    Scoring weights and synonym tables are fixed in code; only the
    operating mode and the optional suggestion LLM are configurable.
    Values can be overridden via environment variables with the
    `RECOMMENDER_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="RECOMMENDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Ranking mode
    scoring_mode: Literal["history", "neutral"] = Field(
        default="history",
        description=(
            "'history' blends profile and application-history signals; "
            "'neutral' is the degraded mode with a fixed score per job"
        ),
    )
    neutral_score: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.65,
        description="Score assigned to every job in neutral mode",
    )

    # Profile suggestion copy
    suggestion_mode: Literal["rules", "llm"] = Field(
        default="rules",
        description="How profile improvement suggestions are phrased",
    )
    llm_provider: str = Field(
        default="openai",
        description="LLM provider routed through LiteLLM",
    )
    llm_model: str = Field(
        default="gpt-4o-mini",
        description="Model used for suggestion copy",
    )
    llm_api_key: str | None = Field(
        default=None,
        description="API key for the LLM provider",
    )
    llm_base_url: str | None = Field(
        default=None,
        description="Base URL for OpenAI-compatible or Anthropic endpoints",
    )
    llm_timeout: Annotated[float, Field(gt=0.0)] = Field(
        default=30.0,
        description="Timeout for a single LLM call in seconds",
    )
    llm_max_retries: Annotated[int, Field(ge=0)] = Field(
        default=1,
        description="Retries after a failed LLM call",
    )
    llm_max_tokens: Annotated[int, Field(gt=0)] = Field(
        default=200,
        description="Upper bound on generated suggestion length",
    )


# Singleton instance for easy import
_recommendation_config: RecommendationConfig | None = None


def get_recommendation_config() -> RecommendationConfig:
    """Get the recommendation configuration singleton."""
    global _recommendation_config
    if _recommendation_config is None:
        _recommendation_config = RecommendationConfig()
    return _recommendation_config


def reset_recommendation_config() -> None:
    """Reset the recommendation configuration singleton (useful for testing)."""
    global _recommendation_config
    _recommendation_config = None
