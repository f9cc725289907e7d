"""LLM client for profile suggestion copy.

Uses LiteLLM to phrase free-text suggestions. Nothing in recommendation
scoring depends on this client.
"""

from __future__ import annotations

import os
import time
from typing import Any

from recommender.scoring.config import RecommendationConfig, get_recommendation_config
from recommender.utils.logging import get_logger

logger = get_logger(__name__)

# LiteLLM loads `.env` into process environment by default (DEV mode).
# We default to PRODUCTION unless the user explicitly opted into DEV.
os.environ.setdefault("LITELLM_MODE", "PRODUCTION")


class SuggestionLLMError(Exception):
    """Exception raised when suggestion LLM operations fail."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class SuggestionLLM:
    """LLM client for profile improvement suggestions."""

    def __init__(self, config: RecommendationConfig | None = None) -> None:
        self.config = config or get_recommendation_config()
        self._setup_provider_env()

    def _setup_provider_env(self) -> None:
        """Set up provider-specific environment variables."""
        if self.config.llm_base_url and self.config.llm_provider == "anthropic":
            base_url = self.config.llm_base_url.rstrip("/")
            if base_url.endswith("/v1"):
                base_url = base_url[:-3]
            os.environ["ANTHROPIC_BASE_URL"] = base_url
            if self.config.llm_api_key:
                os.environ["ANTHROPIC_API_KEY"] = self.config.llm_api_key

    def _get_model_name(self) -> str:
        """Return provider-qualified model name for LiteLLM routing."""
        if "/" in self.config.llm_model:
            return self.config.llm_model

        if self.config.llm_provider == "anthropic":
            return f"anthropic/{self.config.llm_model}"

        if self.config.llm_base_url:
            return f"openai/{self.config.llm_model}"

        if self.config.llm_provider == "openai":
            return self.config.llm_model

        return f"{self.config.llm_provider}/{self.config.llm_model}"

    def generate_text(self, *, prompt: str, system_prompt: str | None = None) -> str:
        """Generate free text for a prompt, retrying transient failures."""
        from litellm.exceptions import Timeout

        messages: list[dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        last_error: Exception | None = None
        for attempt in range(self.config.llm_max_retries + 1):
            try:
                response = self._call_completion(messages=messages)
                return self._parse_response(response)

            except SuggestionLLMError:
                raise

            except Timeout as e:
                raise SuggestionLLMError(
                    "LLM request timed out. "
                    f"Increase RECOMMENDER_LLM_TIMEOUT (timeout={self.config.llm_timeout}s).",
                    e,
                ) from e

            except Exception as e:
                last_error = e
                if attempt < self.config.llm_max_retries:
                    delay = min(0.5 * (2**attempt), 8.0)
                    logger.warning(
                        "LLM call failed (attempt %s), retrying in %.1fs: %s",
                        attempt + 1,
                        delay,
                        e,
                    )
                    time.sleep(delay)
                    continue
                raise SuggestionLLMError(f"LLM call failed after retries: {e}", e) from e

        raise SuggestionLLMError(f"LLM call failed: {last_error}", last_error)

    def _call_completion(self, *, messages: list[dict[str, str]]):
        from litellm import completion

        kwargs: dict[str, Any] = {
            "model": self._get_model_name(),
            "messages": messages,
            "timeout": self.config.llm_timeout,
            "max_tokens": self.config.llm_max_tokens,
        }

        if self.config.llm_api_key:
            kwargs["api_key"] = self.config.llm_api_key

        if self.config.llm_base_url and self.config.llm_provider != "anthropic":
            kwargs["base_url"] = self.config.llm_base_url

        return completion(**kwargs)

    def _parse_response(self, response) -> str:
        message = response.choices[0].message
        content = getattr(message, "content", None)
        if content is None or not str(content).strip():
            raise SuggestionLLMError("LLM returned no content.")
        return str(content).strip()
