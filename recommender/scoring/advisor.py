"""Profile strength analysis and improvement suggestions."""

from __future__ import annotations

from recommender.scoring.config import RecommendationConfig, get_recommendation_config
from recommender.scoring.llm import SuggestionLLM, SuggestionLLMError
from recommender.scoring.models import ProfileAnalysis, UserProfile, is_blank
from recommender.scoring.profile import profile_strength
from recommender.scoring.prompts import SUGGESTION_SYSTEM_PROMPT, build_suggestion_prompt
from recommender.utils.logging import get_logger

logger = get_logger(__name__)


def rule_based_suggestion(profile: UserProfile, score: int) -> str:
    """Pick a canned suggestion targeting the most valuable missing field."""
    if score < 30:
        return (
            "Start by completing your basic profile: add your full name, write a "
            "professional bio highlighting your key strengths, and list your main "
            "skills. These fundamental details help employers find and evaluate you."
        )
    if score < 60:
        if is_blank(profile.bio):
            return (
                "Add a compelling professional bio that showcases your unique value "
                "proposition. Highlight your key achievements and what makes you "
                "stand out to potential employers."
            )
        if is_blank(profile.skills):
            return (
                "List your technical and soft skills comprehensively. Include "
                "programming languages, tools, frameworks, and interpersonal "
                "abilities relevant to your target roles."
            )
        return (
            "Expand your experience section with specific achievements and "
            "quantifiable results. Detail your responsibilities and impact in "
            "previous roles."
        )
    if score < 80:
        if is_blank(profile.preferred_job_type):
            return (
                "Add job type preferences to get the most relevant positions. "
                "Specify whether you prefer full-time, part-time, contract, or "
                "remote work."
            )
        if is_blank(profile.preferred_location):
            return (
                "Add your preferred work location to get more targeted job "
                "recommendations in your desired area or specify if you're open "
                "to remote work."
            )
        return (
            "Fine-tune your profile by adding more specific skills and updating "
            "your experience with recent projects. Consider adding salary "
            "expectations."
        )
    return (
        "Excellent profile! Keep it fresh by regularly updating your skills, "
        "adding new experiences, and refining your bio to reflect your career "
        "growth."
    )


class ProfileAdvisor:
    """Score profile strength and suggest the next improvement."""

    def __init__(
        self,
        config: RecommendationConfig | None = None,
        llm: SuggestionLLM | None = None,
    ) -> None:
        self.config = config or get_recommendation_config()
        self._llm = llm
        if self._llm is None and self.config.suggestion_mode == "llm":
            self._llm = SuggestionLLM(config=self.config)

    def analyze_profile(self, profile: UserProfile) -> ProfileAnalysis:
        """Return the profile strength score with an improvement suggestion.

        When suggestion_mode is "llm" the copy is generated by the LLM,
        falling back to the rule-based suggestion on any LLM failure.
        """
        score = profile_strength(profile)

        if self._llm is not None:
            prompt = build_suggestion_prompt(profile=profile, score=score)
            try:
                suggestion = self._llm.generate_text(
                    prompt=prompt, system_prompt=SUGGESTION_SYSTEM_PROMPT
                )
            except SuggestionLLMError as e:
                logger.warning(
                    "Suggestion LLM failed for user %s, using rules: %s", profile.id, e
                )
            else:
                return ProfileAnalysis(
                    user_id=profile.id,
                    score=score,
                    suggestion=suggestion,
                    suggestion_source="llm",
                )

        return ProfileAnalysis(
            user_id=profile.id,
            score=score,
            suggestion=rule_based_suggestion(profile, score),
            suggestion_source="rules",
        )
