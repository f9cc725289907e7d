"""Unit tests for SuggestionLLM."""

from __future__ import annotations

import pytest


class _DummyMessage:
    def __init__(self, content: str | None):
        self.content = content


class _DummyChoice:
    def __init__(self, message: _DummyMessage):
        self.message = message


class _DummyResponse:
    def __init__(self, content: str | None):
        self.choices = [_DummyChoice(_DummyMessage(content))]


def _config(**overrides):
    from recommender.scoring.config import RecommendationConfig

    overrides.setdefault("llm_max_retries", 0)
    return RecommendationConfig(_env_file=None, **overrides)  # type: ignore[call-arg]


class TestSuggestionLLM:
    def test_generate_text_returns_stripped_content(self, monkeypatch) -> None:
        from recommender.scoring.llm import SuggestionLLM

        llm = SuggestionLLM(config=_config())
        seen: dict[str, object] = {}

        def _fake_call_completion(*, messages):
            seen["messages"] = messages
            return _DummyResponse("  Add a bio.\n")

        monkeypatch.setattr(llm, "_call_completion", _fake_call_completion)

        result = llm.generate_text(prompt="profile", system_prompt="coach")

        assert result == "Add a bio."
        assert seen["messages"] == [
            {"role": "system", "content": "coach"},
            {"role": "user", "content": "profile"},
        ]

    def test_generate_text_without_system_prompt(self, monkeypatch) -> None:
        from recommender.scoring.llm import SuggestionLLM

        llm = SuggestionLLM(config=_config())
        seen: dict[str, object] = {}

        def _fake_call_completion(*, messages):
            seen["messages"] = messages
            return _DummyResponse("ok")

        monkeypatch.setattr(llm, "_call_completion", _fake_call_completion)

        llm.generate_text(prompt="profile")

        assert seen["messages"] == [{"role": "user", "content": "profile"}]

    def test_empty_content_raises(self, monkeypatch) -> None:
        from recommender.scoring.llm import SuggestionLLM, SuggestionLLMError

        llm = SuggestionLLM(config=_config(llm_max_retries=2))
        calls = {"n": 0}

        def _fake_call_completion(*, messages):  # noqa: ARG001
            calls["n"] += 1
            return _DummyResponse("   ")

        monkeypatch.setattr(llm, "_call_completion", _fake_call_completion)

        with pytest.raises(SuggestionLLMError, match="no content"):
            llm.generate_text(prompt="x")
        assert calls["n"] == 1

    def test_retries_transient_failures(self, monkeypatch) -> None:
        from recommender.scoring.llm import SuggestionLLM

        llm = SuggestionLLM(config=_config(llm_max_retries=1))
        calls = {"n": 0}

        def _fake_call_completion(*, messages):  # noqa: ARG001
            calls["n"] += 1
            if calls["n"] == 1:
                raise ConnectionError("reset by peer")
            return _DummyResponse("Second time lucky")

        monkeypatch.setattr(llm, "_call_completion", _fake_call_completion)
        monkeypatch.setattr("recommender.scoring.llm.time.sleep", lambda _s: None)

        assert llm.generate_text(prompt="x") == "Second time lucky"
        assert calls["n"] == 2

    def test_gives_up_after_retries(self, monkeypatch) -> None:
        from recommender.scoring.llm import SuggestionLLM, SuggestionLLMError

        llm = SuggestionLLM(config=_config(llm_max_retries=1))

        def _fake_call_completion(*, messages):  # noqa: ARG001
            raise ConnectionError("reset by peer")

        monkeypatch.setattr(llm, "_call_completion", _fake_call_completion)
        monkeypatch.setattr("recommender.scoring.llm.time.sleep", lambda _s: None)

        with pytest.raises(SuggestionLLMError) as exc_info:
            llm.generate_text(prompt="x")

        assert isinstance(exc_info.value.original_error, ConnectionError)

    @pytest.mark.parametrize(
        ("overrides", "expected"),
        [
            ({"llm_provider": "openai", "llm_model": "gpt-4o-mini"}, "gpt-4o-mini"),
            (
                {"llm_provider": "anthropic", "llm_model": "claude-3-5-haiku-latest"},
                "anthropic/claude-3-5-haiku-latest",
            ),
            (
                {
                    "llm_provider": "openai",
                    "llm_model": "local-model",
                    "llm_base_url": "http://localhost:8000/v1",
                },
                "openai/local-model",
            ),
            ({"llm_provider": "groq", "llm_model": "llama3"}, "groq/llama3"),
            ({"llm_provider": "groq", "llm_model": "groq/llama3"}, "groq/llama3"),
        ],
    )
    def test_model_name_routing(self, overrides, expected) -> None:
        from recommender.scoring.llm import SuggestionLLM

        assert SuggestionLLM(config=_config(**overrides))._get_model_name() == expected
