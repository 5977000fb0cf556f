"""Tests for the AI text assist operations."""

from __future__ import annotations

import asyncio
import json
import time

import pytest

from prat_resume.models import demo_document
from prat_resume.services.ai_assist import (
    DEFAULT_TIMEOUT_SECONDS,
    AIAssistant,
    ai_available,
    ai_timeout_seconds,
)
from prat_resume.services.llm_providers import LLMError, LLMProvider
from prat_resume.services.llm_service import LLMService
from prat_resume.voice.intents import AddSkillIntent, UnknownIntent, UpdatePersonalIntent


class MockProvider(LLMProvider):
    """Returns a canned response and records every prompt."""

    def __init__(self, response: object = "", delay: float = 0.0) -> None:
        self.response = response if isinstance(response, str) else json.dumps(response)
        self.delay = delay
        self.prompts: list[str] = []
        self.configs: list[dict] = []

    def send_prompt(self, prompt: str, config: dict) -> str:
        self.prompts.append(prompt)
        self.configs.append(config)
        if self.delay:
            time.sleep(self.delay)
        return self.response


class FailingProvider(LLMProvider):
    def __init__(self) -> None:
        self.calls = 0

    def send_prompt(self, prompt: str, config: dict) -> str:
        self.calls += 1
        raise LLMError("Gemini API call failed: quota exceeded")


def _assistant(provider: LLMProvider, timeout: float = 5.0) -> AIAssistant:
    return AIAssistant(service_factory=lambda: LLMService(provider=provider), timeout=timeout)


class TestConfiguration:
    def test_timeout_defaults(self) -> None:
        assert ai_timeout_seconds() == DEFAULT_TIMEOUT_SECONDS

    @pytest.mark.parametrize(("raw", "expected"), [("12", 12.0), ("abc", 30.0), ("-1", 30.0)])
    def test_timeout_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: float
    ) -> None:
        monkeypatch.setenv("AI_TIMEOUT_SECONDS", raw)
        assert ai_timeout_seconds() == expected

    def test_availability_follows_credential(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert ai_available() is False
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        assert ai_available() is True

    def test_missing_credential_returns_safe_default(self) -> None:
        # Default factory builds a Gemini provider, which fails without a key.
        assistant = AIAssistant()

        result = asyncio.run(assistant.enhance_description("Managed a team of ten"))

        assert result == "Managed a team of ten"


class TestEnhanceDescription:
    @pytest.mark.parametrize("text", ["", "hi", "abcd"])
    def test_short_text_is_returned_without_a_request(self, text: str) -> None:
        provider = MockProvider({"improvedDescription": "should not be used"})

        result = asyncio.run(_assistant(provider).enhance_description(text))

        assert result == text
        assert provider.prompts == []

    def test_returns_improved_text(self) -> None:
        provider = MockProvider({"improvedDescription": "  - Led a team of ten\n- Shipped v2 "})

        result = asyncio.run(_assistant(provider).enhance_description("managed team, shipped v2"))

        assert result == "- Led a team of ten\n- Shipped v2"
        assert "managed team, shipped v2" in provider.prompts[0]
        assert "improvedDescription" in provider.configs[0]["response_schema"]["properties"]

    def test_provider_failure_returns_original(self) -> None:
        provider = FailingProvider()

        result = asyncio.run(_assistant(provider).enhance_description("managed a team"))

        assert result == "managed a team"
        assert provider.calls == 1

    @pytest.mark.parametrize(
        "response",
        ["not json", "", {"other": "x"}, {"improvedDescription": 5}, ["a", "b"]],
    )
    def test_bad_response_returns_original(self, response: object) -> None:
        result = asyncio.run(_assistant(MockProvider(response)).enhance_description("wrote code"))
        assert result == "wrote code"

    def test_timeout_returns_original(self) -> None:
        provider = MockProvider({"improvedDescription": "late"}, delay=0.3)

        result = asyncio.run(_assistant(provider, timeout=0.05).enhance_description("wrote code"))

        assert result == "wrote code"


class TestGenerateSummary:
    def test_prompt_includes_profile(self) -> None:
        provider = MockProvider({"summary": "Seasoned designer."})

        result = asyncio.run(_assistant(provider).generate_summary(demo_document()))

        assert result == "Seasoned designer."
        prompt = provider.prompts[0]
        assert "Name: Pratima Singh" in prompt
        assert "Senior Product Designer at TechFlow Solutions" in prompt
        assert "Figma" in prompt

    def test_failure_returns_empty_string(self) -> None:
        result = asyncio.run(_assistant(FailingProvider()).generate_summary(demo_document()))
        assert result == ""


class TestSuggestSkills:
    @pytest.mark.parametrize("job_title", ["", "   "])
    def test_blank_job_title_makes_no_request(self, job_title: str) -> None:
        provider = MockProvider({"skills": ["Python"]})

        result = asyncio.run(_assistant(provider).suggest_skills(job_title))

        assert result == []
        assert provider.prompts == []

    def test_returns_cleaned_skill_names(self) -> None:
        provider = MockProvider({"skills": [" Python ", "", 3, "SQL"]})

        result = asyncio.run(_assistant(provider).suggest_skills("Data Engineer"))

        assert result == ["Python", "SQL"]
        assert "Data Engineer" in provider.prompts[0]

    def test_failure_returns_empty_list(self) -> None:
        assert asyncio.run(_assistant(FailingProvider()).suggest_skills("Chef")) == []

    def test_missing_list_returns_empty_list(self) -> None:
        provider = MockProvider({"skills": "Python, SQL"})
        assert asyncio.run(_assistant(provider).suggest_skills("Chef")) == []


class TestClassifyVoiceCommand:
    def test_add_skill(self) -> None:
        provider = MockProvider({"intent": "add_skill", "data": {"name": "Python"}})

        intent = asyncio.run(_assistant(provider).classify_voice_command("add skill Python"))

        assert intent == AddSkillIntent(name="Python")

    def test_update_personal_uses_camel_case_keys(self) -> None:
        provider = MockProvider(
            {"intent": "update_personal", "data": {"jobTitle": "Chef", "city": "Lyon"}}
        )

        intent = asyncio.run(_assistant(provider).classify_voice_command("I'm a chef in Lyon"))

        assert isinstance(intent, UpdatePersonalIntent)
        assert intent.job_title == "Chef"
        assert intent.city == "Lyon"
        assert intent.email is None

    def test_empty_transcript_makes_no_request(self) -> None:
        provider = MockProvider({"intent": "add_skill", "data": {}})

        intent = asyncio.run(_assistant(provider).classify_voice_command("  "))

        assert isinstance(intent, UnknownIntent)
        assert provider.prompts == []

    def test_failure_is_unknown(self) -> None:
        intent = asyncio.run(_assistant(FailingProvider()).classify_voice_command("add skill"))
        assert isinstance(intent, UnknownIntent)
