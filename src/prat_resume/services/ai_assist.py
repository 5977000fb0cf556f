"""AI text assist: one-shot rewrites and suggestions for the editor.

Every operation is an async, stateless request with a fixed JSON response
schema.  None of them raise to the caller: on a missing credential, a
provider error, a timeout, an empty reply or a reply that does not match
the schema, each returns its safe default (the original text, an empty
string, an empty list, or an unknown voice intent).

Merging results into the document is the caller's job; see
``prat_resume.services.editor``.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable
from typing import Any

from prat_resume.models.document import ResumeDocument
from prat_resume.services.llm_providers import LLMError
from prat_resume.services.llm_service import LLMService, llm_configured
from prat_resume.voice.intents import INTENT_NAMES, UnknownIntent, VoiceIntent, parse_intent

logger = logging.getLogger(__name__)

__all__ = [
    "AIAssistant",
    "DEFAULT_TIMEOUT_SECONDS",
    "MIN_ENHANCE_LENGTH",
    "ai_available",
    "ai_timeout_seconds",
]

MIN_ENHANCE_LENGTH = 5
DEFAULT_TIMEOUT_SECONDS = 30.0

_ENHANCE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "improvedDescription": {
            "type": "STRING",
            "description": "The rewritten description formatted as a list of bullet points.",
        }
    },
    "required": ["improvedDescription"],
}

_SUMMARY_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "summary": {"type": "STRING", "description": "The professional resume summary."}
    },
    "required": ["summary"],
}

_SKILLS_SCHEMA = {
    "type": "OBJECT",
    "properties": {"skills": {"type": "ARRAY", "items": {"type": "STRING"}}},
    "required": ["skills"],
}

_VOICE_FIELDS = (
    "fullName",
    "email",
    "phone",
    "city",
    "link",
    "jobTitle",
    "summary",
    "company",
    "startDate",
    "endDate",
    "description",
    "school",
    "degree",
    "grade",
    "name",
    "level",
)

_VOICE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "intent": {"type": "STRING", "enum": list(INTENT_NAMES)},
        "data": {
            "type": "OBJECT",
            "properties": {field: {"type": "STRING"} for field in _VOICE_FIELDS},
        },
    },
    "required": ["intent"],
}


def ai_timeout_seconds() -> float:
    """Return the per-request timeout from ``AI_TIMEOUT_SECONDS``."""
    raw = os.environ.get("AI_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid AI_TIMEOUT_SECONDS=%r", raw)
        return DEFAULT_TIMEOUT_SECONDS
    return value if value > 0 else DEFAULT_TIMEOUT_SECONDS


def ai_available() -> bool:
    """Return whether AI features can be offered (credential present)."""
    return llm_configured()


def _summary_context(document: ResumeDocument) -> str:
    info = document.personal_info
    experience = ", ".join(f"{e.job_title} at {e.company}" for e in document.experience)
    skills = ", ".join(s.name for s in document.skills)
    return (
        f"Name: {info.full_name}\n"
        f"Target Role: {info.job_title}\n"
        f"Experience: {experience}\n"
        f"Skills: {skills}"
    )


class AIAssistant:
    """Async facade over :class:`LLMService` for the editor's AI actions."""

    def __init__(
        self,
        service_factory: Callable[[], LLMService] = LLMService,
        timeout: float | None = None,
    ) -> None:
        """
        Args:
            service_factory: Builds the LLM service for each request.  The
                default reads the provider configuration from the environment.
            timeout: Seconds before a request is abandoned.  Defaults to
                ``AI_TIMEOUT_SECONDS`` or 30.
        """
        self._service_factory = service_factory
        self.timeout = timeout if timeout is not None else ai_timeout_seconds()

    async def _request_json(self, system_rules: str, user_content: str, schema: dict) -> Any:
        """Run one structured request off the event loop.

        Raises:
            LLMError: If the service cannot be built or the call fails.
            TimeoutError: If the call exceeds the timeout.
        """
        service = self._service_factory()
        return await asyncio.wait_for(
            asyncio.to_thread(
                service.generate_json_response,
                system_instructions=system_rules,
                user_content=user_content,
                response_schema=schema,
            ),
            timeout=self.timeout,
        )

    async def _string_field(
        self, system_rules: str, user_content: str, schema: dict, field: str
    ) -> str | None:
        try:
            payload = await self._request_json(system_rules, user_content, schema)
        except (LLMError, TimeoutError) as exc:
            logger.warning("AI request for %r failed: %s", field, exc)
            return None
        value = payload.get(field) if isinstance(payload, dict) else None
        if not isinstance(value, str):
            logger.warning("AI response is missing string field %r", field)
            return None
        return value.strip()

    async def enhance_description(self, text: str) -> str:
        """Rewrite free-form experience text as resume bullet points.

        Text shorter than ``MIN_ENHANCE_LENGTH`` is returned as-is without a
        request.  The original text is returned on any failure.
        """
        if not text or len(text) < MIN_ENHANCE_LENGTH:
            return text

        system_rules = (
            "You are an expert resume writer. Rewrite the raw job description into "
            "professional, action-oriented resume bullet points. Keep it concise and "
            "impactful. Do not include preamble."
        )
        improved = await self._string_field(
            system_rules, f'Raw Description: "{text}"', _ENHANCE_SCHEMA, "improvedDescription"
        )
        return improved or text

    async def generate_summary(self, document: ResumeDocument) -> str:
        """Write a 3-4 sentence professional summary; "" on failure."""
        system_rules = (
            "Write a professional, 3-4 sentence resume summary for the candidate profile. "
            "It should be engaging and highlight their strengths for the target role."
        )
        user_content = f"Profile Data:\n{_summary_context(document)}"
        summary = await self._string_field(system_rules, user_content, _SUMMARY_SCHEMA, "summary")
        return summary or ""

    async def suggest_skills(self, job_title: str) -> list[str]:
        """Suggest 5-8 skill names for *job_title*; [] when blank or on failure."""
        if not job_title or not job_title.strip():
            return []

        system_rules = "List 5 to 8 key technical and soft skills for the given job title."
        try:
            payload = await self._request_json(
                system_rules, f'Job title: "{job_title.strip()}"', _SKILLS_SCHEMA
            )
        except (LLMError, TimeoutError) as exc:
            logger.warning("AI skill suggestion failed: %s", exc)
            return []

        skills = payload.get("skills") if isinstance(payload, dict) else None
        if not isinstance(skills, list):
            logger.warning("AI response is missing the skills list")
            return []
        return [s.strip() for s in skills if isinstance(s, str) and s.strip()]

    async def classify_voice_command(self, transcript: str) -> VoiceIntent:
        """Map a spoken command to an intent with its extracted fields."""
        if not transcript or not transcript.strip():
            return UnknownIntent()

        system_rules = (
            "You turn spoken commands for a resume editor into structured edits. "
            "Choose one intent: update_personal (name, email, phone, city, link, job "
            "title or summary), add_experience, add_education, add_skill, or unknown. "
            "Put only the fields the speaker actually mentioned in data, using the keys "
            "fullName, email, phone, city, link, jobTitle, summary, company, startDate, "
            "endDate, description, school, degree, grade, name and level. Skill level "
            "must be one of Beginner, Intermediate, Advanced or Expert."
        )
        try:
            payload = await self._request_json(
                system_rules, f'Command: "{transcript.strip()}"', _VOICE_SCHEMA
            )
        except (LLMError, TimeoutError) as exc:
            logger.warning("Voice command classification failed: %s", exc)
            return UnknownIntent()
        return parse_intent(payload)
