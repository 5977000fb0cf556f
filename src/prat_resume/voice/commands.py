"""Apply classified voice commands to the resume document.

Intents go through the same editor primitives as manual edits: a field
replace for personal info, an append for the three lists.  Key fields the
speaker left out get placeholder text so no new entry has a blank heading.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from prat_resume.models.document import DEFAULT_SKILL_LEVEL, SKILL_LEVELS, ResumeDocument
from prat_resume.services.editor import (
    add_education,
    add_experience,
    add_skill,
    update_personal_info,
)
from prat_resume.voice.intents import (
    AddEducationIntent,
    AddExperienceIntent,
    AddSkillIntent,
    UnknownIntent,
    UpdatePersonalIntent,
    VoiceIntent,
)

if TYPE_CHECKING:
    from prat_resume.services.ai_assist import AIAssistant
    from prat_resume.store import ResumeStore

logger = logging.getLogger(__name__)

__all__ = [
    "COMPANY_PLACEHOLDER",
    "DEGREE_PLACEHOLDER",
    "JOB_TITLE_PLACEHOLDER",
    "SCHOOL_PLACEHOLDER",
    "SKILL_PLACEHOLDER",
    "apply_intent",
    "process_transcript",
]

# Placeholder text is user-visible; changing it is a behavior change.
COMPANY_PLACEHOLDER = "Company"
JOB_TITLE_PLACEHOLDER = "Job Title"
SCHOOL_PLACEHOLDER = "University"
DEGREE_PLACEHOLDER = "Degree"
SKILL_PLACEHOLDER = "New Skill"

_PERSONAL_FIELDS = ("full_name", "email", "phone", "city", "link", "job_title", "summary")


def _skill_level(spoken: str | None) -> str:
    if spoken:
        for level in SKILL_LEVELS:
            if level.lower() == spoken.strip().lower():
                return level
    return DEFAULT_SKILL_LEVEL


def apply_intent(document: ResumeDocument, intent: VoiceIntent) -> ResumeDocument:
    """Return *document* with *intent* applied.  Unknown intents change nothing."""
    if isinstance(intent, UpdatePersonalIntent):
        for field in _PERSONAL_FIELDS:
            value = getattr(intent, field)
            if value:
                document = update_personal_info(document, field, value)
        return document

    if isinstance(intent, AddExperienceIntent):
        return add_experience(
            document,
            company=intent.company or COMPANY_PLACEHOLDER,
            job_title=intent.job_title or JOB_TITLE_PLACEHOLDER,
            start_date=intent.start_date or "",
            end_date=intent.end_date or "",
            city=intent.city or "",
            description=intent.description or "",
        )

    if isinstance(intent, AddEducationIntent):
        return add_education(
            document,
            school=intent.school or SCHOOL_PLACEHOLDER,
            degree=intent.degree or DEGREE_PLACEHOLDER,
            start_date=intent.start_date or "",
            end_date=intent.end_date or "",
            city=intent.city or "",
            grade=intent.grade or "",
        )

    if isinstance(intent, AddSkillIntent):
        return add_skill(
            document,
            name=intent.name or SKILL_PLACEHOLDER,
            level=_skill_level(intent.level),
        )

    return document


async def process_transcript(
    store: ResumeStore, assistant: AIAssistant, transcript: str
) -> VoiceIntent:
    """Classify *transcript* and apply the resulting intent to *store*.

    Returns the intent that was applied (``UnknownIntent`` when nothing was).
    """
    if not transcript.strip():
        return UnknownIntent()

    intent = await assistant.classify_voice_command(transcript)
    if isinstance(intent, UnknownIntent):
        logger.info("Voice command not understood: %r", transcript)
        return intent

    store.update(lambda document: apply_intent(document, intent))
    return intent
