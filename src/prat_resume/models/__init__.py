"""Domain models for the resume document."""

from prat_resume.models.demo import demo_document
from prat_resume.models.document import (
    SKILL_LEVELS,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeDocument,
    SkillEntry,
    empty_document,
    new_entry_id,
)

__all__ = [
    "SKILL_LEVELS",
    "EducationEntry",
    "ExperienceEntry",
    "PersonalInfo",
    "ResumeDocument",
    "SkillEntry",
    "demo_document",
    "empty_document",
    "new_entry_id",
]
