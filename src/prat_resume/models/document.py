"""Resume document model.

The document is the single aggregate the editor, the preview and the
persistence layer share.  Every model is frozen and every list is a tuple,
so a document value never changes after construction; edits build a new
document (see ``prat_resume.services.editor``).

Serialized documents use the camelCase keys of the stored snapshot format
(``personalInfo``, ``fullName``, ``layoutDensity`` ...).  Python code uses
the snake_case attribute names; both are accepted on input.
"""

from __future__ import annotations

import itertools
import secrets
import time
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from prat_resume.constants.layout_tokens import DEFAULT_DENSITY, DEFAULT_THEME_COLOR

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "LayoutDensity",
    "PersonalInfo",
    "ResumeDocument",
    "SKILL_LEVELS",
    "SkillEntry",
    "SkillLevel",
    "empty_document",
    "new_entry_id",
]

SkillLevel = Literal["Beginner", "Intermediate", "Advanced", "Expert"]
LayoutDensity = Literal["compact", "comfortable"]

SKILL_LEVELS: tuple[str, ...] = ("Beginner", "Intermediate", "Advanced", "Expert")
DEFAULT_SKILL_LEVEL: SkillLevel = "Intermediate"

_id_counter = itertools.count(1)


def new_entry_id() -> str:
    """Return a fresh, collision-resistant entry id.

    Combines a millisecond timestamp with a process-wide monotonic counter
    and random hex, so ids created within the same millisecond still differ.
    """
    millis = time.time_ns() // 1_000_000
    return f"{millis:x}-{next(_id_counter):x}-{secrets.token_hex(4)}"


class _DocumentModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class _TextRecord(_DocumentModel):
    """Base for records whose fields are plain display strings."""

    @field_validator("*", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        # Older snapshots store missing text fields as null.
        return "" if value is None else value


class PersonalInfo(_TextRecord):
    """Identity and contact details shown in the resume header."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    city: str = ""
    link: str = ""
    job_title: str = ""
    summary: str = ""


class ExperienceEntry(_TextRecord):
    """One job.  ``description`` holds newline-delimited bullets."""

    id: str = Field(default_factory=new_entry_id)
    company: str = ""
    job_title: str = ""
    start_date: str = ""
    end_date: str = ""
    city: str = ""
    description: str = ""


class EducationEntry(_TextRecord):
    """One school or degree."""

    id: str = Field(default_factory=new_entry_id)
    school: str = ""
    degree: str = ""
    start_date: str = ""
    end_date: str = ""
    city: str = ""
    description: str = ""
    grade: str = ""


class SkillEntry(_TextRecord):
    id: str = Field(default_factory=new_entry_id)
    name: str = ""
    level: SkillLevel = DEFAULT_SKILL_LEVEL


class ResumeDocument(_DocumentModel):
    """Complete resume: personal info, three entry lists, presentation."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    skills: tuple[SkillEntry, ...] = ()
    theme_color: str = DEFAULT_THEME_COLOR
    layout_density: LayoutDensity = DEFAULT_DENSITY

    @model_validator(mode="after")
    def _check_unique_ids(self) -> ResumeDocument:
        for section in ("experience", "education", "skills"):
            ids = [entry.id for entry in getattr(self, section)]
            if len(ids) != len(set(ids)):
                raise ValueError(f"duplicate entry id in {section}")
        return self

    def to_json(self) -> str:
        """Serialize using the snapshot (camelCase) keys."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, payload: str | bytes) -> ResumeDocument:
        """Parse a serialized document.

        Raises:
            pydantic.ValidationError: If *payload* is not valid JSON or does
                not describe a resume document.
        """
        return cls.model_validate_json(payload)


def empty_document() -> ResumeDocument:
    """Return the blank initial document."""
    return ResumeDocument()
