"""Pydantic schemas for the document, assist and voice endpoints.

Bodies use the same camelCase keys as the serialized document; snake_case
names are accepted as well.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from prat_resume.models.document import ResumeDocument, SkillLevel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldUpdateRequest(_CamelModel):
    """Request schema for replacing one field of personal info or an entry."""

    field: str = Field(..., description="Field name, e.g. jobTitle or job_title")
    value: str = Field(..., description="New field value")


class ExperienceCreateRequest(_CamelModel):
    company: str = ""
    job_title: str = ""
    start_date: str = ""
    end_date: str = ""
    city: str = ""
    description: str = ""


class EducationCreateRequest(_CamelModel):
    school: str = ""
    degree: str = ""
    start_date: str = ""
    end_date: str = ""
    city: str = ""
    description: str = ""
    grade: str = ""


class SkillCreateRequest(_CamelModel):
    name: str = ""
    level: SkillLevel = "Intermediate"


class ThemeRequest(_CamelModel):
    color: str = Field(..., description="One of the palette colors")


class ConfirmRequest(_CamelModel):
    """Body for destructive actions; nothing happens unless ``confirm`` is true."""

    confirm: bool = False


class ConfirmResponse(_CamelModel):
    applied: bool
    document: ResumeDocument


class SkillSuggestionResponse(_CamelModel):
    suggested: list[str]
    document: ResumeDocument


class TranscriptRequest(_CamelModel):
    transcript: str = Field(..., description="Final transcript of one spoken command")


class VoiceCommandResponse(_CamelModel):
    intent: str
    applied: bool
    document: ResumeDocument


class CapabilitiesResponse(_CamelModel):
    ai: bool
    voice: bool
    theme_palette: list[str]
    zoom_min: float
    zoom_max: float
    zoom_step: float
    default_zoom: float
