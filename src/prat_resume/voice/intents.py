"""Voice command intents.

A classified voice command is one of five variants, told apart by the
``intent`` tag.  Each variant carries only the fields that make sense for
it; a field the classifier did not extract is None.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

__all__ = [
    "INTENT_NAMES",
    "AddEducationIntent",
    "AddExperienceIntent",
    "AddSkillIntent",
    "UnknownIntent",
    "UpdatePersonalIntent",
    "VoiceIntent",
    "parse_intent",
]

INTENT_NAMES: tuple[str, ...] = (
    "update_personal",
    "add_experience",
    "add_education",
    "add_skill",
    "unknown",
)


class _Intent(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class UpdatePersonalIntent(_Intent):
    intent: Literal["update_personal"] = "update_personal"
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    city: str | None = None
    link: str | None = None
    job_title: str | None = None
    summary: str | None = None


class AddExperienceIntent(_Intent):
    intent: Literal["add_experience"] = "add_experience"
    company: str | None = None
    job_title: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    city: str | None = None
    description: str | None = None


class AddEducationIntent(_Intent):
    intent: Literal["add_education"] = "add_education"
    school: str | None = None
    degree: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    city: str | None = None
    grade: str | None = None


class AddSkillIntent(_Intent):
    intent: Literal["add_skill"] = "add_skill"
    name: str | None = None
    level: str | None = None


class UnknownIntent(_Intent):
    intent: Literal["unknown"] = "unknown"


VoiceIntent = Annotated[
    Union[
        UpdatePersonalIntent,
        AddExperienceIntent,
        AddEducationIntent,
        AddSkillIntent,
        UnknownIntent,
    ],
    Field(discriminator="intent"),
]

_INTENT_ADAPTER: TypeAdapter[Any] = TypeAdapter(VoiceIntent)


def parse_intent(payload: Any) -> VoiceIntent:
    """Build an intent from the classifier's ``{"intent": ..., "data": {...}}`` reply.

    Anything that does not fit one of the variants becomes :class:`UnknownIntent`.
    """
    if not isinstance(payload, dict):
        return UnknownIntent()

    data = payload.get("data")
    if not isinstance(data, dict):
        data = {}

    try:
        return _INTENT_ADAPTER.validate_python({**data, "intent": payload.get("intent")})
    except ValidationError as validation_error:
        logger.warning("Unrecognized voice command payload: %s", validation_error)
        return UnknownIntent()
