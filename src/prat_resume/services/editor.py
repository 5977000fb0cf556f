"""Section editors: compute the next document from the current one.

Every function here is pure.  It takes a :class:`ResumeDocument`, returns a
new one, and never mutates its input; the result is handed to
``ResumeStore.replace`` (usually through ``ResumeStore.update``).

Entries are addressed by id internally.  The index based helpers exist for
the UI boundary and translate the index to an id before doing anything.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, ValidationError

from prat_resume.constants.layout_tokens import THEME_PALETTE
from prat_resume.models.document import (
    DEFAULT_SKILL_LEVEL,
    EducationEntry,
    ExperienceEntry,
    ResumeDocument,
    SkillEntry,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DocumentEditError",
    "EntryNotFoundError",
    "ListSection",
    "add_education",
    "add_entry",
    "add_experience",
    "add_skill",
    "apply_enhanced_description",
    "apply_summary",
    "entry_id_at",
    "merge_suggested_skills",
    "remove_education",
    "remove_entry",
    "remove_entry_by_id",
    "remove_experience",
    "remove_skill",
    "set_density",
    "set_theme_color",
    "toggle_density",
    "update_education",
    "update_entry",
    "update_entry_by_id",
    "update_experience",
    "update_personal_info",
    "update_skill",
]

ListSection = Literal["experience", "education", "skills"]

_ENTRY_TYPES: dict[str, type[BaseModel]] = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
    "skills": SkillEntry,
}


class DocumentEditError(ValueError):
    """Raised when an edit names an unknown field or carries an invalid value."""


class EntryNotFoundError(DocumentEditError):
    """Raised when an index or id does not address an existing entry."""


# -----------------------------------------------------------------------
# Internal helpers


def _entry_type(section: str) -> type[BaseModel]:
    try:
        return _ENTRY_TYPES[section]
    except KeyError:
        available = ", ".join(sorted(_ENTRY_TYPES))
        raise DocumentEditError(f"Unknown section {section!r}. Available: {available}") from None


def _resolve_field(model_cls: type[BaseModel], field: str) -> str:
    """Map a python attribute name or its serialized alias to the attribute name."""
    for name, info in model_cls.model_fields.items():
        if field in (name, info.alias):
            if name == "id":
                raise DocumentEditError("Entry ids cannot be edited")
            return name
    raise DocumentEditError(f"{model_cls.__name__} has no field {field!r}")


def _with_field(record: BaseModel, field: str, value: Any) -> BaseModel:
    name = _resolve_field(type(record), field)
    data = record.model_dump()
    data[name] = value
    try:
        return type(record).model_validate(data)
    except ValidationError as exc:
        raise DocumentEditError(f"Invalid value for {name!r}: {value!r}") from exc


def _entries(document: ResumeDocument, section: str) -> tuple[Any, ...]:
    _entry_type(section)
    return getattr(document, section)


def _with_entries(
    document: ResumeDocument, section: str, entries: tuple[Any, ...]
) -> ResumeDocument:
    return document.model_copy(update={section: entries})


def _position_of(entries: tuple[Any, ...], entry_id: str) -> int:
    for position, entry in enumerate(entries):
        if entry.id == entry_id:
            return position
    raise EntryNotFoundError(f"No entry with id {entry_id!r}")


# -----------------------------------------------------------------------
# Generic list primitives


def entry_id_at(document: ResumeDocument, section: ListSection, index: int) -> str:
    """Return the id of the entry displayed at *index* in *section*."""
    entries = _entries(document, section)
    if index < 0 or index >= len(entries):
        raise EntryNotFoundError(f"No {section} entry at index {index}")
    return entries[index].id


def add_entry(document: ResumeDocument, section: ListSection, **values: Any) -> ResumeDocument:
    """Append a new entry with a fresh id; omitted fields take their defaults."""
    entry_cls = _entry_type(section)
    if "id" in values:
        raise DocumentEditError("Entry ids are generated, not supplied")
    try:
        entry = entry_cls(**values)
    except ValidationError as exc:
        raise DocumentEditError(f"Invalid {section} entry: {exc}") from exc
    return _with_entries(document, section, (*_entries(document, section), entry))


def update_entry_by_id(
    document: ResumeDocument,
    section: ListSection,
    entry_id: str,
    field: str,
    value: Any,
) -> ResumeDocument:
    """Replace one field of one entry; all other entries are kept as-is."""
    entries = _entries(document, section)
    position = _position_of(entries, entry_id)
    updated = _with_field(entries[position], field, value)
    return _with_entries(
        document, section, (*entries[:position], updated, *entries[position + 1 :])
    )


def update_entry(
    document: ResumeDocument,
    section: ListSection,
    index: int,
    field: str,
    value: Any,
) -> ResumeDocument:
    entry_id = entry_id_at(document, section, index)
    return update_entry_by_id(document, section, entry_id, field, value)


def remove_entry_by_id(
    document: ResumeDocument, section: ListSection, entry_id: str
) -> ResumeDocument:
    entries = _entries(document, section)
    position = _position_of(entries, entry_id)
    return _with_entries(document, section, (*entries[:position], *entries[position + 1 :]))


def remove_entry(document: ResumeDocument, section: ListSection, index: int) -> ResumeDocument:
    entry_id = entry_id_at(document, section, index)
    return remove_entry_by_id(document, section, entry_id)


# -----------------------------------------------------------------------
# Per-section editors


def update_personal_info(document: ResumeDocument, field: str, value: str) -> ResumeDocument:
    """Replace one personal-info field (``full_name``, ``jobTitle``, ...)."""
    personal_info = _with_field(document.personal_info, field, value)
    return document.model_copy(update={"personal_info": personal_info})


def add_experience(document: ResumeDocument, **values: Any) -> ResumeDocument:
    return add_entry(document, "experience", **values)


def update_experience(
    document: ResumeDocument, index: int, field: str, value: str
) -> ResumeDocument:
    return update_entry(document, "experience", index, field, value)


def remove_experience(document: ResumeDocument, index: int) -> ResumeDocument:
    return remove_entry(document, "experience", index)


def add_education(document: ResumeDocument, **values: Any) -> ResumeDocument:
    return add_entry(document, "education", **values)


def update_education(
    document: ResumeDocument, index: int, field: str, value: str
) -> ResumeDocument:
    return update_entry(document, "education", index, field, value)


def remove_education(document: ResumeDocument, index: int) -> ResumeDocument:
    return remove_entry(document, "education", index)


def add_skill(document: ResumeDocument, **values: Any) -> ResumeDocument:
    return add_entry(document, "skills", **values)


def update_skill(document: ResumeDocument, index: int, field: str, value: str) -> ResumeDocument:
    return update_entry(document, "skills", index, field, value)


def remove_skill(document: ResumeDocument, index: int) -> ResumeDocument:
    return remove_entry(document, "skills", index)


# -----------------------------------------------------------------------
# Presentation parameters


def set_theme_color(document: ResumeDocument, color: str) -> ResumeDocument:
    """Switch the accent color to one of the palette colors."""
    normalized = color.strip().lower()
    if normalized not in THEME_PALETTE:
        raise DocumentEditError(
            f"Unknown theme color {color!r}. Available: {', '.join(THEME_PALETTE)}"
        )
    return document.model_copy(update={"theme_color": normalized})


def set_density(document: ResumeDocument, density: str) -> ResumeDocument:
    if density not in ("compact", "comfortable"):
        raise DocumentEditError(f"Unknown layout density {density!r}")
    return document.model_copy(update={"layout_density": density})


def toggle_density(document: ResumeDocument) -> ResumeDocument:
    density = "comfortable" if document.layout_density == "compact" else "compact"
    return set_density(document, density)


# -----------------------------------------------------------------------
# Merging AI results


def apply_summary(document: ResumeDocument, summary: str) -> ResumeDocument:
    return update_personal_info(document, "summary", summary)


def apply_enhanced_description(
    document: ResumeDocument, entry_id: str, description: str
) -> ResumeDocument:
    """Write an enhanced description back to the experience entry it came from.

    The entry may have been removed while the rewrite was in flight; the
    document is then returned unchanged.
    """
    try:
        return update_entry_by_id(document, "experience", entry_id, "description", description)
    except EntryNotFoundError:
        logger.info("Experience entry %s was removed before its rewrite arrived", entry_id)
        return document


def merge_suggested_skills(document: ResumeDocument, names: Iterable[str]) -> ResumeDocument:
    """Append suggested skills that are not already present.

    Names are compared case-insensitively against existing skills and against
    earlier suggestions in the same batch.  New skills get the default level.
    """
    seen = {skill.name.strip().lower() for skill in document.skills}
    added: list[SkillEntry] = []
    for name in names:
        cleaned = name.strip()
        key = cleaned.lower()
        if not cleaned or key in seen:
            continue
        seen.add(key)
        added.append(SkillEntry(name=cleaned, level=DEFAULT_SKILL_LEVEL))
    if not added:
        return document
    return _with_entries(document, "skills", (*document.skills, *added))
