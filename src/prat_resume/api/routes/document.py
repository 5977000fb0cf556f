"""Document editing routes: every manual edit the editor offers.

Each route computes the next document from the current one and hands it to
the store, then returns the whole new document.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Path, status

from prat_resume.api.dependencies import get_store
from prat_resume.api.schemas.document import (
    ConfirmRequest,
    ConfirmResponse,
    EducationCreateRequest,
    ExperienceCreateRequest,
    FieldUpdateRequest,
    SkillCreateRequest,
    ThemeRequest,
)
from prat_resume.models.document import ResumeDocument
from prat_resume.services.editor import (
    DocumentEditError,
    EntryNotFoundError,
    add_entry,
    remove_entry,
    set_theme_color,
    toggle_density,
    update_entry,
    update_personal_info,
)
from prat_resume.store import ResumeStore

router = APIRouter(prefix="/document", tags=["document"])

StoreDep = Annotated[ResumeStore, Depends(get_store)]
SectionPath = Annotated[
    Literal["experience", "education", "skills"], Path(description="Entry list")
]
IndexPath = Annotated[int, Path(description="Display position of the entry", ge=0)]


def _apply(store: ResumeStore, edit: Callable[[ResumeDocument], ResumeDocument]) -> ResumeDocument:
    """Run *edit* through the store, mapping edit errors to HTTP errors.

    Raises:
        HTTPException: 404 if the entry does not exist, 422 for an unknown
            field or invalid value.
    """
    try:
        return store.update(edit)
    except EntryNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except DocumentEditError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc


@router.get("", response_model=ResumeDocument)
def get_document(store: StoreDep) -> ResumeDocument:
    """Return the current document."""
    return store.document


@router.put("", response_model=ResumeDocument)
def replace_document(document: ResumeDocument, store: StoreDep) -> ResumeDocument:
    """Replace the whole document (e.g. an import)."""
    store.replace(document)
    return store.document


@router.patch("/personal", response_model=ResumeDocument)
def update_personal(data: FieldUpdateRequest, store: StoreDep) -> ResumeDocument:
    """Replace one personal-info field."""
    return _apply(store, lambda doc: update_personal_info(doc, data.field, data.value))


@router.post(
    "/experience", response_model=ResumeDocument, status_code=status.HTTP_201_CREATED
)
def add_experience_entry(data: ExperienceCreateRequest, store: StoreDep) -> ResumeDocument:
    """Append an experience entry."""
    return _apply(store, lambda doc: add_entry(doc, "experience", **data.model_dump()))


@router.post(
    "/education", response_model=ResumeDocument, status_code=status.HTTP_201_CREATED
)
def add_education_entry(data: EducationCreateRequest, store: StoreDep) -> ResumeDocument:
    """Append an education entry."""
    return _apply(store, lambda doc: add_entry(doc, "education", **data.model_dump()))


@router.post("/skills", response_model=ResumeDocument, status_code=status.HTTP_201_CREATED)
def add_skill_entry(data: SkillCreateRequest, store: StoreDep) -> ResumeDocument:
    """Append a skill."""
    return _apply(store, lambda doc: add_entry(doc, "skills", **data.model_dump()))


@router.patch("/{section}/{index}", response_model=ResumeDocument)
def update_list_entry(
    section: SectionPath,
    index: IndexPath,
    data: FieldUpdateRequest,
    store: StoreDep,
) -> ResumeDocument:
    """Replace one field of the entry at *index*."""
    return _apply(store, lambda doc: update_entry(doc, section, index, data.field, data.value))


@router.delete("/{section}/{index}", response_model=ResumeDocument)
def remove_list_entry(section: SectionPath, index: IndexPath, store: StoreDep) -> ResumeDocument:
    """Remove the entry at *index*; the other entries keep their ids."""
    return _apply(store, lambda doc: remove_entry(doc, section, index))


@router.put("/theme", response_model=ResumeDocument)
def change_theme(data: ThemeRequest, store: StoreDep) -> ResumeDocument:
    """Switch to another palette color."""
    return _apply(store, lambda doc: set_theme_color(doc, data.color))


@router.post("/density/toggle", response_model=ResumeDocument)
def toggle_layout_density(store: StoreDep) -> ResumeDocument:
    """Flip between compact and comfortable layout."""
    return _apply(store, toggle_density)


@router.post("/reset", response_model=ConfirmResponse)
def reset_document(data: ConfirmRequest, store: StoreDep) -> ConfirmResponse:
    """Clear all data and the saved snapshot.  Requires ``confirm: true``."""
    applied = store.reset(confirmed=data.confirm)
    return ConfirmResponse(applied=applied, document=store.document)


@router.post("/demo", response_model=ConfirmResponse)
def load_demo_document(data: ConfirmRequest, store: StoreDep) -> ConfirmResponse:
    """Overwrite the document with the demo resume.  Requires ``confirm: true``."""
    applied = store.load_demo(confirmed=data.confirm)
    return ConfirmResponse(applied=applied, document=store.document)
