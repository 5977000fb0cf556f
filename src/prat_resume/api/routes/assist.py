"""AI assist routes: summary, experience rewrite and skill suggestions.

Requests for different sections may run at the same time; a second request
for a section that is still waiting on the AI is refused with 409.  Results
are merged into whatever the document looks like when they arrive, so edits
made meanwhile are kept.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from prat_resume.api.dependencies import get_assistant, get_busy_tracker, get_store
from prat_resume.api.schemas.document import SkillSuggestionResponse
from prat_resume.models.document import ResumeDocument
from prat_resume.services.ai_assist import AIAssistant
from prat_resume.services.busy import BusyTracker, SectionBusyError, experience_key
from prat_resume.services.editor import (
    EntryNotFoundError,
    apply_enhanced_description,
    apply_summary,
    merge_suggested_skills,
)
from prat_resume.store import ResumeStore

router = APIRouter(prefix="/assist", tags=["assist"])

StoreDep = Annotated[ResumeStore, Depends(get_store)]
BusyDep = Annotated[BusyTracker, Depends(get_busy_tracker)]
AssistantDep = Annotated[AIAssistant, Depends(get_assistant)]


def _busy_conflict(exc: SectionBusyError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=f"An AI request for {exc.key} is already in progress",
    )


@router.post("/summary", response_model=ResumeDocument)
async def generate_summary(
    store: StoreDep, busy: BusyDep, assistant: AssistantDep
) -> ResumeDocument:
    """Generate a professional summary and store it in personal info.

    The existing summary is kept when generation fails.
    """
    try:
        summary = await busy.run("summary", lambda: assistant.generate_summary(store.document))
    except SectionBusyError as exc:
        raise _busy_conflict(exc) from exc

    if not summary:
        return store.document
    return store.update(lambda doc: apply_summary(doc, summary))


@router.post("/experience/{index}/enhance", response_model=ResumeDocument)
async def enhance_experience(
    index: Annotated[int, Path(ge=0)],
    store: StoreDep,
    busy: BusyDep,
    assistant: AssistantDep,
) -> ResumeDocument:
    """Rewrite the description of the experience entry at *index*."""
    document = store.document
    if index >= len(document.experience):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No experience entry at index {index}",
        )
    entry = document.experience[index]

    try:
        improved = await busy.run(
            experience_key(entry.id), lambda: assistant.enhance_description(entry.description)
        )
    except SectionBusyError as exc:
        raise _busy_conflict(exc) from exc

    if improved == entry.description:
        return store.document
    try:
        return store.update(lambda doc: apply_enhanced_description(doc, entry.id, improved))
    except EntryNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("/skills", response_model=SkillSuggestionResponse)
async def suggest_skills(
    store: StoreDep, busy: BusyDep, assistant: AssistantDep
) -> SkillSuggestionResponse:
    """Suggest skills for the current job title and append the new ones."""
    job_title = store.document.personal_info.job_title
    try:
        suggested = await busy.run("skills", lambda: assistant.suggest_skills(job_title))
    except SectionBusyError as exc:
        raise _busy_conflict(exc) from exc

    document = store.update(lambda doc: merge_suggested_skills(doc, suggested))
    return SkillSuggestionResponse(suggested=suggested, document=document)
