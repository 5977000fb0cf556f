"""Voice command route.

Speech capture runs in the browser; once the silence timer ends a session
the front end posts the final transcript here.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from prat_resume.api.dependencies import get_assistant, get_busy_tracker, get_store
from prat_resume.api.schemas.document import TranscriptRequest, VoiceCommandResponse
from prat_resume.services.ai_assist import AIAssistant
from prat_resume.services.busy import BusyTracker, SectionBusyError
from prat_resume.services.editor import DocumentEditError
from prat_resume.store import ResumeStore
from prat_resume.voice.commands import process_transcript
from prat_resume.voice.intents import UnknownIntent

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/voice", tags=["voice"])


@router.post("/command", response_model=VoiceCommandResponse)
async def run_voice_command(
    data: TranscriptRequest,
    store: Annotated[ResumeStore, Depends(get_store)],
    busy: Annotated[BusyTracker, Depends(get_busy_tracker)],
    assistant: Annotated[AIAssistant, Depends(get_assistant)],
) -> VoiceCommandResponse:
    """Classify a transcript and apply the command it names.

    Empty transcripts and commands that are not understood leave the document
    unchanged and report ``applied: false``.
    """
    try:
        intent = await busy.run(
            "voice", lambda: process_transcript(store, assistant, data.transcript)
        )
    except SectionBusyError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A voice command is already being processed",
        ) from exc
    except DocumentEditError:
        logger.exception("Failed to apply voice command %r", data.transcript)
        intent = UnknownIntent()

    return VoiceCommandResponse(
        intent=intent.intent,
        applied=not isinstance(intent, UnknownIntent),
        document=store.document,
    )
