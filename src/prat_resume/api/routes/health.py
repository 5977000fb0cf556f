"""Health check and capability routes."""

from __future__ import annotations

from fastapi import APIRouter

from prat_resume.api.schemas.document import CapabilitiesResponse
from prat_resume.constants import (
    DEFAULT_ZOOM,
    THEME_PALETTE,
    ZOOM_MAX,
    ZOOM_MIN,
    ZOOM_STEP,
)
from prat_resume.services.ai_assist import ai_available

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Return the current status of the API."""
    return {"status": "healthy"}


@router.get("/api/capabilities", response_model=CapabilitiesResponse)
def capabilities() -> CapabilitiesResponse:
    """Report which optional features the front end should show.

    Speech capture happens in the front end, so ``voice`` only says whether
    transcripts can be turned into edits.
    """
    ai = ai_available()
    return CapabilitiesResponse(
        ai=ai,
        voice=ai,
        theme_palette=list(THEME_PALETTE),
        zoom_min=ZOOM_MIN,
        zoom_max=ZOOM_MAX,
        zoom_step=ZOOM_STEP,
        default_zoom=DEFAULT_ZOOM,
    )
