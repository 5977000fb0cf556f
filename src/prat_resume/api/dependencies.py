"""Shared dependencies for API routes.

The store, the busy tracker and the AI assistant are created once per
application in ``lifespan`` and kept on ``app.state``.  Tests override these
dependencies to get isolated instances.
"""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from prat_resume.services.ai_assist import AIAssistant, ai_available
from prat_resume.services.busy import BusyTracker
from prat_resume.store import ResumeStore


def get_store(request: Request) -> ResumeStore:
    """Return the application's document store."""
    return request.app.state.store


def get_busy_tracker(request: Request) -> BusyTracker:
    """Return the application's per-section busy tracker."""
    return request.app.state.busy


def get_assistant(request: Request) -> AIAssistant:
    """Return the AI assistant.

    Raises:
        HTTPException: 503 if no AI credential is configured, so the feature
            is disabled rather than failing at invocation time.
    """
    if not ai_available():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="AI features are not configured. Set GEMINI_API_KEY to enable them.",
        )
    return request.app.state.assistant
