"""Route handlers for the API."""

from prat_resume.api.routes import assist, document, health, preview, voice

__all__ = [
    "assist",
    "document",
    "health",
    "preview",
    "voice",
]
