"""Constants package for PratResume."""

from prat_resume.constants.layout_tokens import (
    DEFAULT_THEME_COLOR,
    DEFAULT_ZOOM,
    DENSITY_TOKENS,
    THEME_PALETTE,
    ZOOM_MAX,
    ZOOM_MIN,
    ZOOM_STEP,
)

# Fixed key the resume snapshot is persisted under.
STORAGE_KEY = "pratResumeData"

__all__ = [
    "DEFAULT_THEME_COLOR",
    "DEFAULT_ZOOM",
    "DENSITY_TOKENS",
    "STORAGE_KEY",
    "THEME_PALETTE",
    "ZOOM_MAX",
    "ZOOM_MIN",
    "ZOOM_STEP",
]
