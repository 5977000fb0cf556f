"""Preview rendering for resume documents."""

from __future__ import annotations

from prat_resume.rendering.preview import clamp_zoom, render, safe_link
from prat_resume.rendering.tree import Node, VisualTree

__all__ = [
    "Node",
    "VisualTree",
    "clamp_zoom",
    "render",
    "safe_link",
]
