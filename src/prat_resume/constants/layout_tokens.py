"""Presentation constants for the resume preview and PDF export.

All spacing and sizing used by the renderer comes from ``DENSITY_TOKENS``;
the renderer never computes sizes ad hoc.  Lengths are millimetres, font
sizes are points.
"""

from __future__ import annotations

from typing import Final, TypedDict

__all__ = [
    "DEFAULT_DENSITY",
    "DEFAULT_THEME_COLOR",
    "DEFAULT_ZOOM",
    "DENSITY_TOKENS",
    "DensityTokens",
    "FOOTER_BAR_HEIGHT_MM",
    "NAME_PLACEHOLDER",
    "PAGE_HEIGHT_MM",
    "PAGE_WIDTH_MM",
    "SIDE_COLUMN_RATIO",
    "TEXT_COLOR",
    "THEME_PALETTE",
    "TITLE_PLACEHOLDER",
    "ZOOM_MAX",
    "ZOOM_MIN",
    "ZOOM_STEP",
]


class DensityTokens(TypedDict):
    """Spacing and font sizes for one layout density profile."""

    header_padding_mm: float
    header_padding_bottom_mm: float
    body_padding_mm: float
    section_gap_mm: float
    entry_gap_mm: float
    column_gap_mm: float
    heading_margin_mm: float
    name_font_pt: float
    title_font_pt: float
    contact_font_pt: float
    section_font_pt: float
    entry_heading_font_pt: float
    body_font_pt: float
    meta_font_pt: float
    line_height: float


DENSITY_TOKENS: Final[dict[str, DensityTokens]] = {
    "comfortable": {
        "header_padding_mm": 10.0,
        "header_padding_bottom_mm": 6.0,
        "body_padding_mm": 10.0,
        "section_gap_mm": 6.0,
        "entry_gap_mm": 5.0,
        "column_gap_mm": 8.0,
        "heading_margin_mm": 4.0,
        "name_font_pt": 27.0,
        "title_font_pt": 15.0,
        "contact_font_pt": 10.5,
        "section_font_pt": 9.0,
        "entry_heading_font_pt": 12.0,
        "body_font_pt": 10.5,
        "meta_font_pt": 9.0,
        "line_height": 1.6,
    },
    "compact": {
        "header_padding_mm": 7.0,
        "header_padding_bottom_mm": 4.0,
        "body_padding_mm": 7.0,
        "section_gap_mm": 4.0,
        "entry_gap_mm": 3.0,
        "column_gap_mm": 6.0,
        "heading_margin_mm": 2.5,
        "name_font_pt": 22.0,
        "title_font_pt": 13.0,
        "contact_font_pt": 9.5,
        "section_font_pt": 8.0,
        "entry_heading_font_pt": 11.0,
        "body_font_pt": 9.5,
        "meta_font_pt": 8.0,
        "line_height": 1.35,
    },
}

DEFAULT_DENSITY: Final = "comfortable"

# A4 portrait
PAGE_WIDTH_MM: Final = 210.0
PAGE_HEIGHT_MM: Final = 297.0

SIDE_COLUMN_RATIO: Final = 1 / 3
FOOTER_BAR_HEIGHT_MM: Final = 2.0
TEXT_COLOR: Final = "#334155"

THEME_PALETTE: Final[tuple[str, ...]] = (
    "#2563eb",
    "#0f172a",
    "#dc2626",
    "#16a34a",
    "#9333ea",
    "#ea580c",
)
DEFAULT_THEME_COLOR: Final = THEME_PALETTE[0]

ZOOM_MIN: Final = 0.4
ZOOM_MAX: Final = 1.5
ZOOM_STEP: Final = 0.1
DEFAULT_ZOOM: Final = 0.8

NAME_PLACEHOLDER: Final = "Your Name"
TITLE_PLACEHOLDER: Final = "Professional Title"
