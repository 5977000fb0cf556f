"""Preview renderer: project a resume document onto an A4 visual tree.

``render`` is pure and deterministic.  Two targets share it:

* the interactive preview, scaled by the clamped zoom factor, and
* the print target used for export, which is never scaled so automatic
  page-break calculation stays correct.

Layout: a header with name, title and contact line; a primary column with
Profile, Experience and Education; a secondary column with Skills; a footer
bar in the theme color.  Empty sections are omitted.
"""

from __future__ import annotations

from prat_resume.constants.layout_tokens import (
    DENSITY_TOKENS,
    FOOTER_BAR_HEIGHT_MM,
    NAME_PLACEHOLDER,
    PAGE_HEIGHT_MM,
    PAGE_WIDTH_MM,
    SIDE_COLUMN_RATIO,
    TEXT_COLOR,
    TITLE_PLACEHOLDER,
    ZOOM_MAX,
    ZOOM_MIN,
    DensityTokens,
)
from prat_resume.models.document import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeDocument,
    SkillEntry,
)
from prat_resume.rendering.tree import Node, VisualTree

__all__ = ["clamp_zoom", "date_range", "render", "safe_link"]


def clamp_zoom(zoom: float) -> float:
    """Clamp *zoom* to the supported range, rounded to two decimals."""
    return round(min(ZOOM_MAX, max(ZOOM_MIN, zoom)), 2)


def safe_link(link: str) -> str:
    """Return a hyperlink target for *link*, assuming https when no scheme is given."""
    if link.startswith(("http://", "https://")):
        return link
    return f"https://{link}"


def date_range(start: str, end: str) -> str:
    # Dates are opaque display strings ("06/2021", "Present", ...).
    return f"{start} - {end}"


# -----------------------------------------------------------------------
# Header


def _header(info: PersonalInfo, tokens: DensityTokens, theme_color: str) -> Node:
    contacts: list[Node] = []
    contact_style = {"font_pt": tokens["contact_font_pt"]}
    if info.email:
        contacts.append(
            Node("contact", text=info.email, key="email", href=f"mailto:{info.email}",
                 style=contact_style)
        )
    if info.phone:
        contacts.append(Node("contact", text=info.phone, key="phone", style=contact_style))
    if info.city:
        contacts.append(Node("contact", text=info.city, key="city", style=contact_style))
    if info.link:
        contacts.append(
            Node("contact", text=info.link, key="link", href=safe_link(info.link),
                 style=contact_style)
        )

    return Node(
        "header",
        style={
            "padding_mm": tokens["header_padding_mm"],
            "padding_bottom_mm": tokens["header_padding_bottom_mm"],
        },
        children=(
            Node(
                "name",
                text=info.full_name or NAME_PLACEHOLDER,
                style={"font_pt": tokens["name_font_pt"], "color": theme_color,
                       "uppercase": True, "bold": True},
            ),
            Node("title", text=info.job_title or TITLE_PLACEHOLDER,
                 style={"font_pt": tokens["title_font_pt"]}),
            Node("contacts", children=tuple(contacts)),
        ),
    )


# -----------------------------------------------------------------------
# Sections


def _section(
    key: str, heading: str, body: tuple[Node, ...], tokens: DensityTokens, theme_color: str
) -> Node:
    return Node(
        "section",
        key=key,
        style={"break_inside": "avoid", "margin_bottom_mm": tokens["section_gap_mm"]},
        children=(
            Node(
                "section_heading",
                text=heading,
                style={
                    "font_pt": tokens["section_font_pt"],
                    "color": theme_color,
                    "uppercase": True,
                    "bold": True,
                    "margin_bottom_mm": tokens["heading_margin_mm"],
                },
            ),
            *body,
        ),
    )


def _profile(summary: str, tokens: DensityTokens, theme_color: str) -> Node:
    paragraph = Node(
        "paragraph",
        text=summary,
        style={"font_pt": tokens["body_font_pt"], "line_height": tokens["line_height"],
               "white_space": "pre-line"},
    )
    return _section("profile", "Profile", (paragraph,), tokens, theme_color)


def _experience_entry(entry: ExperienceEntry, tokens: DensityTokens) -> Node:
    meta = {"font_pt": tokens["meta_font_pt"]}
    return Node(
        "entry",
        key=entry.id,
        style={"break_inside": "avoid", "margin_bottom_mm": tokens["entry_gap_mm"]},
        children=(
            Node("entry_heading", text=entry.job_title,
                 style={"font_pt": tokens["entry_heading_font_pt"], "bold": True}),
            Node("date_range", text=date_range(entry.start_date, entry.end_date), style=meta),
            Node("subheading", text=entry.company,
                 style={"font_pt": tokens["body_font_pt"], "bold": True}),
            Node("location", text=entry.city, style=meta),
            Node(
                "description",
                text=entry.description,
                style={"font_pt": tokens["body_font_pt"], "line_height": tokens["line_height"],
                       "white_space": "pre-line", "indent_mm": 3.0},
            ),
        ),
    )


def _education_entry(entry: EducationEntry, tokens: DensityTokens) -> Node:
    meta = {"font_pt": tokens["meta_font_pt"]}
    children = [
        Node("entry_heading", text=entry.school,
             style={"font_pt": tokens["entry_heading_font_pt"], "bold": True}),
        Node("date_range", text=date_range(entry.start_date, entry.end_date), style=meta),
        Node("subheading", text=entry.degree, style={"font_pt": tokens["body_font_pt"]}),
    ]
    if entry.grade:
        children.append(Node("grade", text=f"Grade: {entry.grade}", style=meta))
    children.append(Node("location", text=entry.city, style=meta))
    return Node(
        "entry",
        key=entry.id,
        style={"break_inside": "avoid", "margin_bottom_mm": tokens["entry_gap_mm"]},
        children=tuple(children),
    )


def _skill_chip(skill: SkillEntry, tokens: DensityTokens) -> Node:
    return Node("skill", text=skill.name, key=skill.id, style={"font_pt": tokens["meta_font_pt"]})


# -----------------------------------------------------------------------
# Public API


def render(document: ResumeDocument, zoom: float = 1.0, for_print: bool = False) -> VisualTree:
    """Render *document* to a visual tree.

    Args:
        document: The resume to render.
        zoom: On-screen zoom factor, clamped to the supported range.
            Ignored for the print target.
        for_print: Render the unscaled, pagination-safe export target.

    Returns:
        The rendered tree.  Its ``content`` is the same for every *zoom*.
    """
    tokens = DENSITY_TOKENS[document.layout_density]
    theme_color = document.theme_color
    info = document.personal_info

    primary: list[Node] = []
    if info.summary:
        primary.append(_profile(info.summary, tokens, theme_color))
    if document.experience:
        entries = tuple(_experience_entry(entry, tokens) for entry in document.experience)
        primary.append(_section("experience", "Experience", entries, tokens, theme_color))
    if document.education:
        entries = tuple(_education_entry(entry, tokens) for entry in document.education)
        primary.append(_section("education", "Education", entries, tokens, theme_color))

    secondary: list[Node] = []
    if document.skills:
        chips = Node("skill_list", children=tuple(_skill_chip(s, tokens) for s in document.skills))
        secondary.append(_section("skills", "Skills", (chips,), tokens, theme_color))

    body = Node(
        "body",
        style={"padding_mm": tokens["body_padding_mm"], "column_gap_mm": tokens["column_gap_mm"]},
        children=(
            Node("column", key="primary", style={"flex": 1}, children=tuple(primary)),
            Node("column", key="secondary", style={"width_ratio": SIDE_COLUMN_RATIO},
                 children=tuple(secondary)),
        ),
    )

    page = Node(
        "page",
        style={
            "width_mm": PAGE_WIDTH_MM,
            "min_height_mm": PAGE_HEIGHT_MM,
            "color": TEXT_COLOR,
            "density": document.layout_density,
        },
        children=(
            _header(info, tokens, theme_color),
            body,
            Node("footer_bar", style={"background": theme_color,
                                      "height_mm": FOOTER_BAR_HEIGHT_MM}),
        ),
    )

    scale = 1.0 if for_print else clamp_zoom(zoom)
    return VisualTree(content=page, scale=scale, for_print=for_print)
