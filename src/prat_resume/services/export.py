"""PDF export of the print-target preview.

The exporter always renders the unscaled print target, then paints the
visual tree onto A4 pages with zero page margin.  Column padding comes from
the density tokens carried in the tree.
"""

from __future__ import annotations

import re
from pathlib import Path

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from prat_resume.constants.layout_tokens import (
    DENSITY_TOKENS,
    FOOTER_BAR_HEIGHT_MM,
    PAGE_HEIGHT_MM,
    PAGE_WIDTH_MM,
    SIDE_COLUMN_RATIO,
    TEXT_COLOR,
)
from prat_resume.models.document import ResumeDocument
from prat_resume.rendering.preview import render
from prat_resume.rendering.tree import Node

__all__ = ["export_filename", "export_pdf", "export_to_file"]

_PT_TO_MM = 0.3528
_FONT = "Helvetica"
_MUTED = "#64748b"
_CHIP_FILL = "#f1f5f9"
_RULE = "#e5e7eb"

# Core PDF fonts are latin-1 only.
_TYPOGRAPHIC = str.maketrans(
    {
        "•": "-",
        "–": "-",
        "—": "-",
        "‘": "'",
        "’": "'",
        "“": '"',
        "”": '"',
        "…": "...",
        " ": " ",
    }
)


def export_filename(document: ResumeDocument) -> str:
    """Return the download name, e.g. ``Pratima_Singh.pdf``.

    Every non-alphanumeric character of the full name becomes ``_``; an
    empty name falls back to ``Resume``.
    """
    base = re.sub(r"[^a-z0-9]", "_", document.personal_info.full_name, flags=re.IGNORECASE)
    return f"{base or 'Resume'}.pdf"


def _clean_text(text: str) -> str:
    text = text.translate(_TYPOGRAPHIC)
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError:
        return _rgb(TEXT_COLOR)


def _line_height(node: Node, default_pt: float, line_height: float = 1.3) -> float:
    font_pt = float(node.style.get("font_pt", default_pt))
    return font_pt * _PT_TO_MM * float(node.style.get("line_height", line_height))


def _set_font(pdf: FPDF, node: Node, default_pt: float) -> None:
    style = "B" if node.style.get("bold") else ""
    pdf.set_font(_FONT, style, float(node.style.get("font_pt", default_pt)))


class _PdfPainter:
    """Paints one visual tree onto an ``FPDF`` document."""

    def __init__(self, document: ResumeDocument) -> None:
        self.tree = render(document, for_print=True)
        self.tokens = DENSITY_TOKENS[document.layout_density]
        self.theme = _rgb(document.theme_color)
        self.pdf = FPDF(orientation="portrait", unit="mm", format="A4")
        self.pdf.set_margins(0, 0, 0)
        self.pdf.set_auto_page_break(
            auto=True, margin=self.tokens["body_padding_mm"] + FOOTER_BAR_HEIGHT_MM
        )

    def paint(self) -> bytes:
        pdf = self.pdf
        pdf.add_page()
        content = self.tree.content

        header = content.child("header")
        if header is not None:
            self._header(header)

        body = content.child("body")
        if body is not None:
            self._body(body)

        self._footer_bars()
        return bytes(pdf.output())

    # ------------------------------------------------------------------

    def _use_column(self, x: float, width: float) -> None:
        self.pdf.set_left_margin(x)
        self.pdf.set_right_margin(PAGE_WIDTH_MM - x - width)
        self.pdf.set_x(x)

    def _header(self, header: Node) -> None:
        pdf = self.pdf
        pad = float(header.style["padding_mm"])
        self._use_column(pad, PAGE_WIDTH_MM - 2 * pad)
        pdf.set_y(pad)

        name = header.child("name")
        if name is not None:
            _set_font(pdf, name, 27)
            pdf.set_text_color(*self.theme)
            pdf.multi_cell(0, _line_height(name, 27, 1.2), _clean_text(name.text.upper()),
                           new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        title = header.child("title")
        if title is not None:
            _set_font(pdf, title, 15)
            pdf.set_text_color(*_rgb(_MUTED))
            pdf.multi_cell(0, _line_height(title, 15), _clean_text(title.text),
                           new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        contacts = header.child("contacts")
        if contacts is not None and contacts.children:
            pdf.ln(2)
            self._inline_items(contacts.children, gap=5.0, chip=False)

        pdf.ln(float(header.style["padding_bottom_mm"]))
        pdf.set_draw_color(*_rgb(_RULE))
        pdf.set_line_width(0.5)
        pdf.line(0, pdf.get_y(), PAGE_WIDTH_MM, pdf.get_y())

    def _body(self, body: Node) -> None:
        pdf = self.pdf
        pad = float(body.style["padding_mm"])
        gap = float(body.style["column_gap_mm"])
        usable = PAGE_WIDTH_MM - 2 * pad - gap
        side_width = usable * SIDE_COLUMN_RATIO
        main_width = usable - side_width

        top = pdf.get_y() + pad * 0.6
        first_page = pdf.page

        primary = body.find("column", key="primary")
        self._use_column(pad, main_width)
        pdf.set_y(top)
        if primary is not None:
            self._column(primary)
        last_page, last_y = pdf.page, pdf.get_y()

        secondary = body.find("column", key="secondary")
        if secondary is not None and secondary.children:
            pdf.page = first_page
            self._use_column(pad + main_width + gap, side_width)
            pdf.set_y(top)
            self._column(secondary)
            if pdf.page < last_page:
                pdf.page = last_page
                pdf.set_y(last_y)

    def _column(self, column: Node) -> None:
        for section in column.children:
            self._section(section)

    def _section(self, section: Node) -> None:
        pdf = self.pdf
        heading = section.child("section_heading")
        if heading is not None:
            _set_font(pdf, heading, 9)
            pdf.set_text_color(*self.theme)
            pdf.cell(0, _line_height(heading, 9), _clean_text(heading.text.upper()),
                     new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            pdf.set_draw_color(*_rgb(_RULE))
            pdf.set_line_width(0.2)
            pdf.line(pdf.l_margin, pdf.get_y(), PAGE_WIDTH_MM - pdf.r_margin, pdf.get_y())
            pdf.ln(float(heading.style.get("margin_bottom_mm", 3.0)))

        for node in section.children:
            if node.kind == "paragraph":
                self._text_block(node, indent=0.0)
            elif node.kind == "entry":
                self._entry(node)
            elif node.kind == "skill_list":
                self._inline_items(node.children, gap=2.0, chip=True)
                pdf.ln(2)

        pdf.ln(float(section.style.get("margin_bottom_mm", 5.0)))

    def _entry(self, entry: Node) -> None:
        pdf = self.pdf
        heading = entry.child("entry_heading")
        dates = entry.child("date_range")
        if heading is not None:
            self._split_line(heading, dates)

        sub = entry.child("subheading")
        location = entry.child("location")
        if sub is not None:
            self._split_line(sub, location)
        elif location is not None and location.text:
            self._text_block(location, indent=0.0, color=_MUTED)

        grade = entry.child("grade")
        if grade is not None:
            self._text_block(grade, indent=0.0, color=_MUTED)

        description = entry.child("description")
        if description is not None and description.text:
            pdf.ln(1)
            self._text_block(description, indent=float(description.style.get("indent_mm", 3.0)))

        pdf.ln(float(entry.style.get("margin_bottom_mm", 4.0)))

    def _split_line(self, left: Node, right: Node | None) -> None:
        """Left text with an optional right-aligned muted text on the same line."""
        pdf = self.pdf
        width = PAGE_WIDTH_MM - pdf.l_margin - pdf.r_margin
        height = _line_height(left, 10.5)

        right_width = 0.0
        if right is not None and right.text.strip():
            _set_font(pdf, right, 9)
            right_width = pdf.get_string_width(_clean_text(right.text)) + 1

        _set_font(pdf, left, 10.5)
        pdf.set_text_color(*_rgb("#111827"))
        pdf.cell(width - right_width, height, _clean_text(left.text))
        if right_width:
            _set_font(pdf, right, 9)
            pdf.set_text_color(*_rgb(_MUTED))
            pdf.cell(right_width, height, _clean_text(right.text), align="R")
        pdf.ln(height)

    def _text_block(self, node: Node, indent: float, color: str = TEXT_COLOR) -> None:
        pdf = self.pdf
        _set_font(pdf, node, 10.5)
        pdf.set_text_color(*_rgb(color))
        left = pdf.l_margin
        pdf.set_left_margin(left + indent)
        pdf.set_x(left + indent)
        pdf.multi_cell(0, _line_height(node, 10.5), _clean_text(node.text),
                       new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_left_margin(left)
        pdf.set_x(left)

    def _inline_items(self, items: tuple[Node, ...], gap: float, chip: bool) -> None:
        """Lay out short items left to right, wrapping at the column edge."""
        pdf = self.pdf
        right_edge = PAGE_WIDTH_MM - pdf.r_margin
        for item in items:
            _set_font(pdf, item, 9)
            text = _clean_text(item.text)
            height = _line_height(item, 9, 1.6)
            width = pdf.get_string_width(text) + (4 if chip else 0)
            if pdf.get_x() + width > right_edge and pdf.get_x() > pdf.l_margin:
                pdf.ln(height + (1 if chip else 0))
            if chip:
                pdf.set_fill_color(*_rgb(_CHIP_FILL))
                pdf.set_draw_color(*_rgb(_RULE))
                pdf.set_text_color(*_rgb(TEXT_COLOR))
                pdf.cell(width, height, text, border=1, fill=True, align="C")
            else:
                pdf.set_text_color(*_rgb(_MUTED))
                pdf.cell(width, height, text, link=item.href or "")
            pdf.set_x(pdf.get_x() + gap)
        pdf.ln(_line_height(items[-1], 9, 1.6) if items else 0)

    def _footer_bars(self) -> None:
        pdf = self.pdf
        pdf.set_auto_page_break(auto=False)
        pdf.set_fill_color(*self.theme)
        for page in range(1, pdf.pages_count + 1):
            pdf.page = page
            pdf.rect(0, PAGE_HEIGHT_MM - FOOTER_BAR_HEIGHT_MM, PAGE_WIDTH_MM,
                     FOOTER_BAR_HEIGHT_MM, style="F")


def export_pdf(document: ResumeDocument) -> bytes:
    """Render *document*'s print target into A4 PDF bytes."""
    return _PdfPainter(document).paint()


def export_to_file(document: ResumeDocument, directory: Path) -> Path:
    """Write the PDF into *directory* under :func:`export_filename`.

    Returns:
        Path to the created file
    """
    output_path = Path(directory) / export_filename(document)
    output_path.write_bytes(export_pdf(document))
    return output_path
