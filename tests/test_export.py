"""Tests for PDF export."""

from __future__ import annotations

from pathlib import Path

import pytest

from prat_resume.models import demo_document, empty_document
from prat_resume.services.editor import add_experience, toggle_density, update_personal_info
from prat_resume.services.export import export_filename, export_pdf, export_to_file


@pytest.mark.parametrize(
    ("full_name", "expected"),
    [
        ("Pratima Singh", "Pratima_Singh.pdf"),
        ("Jean-Luc O'Neil", "Jean_Luc_O_Neil.pdf"),
        ("", "Resume.pdf"),
    ],
)
def test_export_filename(full_name: str, expected: str) -> None:
    document = update_personal_info(empty_document(), "full_name", full_name)
    assert export_filename(document) == expected


def test_export_pdf_returns_pdf_bytes() -> None:
    data = export_pdf(demo_document())

    assert data.startswith(b"%PDF")
    assert b"/MediaBox" in data


def test_export_pdf_handles_empty_and_compact_documents() -> None:
    assert export_pdf(empty_document()).startswith(b"%PDF")
    assert export_pdf(toggle_density(demo_document())).startswith(b"%PDF")


def test_export_pdf_survives_non_latin_text() -> None:
    document = update_personal_info(empty_document(), "full_name", "Zoë 王")
    document = add_experience(document, job_title="Dev", description="• Built “things” – fast…")

    assert export_pdf(document).startswith(b"%PDF")


def test_long_resume_spills_onto_more_pages() -> None:
    document = demo_document()
    for i in range(15):
        document = add_experience(
            document,
            company=f"Company {i}",
            job_title="Engineer",
            description="\n".join(f"- Achievement {n}" for n in range(6)),
        )

    short = export_pdf(demo_document())
    long = export_pdf(document)

    assert long.count(b"/Type /Page") > short.count(b"/Type /Page")


def test_export_to_file(tmp_path: Path) -> None:
    path = export_to_file(demo_document(), tmp_path)

    assert path == tmp_path / "Pratima_Singh.pdf"
    assert path.read_bytes().startswith(b"%PDF")
