"""Preview and export routes."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Response

from prat_resume.api.dependencies import get_store
from prat_resume.constants import DEFAULT_ZOOM
from prat_resume.rendering import render
from prat_resume.services.export import export_filename, export_pdf
from prat_resume.store import ResumeStore

router = APIRouter(tags=["preview"])

StoreDep = Annotated[ResumeStore, Depends(get_store)]


@router.get("/preview")
def get_preview(
    store: StoreDep,
    zoom: Annotated[float, Query(description="Display zoom, clamped")] = DEFAULT_ZOOM,
    print_mode: Annotated[bool, Query(alias="print")] = False,
) -> dict[str, Any]:
    """Return the visual tree of the current document.

    In print mode the zoom is ignored and the page is rendered at full scale.
    """
    return render(store.document, zoom=zoom, for_print=print_mode).to_dict()


@router.get("/export", response_class=Response)
def export_document(store: StoreDep) -> Response:
    """Export the current document as a single A4 PDF download."""
    document = store.document
    return Response(
        content=export_pdf(document),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(document)}"'},
    )
