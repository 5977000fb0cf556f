"""FastAPI application entry point for the PratResume API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prat_resume.api.routes import assist, document, health, preview, voice

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from prat_resume.data.db import init_db
    from prat_resume.services.ai_assist import AIAssistant
    from prat_resume.services.busy import BusyTracker
    from prat_resume.services.persistence import SnapshotRepository
    from prat_resume.store import ResumeStore

    init_db()
    app.state.store = ResumeStore(repository=SnapshotRepository())
    app.state.busy = BusyTracker()
    app.state.assistant = AIAssistant()
    yield
    app.state.busy.cancel_all()


app = FastAPI(
    title="PratResume API",
    description="API for editing, previewing and exporting a single-page resume",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(document.router, prefix="/api")
app.include_router(assist.router, prefix="/api")
app.include_router(preview.router, prefix="/api")
app.include_router(voice.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "prat_resume.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
