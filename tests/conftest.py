from __future__ import annotations

from pathlib import Path

import pytest

import prat_resume.data.db as app_db
from prat_resume.data.db import init_db


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Use a temporary SQLite DB for persistence and API tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db.dispose_engine()
    init_db()
    yield
    # Dispose engine to release connections
    app_db.dispose_engine()


@pytest.fixture(autouse=True)
def _no_ai_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without AI credentials; tests opt in explicitly."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("LLM_PROVIDER", raising=False)
    monkeypatch.delenv("LLM_MODEL", raising=False)
    monkeypatch.delenv("AI_TIMEOUT_SECONDS", raising=False)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Automatically add api_db fixture to tests in API test files."""
    for item in items:
        # Check if test file name contains "api" (case-insensitive)
        test_file_path = Path(str(item.fspath))
        if "api" in test_file_path.stem.lower():
            # Automatically add the api_db fixture using usefixtures marker
            item.add_marker(pytest.mark.usefixtures("api_db"))
