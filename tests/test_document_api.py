"""Tests for the document, preview and export API endpoints."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from prat_resume.api.main import app
from prat_resume.services.persistence import SnapshotRepository


@pytest.fixture
def client(api_db: None) -> Iterator[TestClient]:
    """Create a test client with a fresh store on a temporary database."""
    with TestClient(app) as test_client:
        yield test_client


def _add_experience(client: TestClient, **fields: str) -> dict:
    response = client.post("/api/document/experience", json=fields)
    assert response.status_code == 201
    return response.json()


class TestAppConfiguration:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_app_title(self) -> None:
        assert app.title == "PratResume API"

    def test_cors_middleware_is_configured(self) -> None:
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "CORSMiddleware" in middleware_classes

    def test_capabilities_without_ai(self, client: TestClient) -> None:
        data = client.get("/api/capabilities").json()

        assert data["ai"] is False
        assert data["voice"] is False
        assert data["themePalette"][0] == "#2563eb"
        assert data["zoomMin"] == 0.4
        assert data["zoomMax"] == 1.5
        assert data["defaultZoom"] == 0.8

    def test_capabilities_with_ai(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        assert client.get("/api/capabilities").json()["ai"] is True


class TestDocument:
    def test_starts_empty(self, client: TestClient) -> None:
        data = client.get("/api/document").json()

        assert data["personalInfo"]["fullName"] == ""
        assert data["experience"] == []
        assert data["themeColor"] == "#2563eb"
        assert data["layoutDensity"] == "comfortable"

    def test_update_personal_info(self, client: TestClient) -> None:
        response = client.patch(
            "/api/document/personal", json={"field": "fullName", "value": "Ada Lovelace"}
        )

        assert response.status_code == 200
        assert response.json()["personalInfo"]["fullName"] == "Ada Lovelace"
        assert SnapshotRepository().load().personal_info.full_name == "Ada Lovelace"

    def test_unknown_personal_field_is_422(self, client: TestClient) -> None:
        response = client.patch("/api/document/personal", json={"field": "age", "value": "3"})
        assert response.status_code == 422

    def test_add_update_and_remove_entries(self, client: TestClient) -> None:
        _add_experience(client, company="Acme", jobTitle="Engineer")
        data = _add_experience(client, company="Globex", jobTitle="Lead")
        first_id, second_id = (e["id"] for e in data["experience"])

        response = client.patch(
            "/api/document/experience/0", json={"field": "city", "value": "Paris"}
        )
        assert response.status_code == 200
        experience = response.json()["experience"]
        assert experience[0]["city"] == "Paris"
        assert experience[1] == data["experience"][1]

        response = client.delete("/api/document/experience/0")
        assert response.status_code == 200
        assert [e["id"] for e in response.json()["experience"]] == [second_id]
        assert first_id != second_id

    def test_add_education_and_skill(self, client: TestClient) -> None:
        response = client.post(
            "/api/document/education", json={"school": "MIT", "degree": "BSc", "grade": "A"}
        )
        assert response.status_code == 201
        assert response.json()["education"][0]["grade"] == "A"

        response = client.post("/api/document/skills", json={"name": "Python"})
        assert response.status_code == 201
        assert response.json()["skills"][0]["level"] == "Intermediate"

    def test_invalid_skill_level_is_422(self, client: TestClient) -> None:
        client.post("/api/document/skills", json={"name": "Python"})

        response = client.patch(
            "/api/document/skills/0", json={"field": "level", "value": "Guru"}
        )

        assert response.status_code == 422

    def test_missing_entry_is_404(self, client: TestClient) -> None:
        response = client.patch(
            "/api/document/education/3", json={"field": "school", "value": "MIT"}
        )
        assert response.status_code == 404
        assert client.delete("/api/document/skills/0").status_code == 404

    def test_unknown_section_is_422(self, client: TestClient) -> None:
        assert client.delete("/api/document/hobbies/0").status_code == 422

    def test_replace_document(self, client: TestClient) -> None:
        payload = {
            "personalInfo": {"fullName": "Grace Hopper"},
            "skills": [{"id": "s1", "name": "COBOL", "level": "Expert"}],
            "themeColor": "#dc2626",
        }

        response = client.put("/api/document", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["personalInfo"]["fullName"] == "Grace Hopper"
        assert data["skills"][0]["id"] == "s1"
        assert data["layoutDensity"] == "comfortable"

    def test_replace_rejects_duplicate_ids(self, client: TestClient) -> None:
        payload = {"skills": [{"id": "s1", "name": "A"}, {"id": "s1", "name": "B"}]}
        assert client.put("/api/document", json=payload).status_code == 422

    def test_theme_and_density(self, client: TestClient) -> None:
        response = client.put("/api/document/theme", json={"color": "#9333EA"})
        assert response.json()["themeColor"] == "#9333ea"

        assert client.put("/api/document/theme", json={"color": "#000000"}).status_code == 422

        response = client.post("/api/document/density/toggle")
        assert response.json()["layoutDensity"] == "compact"

    def test_reset_requires_confirmation(self, client: TestClient) -> None:
        client.patch("/api/document/personal", json={"field": "fullName", "value": "Ada"})

        response = client.post("/api/document/reset", json={})
        assert response.json()["applied"] is False
        assert response.json()["document"]["personalInfo"]["fullName"] == "Ada"

        response = client.post("/api/document/reset", json={"confirm": True})
        assert response.json()["applied"] is True
        assert response.json()["document"]["personalInfo"]["fullName"] == ""
        assert SnapshotRepository().exists() is False

    def test_load_demo(self, client: TestClient) -> None:
        assert client.post("/api/document/demo", json={"confirm": False}).json()["applied"] is False

        response = client.post("/api/document/demo", json={"confirm": True})

        assert response.json()["applied"] is True
        assert response.json()["document"]["personalInfo"]["fullName"] == "Pratima Singh"


class TestPreviewAndExport:
    def test_preview_scenario(self, client: TestClient) -> None:
        _add_experience(client, company="Acme", jobTitle="Engineer")

        data = client.get("/api/preview", params={"zoom": 1.2}).json()

        assert data["scale"] == 1.2
        assert data["transform"] == "scale(1.2)"
        primary = data["content"]["children"][1]["children"][0]
        sections = [s["key"] for s in primary["children"]]
        assert sections == ["experience"]

    def test_preview_zoom_is_clamped(self, client: TestClient) -> None:
        assert client.get("/api/preview", params={"zoom": 5}).json()["scale"] == 1.5
        assert client.get("/api/preview").json()["scale"] == 0.8

    def test_print_preview_ignores_zoom(self, client: TestClient) -> None:
        client.post("/api/document/demo", json={"confirm": True})

        first = client.get("/api/preview", params={"zoom": 0.5, "print": True}).json()
        second = client.get("/api/preview", params={"zoom": 1.4, "print": "true"}).json()

        assert first == second
        assert first["scale"] == 1.0
        assert first["forPrint"] is True

    def test_export_pdf(self, client: TestClient) -> None:
        client.post("/api/document/demo", json={"confirm": True})

        response = client.get("/api/export")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert 'filename="Pratima_Singh.pdf"' in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    def test_export_empty_document_uses_default_name(self, client: TestClient) -> None:
        response = client.get("/api/export")
        assert 'filename="Resume.pdf"' in response.headers["content-disposition"]
