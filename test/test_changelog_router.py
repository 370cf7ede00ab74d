"""
Tests for changelog router endpoints
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from conftest import SAMPLE_CHANGELOG, write_fragment
from domain.changelog.changelog_router import get_changelog_service, router
from domain.changelog.fragment_parser import FRAGMENT_TEMPLATE


class TestChangelogRouter:
    """Test changelog router endpoints."""

    @pytest.fixture
    def test_client(self, changelog_service):
        """Create test client bound to the temporary workspace."""
        app = FastAPI()
        app.include_router(router)
        app.dependency_overrides[get_changelog_service] = lambda: changelog_service
        return TestClient(app)

    def test_create_fragment(self, test_client, changelog_workspace):
        response = test_client.post("/changelog/fragments")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["name"].endswith(".md")
        assert (changelog_workspace["fragments"] / data["name"]).read_text(encoding="utf-8") == FRAGMENT_TEMPLATE

    def test_create_fragment_with_content(self, test_client, changelog_workspace, fragment_factory):
        content = fragment_factory(added="- from api\n")

        response = test_client.post("/changelog/fragments", json={"content": content})

        assert response.status_code == 200
        name = response.json()["name"]
        assert (changelog_workspace["fragments"] / name).read_text(encoding="utf-8") == content

    def test_list_fragments(self, test_client, changelog_workspace, fragment_factory):
        write_fragment(changelog_workspace["fragments"], "a.md", fragment_factory(fixed="- bug\n", author="Lee"))
        write_fragment(changelog_workspace["fragments"], "b.md", "no header")

        response = test_client.get("/changelog/fragments")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        first, second = data["fragments"]
        assert first["name"] == "a.md"
        assert first["metadata"] == {"author": "Lee"}
        assert first["content"] == {"added": "", "changed": "", "fixed": "- bug\n"}
        assert second["name"] == "b.md"
        assert "No metadata header block found" in second["error"]

    def test_preview(self, test_client, fragment_factory):
        payload = {
            "document": SAMPLE_CHANGELOG,
            "fragments": [
                {"name": "a.md", "content": fragment_factory(added="- X\n")},
                {"name": "b.md", "content": fragment_factory(added="- Y\n")},
            ],
        }

        response = test_client.post("/changelog/preview", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["action"] == "preview"
        assert data["fragments"] == ["a.md", "b.md"]
        assert "### Added\n- old feature\n- X\n- Y\n" in data["content"]

    def test_preview_without_changes(self, test_client):
        response = test_client.post("/changelog/preview", json={"document": SAMPLE_CHANGELOG, "fragments": []})

        assert response.status_code == 200
        assert response.json()["action"] == "no_changes"
        assert response.json()["content"] == SAMPLE_CHANGELOG

    def test_preview_malformed_fragment(self, test_client):
        payload = {"document": SAMPLE_CHANGELOG, "fragments": [{"name": "x.md", "content": "# Added\n- a\n"}]}

        response = test_client.post("/changelog/preview", json=payload)

        assert response.status_code == 422
        assert "x.md" in response.json()["detail"]

    def test_preview_no_version_section(self, test_client, fragment_factory):
        payload = {"document": "# Changelog\n", "fragments": [{"content": fragment_factory(added="- a\n")}]}

        response = test_client.post("/changelog/preview", json=payload)

        assert response.status_code == 422

    def test_generate_debug(self, test_client, changelog_workspace, mock_git, fragment_factory):
        write_fragment(changelog_workspace["fragments"], "a.md", fragment_factory(fixed="- bug\n"))

        response = test_client.post("/changelog/generate", json={"debug": True})

        assert response.status_code == 200
        data = response.json()
        assert data["action"] == "preview"
        assert "- old fix\n- bug\n" in data["content"]
        mock_git.commit.assert_not_awaited()

    def test_generate(self, test_client, changelog_workspace, mock_git, fragment_factory):
        write_fragment(changelog_workspace["fragments"], "a.md", fragment_factory(fixed="- bug\n"))

        response = test_client.post("/changelog/generate", json={"user": "dev@example.com", "name": "Dev"})

        assert response.status_code == 200
        assert response.json()["action"] == "updated"
        assert "- old fix\n- bug\n" in changelog_workspace["changelog"].read_text(encoding="utf-8")
        mock_git.set_email.assert_awaited_once_with("dev@example.com")

    def test_generate_no_version_section(self, test_client, changelog_workspace, fragment_factory):
        changelog_workspace["changelog"].write_text("# Changelog\n", encoding="utf-8")
        write_fragment(changelog_workspace["fragments"], "a.md", fragment_factory(fixed="- bug\n"))

        response = test_client.post("/changelog/generate", json={})

        assert response.status_code == 422


def test_main_app_includes_changelog_routes():
    """The application exposes the changelog router."""
    import logging
    import main

    try:
        paths = {route.path for route in main.app.routes}

        assert "/changelog/fragments" in paths
        assert "/changelog/preview" in paths
        assert "/changelog/generate" in paths
    finally:
        logging.getLogger("changelog").handlers.clear()
