"""
Test configuration and fixtures
"""
import os
import pytest
from unittest.mock import AsyncMock

from domain.changelog.changelog_service import ChangelogService
from domain.changelog.git_client import GitClient


SAMPLE_CHANGELOG = """# Changelog

All notable changes to this project will be documented in this file.

## [1.2.0] - 2024-03-01
### Added
- old feature

### Changed
- old change

### Fixed
- old fix

## [1.1.0] - 2024-02-01
### Added
- old feature

### Fixed
- legacy fix
"""


def make_fragment(added: str = "", changed: str = "", fixed: str = "", author: str = "Test Author") -> str:
    """Build fragment text in the template layout."""
    return (
        f"---\nauthor: {author}\n---\n\n"
        f"# Added\n{added}\n"
        f"# Changed\n{changed}\n"
        f"# Fixed\n{fixed}\n"
    )


@pytest.fixture
def sample_changelog():
    """Changelog with two version sections."""
    return SAMPLE_CHANGELOG


@pytest.fixture
def fragment_factory():
    return make_fragment


@pytest.fixture
def changelog_workspace(tmp_path):
    """Temporary changelog file and fragment directory."""
    changelog_path = tmp_path / "CHANGELOG.md"
    changelog_path.write_text(SAMPLE_CHANGELOG, encoding="utf-8")
    fragments_dir = tmp_path / ".an_changelog_meta"
    fragments_dir.mkdir()
    return {
        "root": tmp_path,
        "changelog": changelog_path,
        "fragments": fragments_dir,
        "history": fragments_dir / "CHANGELOG_HISTORY.log",
    }


@pytest.fixture
def mock_git():
    """GitClient with every git call mocked."""
    git = GitClient()
    git.set_email = AsyncMock(return_value="")
    git.set_name = AsyncMock(return_value="")
    git.add_all = AsyncMock(return_value="")
    git.commit = AsyncMock(return_value="[master abc123] auto-update changelog")
    git.push = AsyncMock(return_value=[""])
    return git


@pytest.fixture
def changelog_service(changelog_workspace, mock_git):
    """ChangelogService bound to the temporary workspace."""
    return ChangelogService(
        changelog_path=str(changelog_workspace["changelog"]),
        fragments_dir=str(changelog_workspace["fragments"]),
        history_path=str(changelog_workspace["history"]),
        git_client=mock_git,
    )


def write_fragment(directory, name: str, content: str) -> str:
    path = os.path.join(str(directory), name)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path
