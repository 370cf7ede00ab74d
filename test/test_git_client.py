"""
Tests for git_client module
"""
import pytest
from unittest.mock import AsyncMock, Mock, call, patch

from domain.changelog.exceptions import GitCommandError
from domain.changelog.git_client import GitClient


def _process(returncode=0, stdout=b"", stderr=b""):
    process = Mock()
    process.returncode = returncode
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    return process


class TestGitClientRun:
    """Test subprocess invocation."""

    @pytest.mark.asyncio
    async def test_run_returns_stdout(self):
        with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=_process(stdout=b"ok\n"))) as exec_mock:
            output = await GitClient(cwd="/repo").run("status")

        assert output == "ok\n"
        args, kwargs = exec_mock.call_args
        assert args == ("git", "status")
        assert kwargs["cwd"] == "/repo"

    @pytest.mark.asyncio
    async def test_run_raises_on_failure(self):
        process = _process(returncode=128, stderr=b"fatal: not a git repository\n")
        with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=process)):
            with pytest.raises(GitCommandError) as exc_info:
                await GitClient().run("status")

        assert exc_info.value.returncode == 128
        assert exc_info.value.command == ["git", "status"]
        assert "not a git repository" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_commit_message_is_single_argument(self):
        client = GitClient()
        client.run = AsyncMock(return_value="")

        await client.commit('msg with "quotes" [skip ci]')

        client.run.assert_awaited_once_with("commit", "-m", 'msg with "quotes" [skip ci]')


class TestGitClientValidation:
    """Test argument validation."""

    @pytest.mark.asyncio
    async def test_empty_email_raises(self):
        with pytest.raises(ValueError, match="No email provided"):
            await GitClient().set_email("")

    @pytest.mark.asyncio
    async def test_empty_name_raises(self):
        with pytest.raises(ValueError, match="No name provided"):
            await GitClient().set_name("")

    @pytest.mark.asyncio
    async def test_empty_commit_message_raises(self):
        with pytest.raises(ValueError, match="No commit message provided"):
            await GitClient().commit("")

    @pytest.mark.asyncio
    async def test_set_identity(self):
        client = GitClient()
        client.run = AsyncMock(return_value="")

        await client.set_email("ci@example.com")
        await client.set_name("CI Bot")

        assert client.run.await_args_list == [
            call("config", "--global", "user.email", "ci@example.com"),
            call("config", "--global", "user.name", "CI Bot"),
        ]


class TestGitClientPush:
    """Test push flows."""

    @pytest.mark.asyncio
    async def test_push_on_branch(self):
        client = GitClient()
        client.run = AsyncMock(side_effect=["On branch master\nnothing to commit\n", "pushed"])

        results = await client.push()

        assert results == ["pushed"]
        assert client.run.await_args_list == [call("status"), call("push")]

    @pytest.mark.asyncio
    async def test_push_on_detached_head(self):
        client = GitClient(base_branch="main", temp_branch="tmp-log")
        client.run = AsyncMock(side_effect=["HEAD detached at 1a2b3c\n", "", "", "", "merged", "pushed"])

        results = await client.push()

        assert results == ["", "", "", "merged", "pushed"]
        assert client.run.await_args_list == [
            call("status"),
            call("fetch"),
            call("switch", "-c", "tmp-log"),
            call("switch", "main"),
            call("merge", "tmp-log", "--no-edit"),
            call("push"),
        ]
