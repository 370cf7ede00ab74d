"""
Git 연동 모듈

changelog 갱신 후 사용자 설정, add, commit, push를 수행합니다.
detached HEAD 상태(CI 체크아웃 등)에서는 임시 브랜치를 거쳐 기본 브랜치로 병합 후 push 합니다.
"""

import asyncio
from typing import List, Optional

from app.config import GIT_BASE_BRANCH, GIT_TEMP_BRANCH
from app.logging_config import get_logger
from .exceptions import GitCommandError

logger = get_logger("git_client")


class GitClient:
    """git CLI 래퍼 (비동기)"""

    def __init__(self, cwd: Optional[str] = None, base_branch: str = GIT_BASE_BRANCH,
                 temp_branch: str = GIT_TEMP_BRANCH):
        self.cwd = cwd
        self.base_branch = base_branch
        self.temp_branch = temp_branch

    async def run(self, *args: str) -> str:
        """git 명령 실행 후 stdout 반환"""
        command = ["git", *args]
        logger.debug(f"Running: {' '.join(command)}")

        process = await asyncio.create_subprocess_exec(
            *command,
            cwd=self.cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()

        if process.returncode != 0:
            raise GitCommandError(command, process.returncode, stderr.decode(errors="replace"))

        return stdout.decode(errors="replace")

    async def set_email(self, email: str) -> str:
        if not email:
            raise ValueError("No email provided")
        return await self.run("config", "--global", "user.email", email)

    async def set_name(self, name: str) -> str:
        if not name:
            raise ValueError("No name provided")
        return await self.run("config", "--global", "user.name", name)

    async def is_detached(self) -> bool:
        status = await self.run("status")
        return "detached" in status

    async def add_all(self) -> str:
        return await self.run("add", ".")

    async def commit(self, message: str) -> str:
        if not message:
            raise ValueError("No commit message provided")
        return await self.run("commit", "-m", message)

    async def push(self) -> List[str]:
        """
        변경사항 push

        detached HEAD면 fetch → 임시 브랜치 생성 → 기본 브랜치로 전환 → 병합 → push 순서로 진행
        """
        results: List[str] = []
        if await self.is_detached():
            logger.info(f"Detached HEAD, merging through '{self.temp_branch}' into '{self.base_branch}'")
            results.append(await self.run("fetch"))
            results.append(await self.run("switch", "-c", self.temp_branch))
            results.append(await self.run("switch", self.base_branch))
            results.append(await self.run("merge", self.temp_branch, "--no-edit"))
        results.append(await self.run("push"))
        return results
