"""
changelog 도메인 예외 정의
"""
from typing import Optional, Sequence


class ChangelogError(Exception):
    """changelog 처리 중 발생하는 모든 예외의 기반 클래스"""


class MalformedFragmentError(ChangelogError):
    """fragment에 메타데이터 헤더 블록이 없거나 파싱할 수 없음"""

    def __init__(self, message: str, fragment_name: Optional[str] = None):
        self.fragment_name = fragment_name
        if fragment_name:
            message = f"{fragment_name}: {message}"
        super().__init__(message)


class NoVersionSectionError(ChangelogError):
    """changelog 문서에 버전 섹션(## [x.y.z])이 없음"""


class GitCommandError(ChangelogError):
    """git 명령이 0이 아닌 종료 코드로 끝남"""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = ""):
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"'{' '.join(self.command)}' failed with exit code {returncode}: {stderr.strip()}"
        )
