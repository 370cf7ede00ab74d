"""
Fragment 저장소

fragment 디렉터리의 파일 생성, 조회, 삭제를 담당합니다.
"""

import os
import random
import string
from typing import List, Optional

from app.logging_config import get_logger
from .fragment_parser import FRAGMENT_TEMPLATE

logger = get_logger("fragment_store")

_ID_CHARS = string.ascii_letters + string.digits


def random_fragment_id(length: int = 8) -> str:
    return "".join(random.choice(_ID_CHARS) for _ in range(length))


class FragmentStore:
    """fragment 디렉터리 관리"""

    def __init__(self, directory: str, extension: str = ".md"):
        self.directory = directory
        self.extension = extension

    def ensure_directory(self) -> None:
        if not os.path.isdir(self.directory):
            os.makedirs(self.directory, exist_ok=True)
            logger.info(f"Created fragment directory: {self.directory}")

    def create_fragment(self, content: str = FRAGMENT_TEMPLATE, fragment_id: Optional[str] = None) -> str:
        """템플릿으로 새 fragment 파일을 만들고 경로 반환"""
        self.ensure_directory()
        name = f"{fragment_id or random_fragment_id()}{self.extension}"
        path = os.path.join(self.directory, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Created changelog fragment: {path}")
        return path

    def list_fragment_paths(self) -> List[str]:
        """확장자가 일치하는 fragment 파일 경로 (이름순)"""
        self.ensure_directory()
        names = sorted(
            name for name in os.listdir(self.directory)
            if name.endswith(self.extension) and os.path.isfile(os.path.join(self.directory, name))
        )
        return [os.path.join(self.directory, name) for name in names]

    def read_fragment(self, path: str) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def delete_fragments(self, paths: List[str]) -> int:
        """병합이 끝난 fragment 삭제"""
        for path in paths:
            os.remove(path)
            logger.debug(f"Removed fragment: {path}")
        return len(paths)
