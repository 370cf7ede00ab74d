"""
실행 기록(history) 수집 모듈

한 번의 changelog 생성 과정에서 남긴 메시지를 모아 두었다가
CHANGELOG_HISTORY.log 맨 앞에 한 번에 기록합니다.
"""

import os
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import List, Optional

from app.logging_config import get_logger

logger = get_logger("history")


class HistoryLog:
    """실행 단위 기록 수집기"""

    def __init__(self, now: Optional[datetime] = None):
        moment = now or datetime.now(timezone.utc)
        # 실행 시작 시각을 모든 줄에 동일하게 사용
        self.prefix = f"[{format_datetime(moment.astimezone(timezone.utc), usegmt=True)}] "
        self.entries: List[str] = []

    def log(self, message: str) -> str:
        line = f"{self.prefix}{message}"
        self.entries.append(line)
        logger.info(message)
        return line

    def render(self) -> str:
        return "\n".join(self.entries)

    def flush(self, path: str) -> None:
        """
        기록을 history 파일 맨 앞에 추가

        파일이 없으면 새로 만들고, 기존 내용은 빈 줄 하나 뒤에 유지합니다.
        """
        existing = ""
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                existing = f.read()

        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(f"{self.render()}\n\n{existing}")

        logger.debug(f"Flushed {len(self.entries)} history entries to {path}")
        self.entries.clear()
