"""
Changelog 생성 서비스

fragment 디렉터리의 변경사항을 모아 CHANGELOG.md 최신 버전 섹션에 병합하고,
기록 저장과 git commit/push까지 진행합니다.

처리 순서:
1. git 사용자 설정 (debug 모드에서는 생략)
2. fragment 수집 및 파싱
3. 카테고리별 집계
4. 최신 섹션 추출 및 병합 (메모리에서 완성)
5. 파일 기록, fragment 삭제, history 기록, git add/commit/push (debug 모드에서는 생략)
"""
import os
from typing import Any, Dict, List, Optional, Tuple

from app.config import (
    CHANGELOG_PATH,
    COMMIT_MESSAGE,
    DEBUG_MODE,
    FRAGMENT_EXTENSION,
    FRAGMENTS_DIR,
    GIT_USER_EMAIL,
    GIT_USER_NAME,
    HISTORY_PATH,
    SKIP_MALFORMED,
)
from app.logging_config import get_logger
from .aggregator import AggregatedChangelog, aggregate
from .category_splitter import CATEGORIES
from .exceptions import ChangelogError, MalformedFragmentError
from .fragment_parser import Fragment, load_fragment
from .fragment_store import FragmentStore
from .git_client import GitClient
from .history import HistoryLog
from .section_merger import merge_into_document

logger = get_logger("changelog_service")


def build_changelog(document: str, fragments: List[Fragment]) -> Tuple[str, AggregatedChangelog]:
    """fragment 목록을 집계해 병합된 새 문서와 집계 결과 반환 (파일 I/O 없음)"""
    aggregated = aggregate(fragments)
    return merge_into_document(document, aggregated), aggregated


class ChangelogService:
    """changelog 생성 오케스트레이터"""

    def __init__(
        self,
        changelog_path: str = CHANGELOG_PATH,
        fragments_dir: str = FRAGMENTS_DIR,
        history_path: str = HISTORY_PATH,
        extension: str = FRAGMENT_EXTENSION,
        git_client: Optional[GitClient] = None,
        skip_malformed: bool = SKIP_MALFORMED,
        commit_message: str = COMMIT_MESSAGE,
    ):
        self.changelog_path = changelog_path
        self.history_path = history_path
        self.store = FragmentStore(fragments_dir, extension)
        self.git = git_client or GitClient()
        self.skip_malformed = skip_malformed
        self.commit_message = commit_message

    def collect_fragments(self, history: HistoryLog) -> Tuple[List[Fragment], List[str]]:
        """
        fragment 파일을 읽어 파싱

        Returns:
            (파싱된 fragment 목록, 병합 후 삭제할 파일 경로 목록)

        Raises:
            MalformedFragmentError: skip_malformed가 아니고 헤더가 없는 fragment가 있는 경우
        """
        fragments: List[Fragment] = []
        consumed: List[str] = []

        for path in self.store.list_fragment_paths():
            name = os.path.basename(path)
            history.log(f"Add {name} to changelog")
            try:
                fragment = load_fragment(name, self.store.read_fragment(path))
            except MalformedFragmentError as e:
                if not self.skip_malformed:
                    raise
                logger.warning(f"Skipping malformed fragment: {e}")
                history.log(f"Skipped {name}: {e}")
                continue

            # 메타데이터는 기록용으로만 사용
            for key, value in fragment.metadata.items():
                history.log(f"\t{key}: {value}")

            fragments.append(fragment)
            consumed.append(path)

        return fragments, consumed

    def preview(self, document: str, fragments: List[Fragment]) -> Dict[str, Any]:
        """메모리에서만 병합 결과 계산"""
        content, aggregated = build_changelog(document, fragments)
        return {
            "success": True,
            "action": "no_changes" if aggregated.is_empty else "preview",
            "counts": aggregated.counts(),
            "content": content,
        }

    async def _init_git(self, history: HistoryLog, user: str, name: str) -> None:
        history.log("Initialize git")
        email_result = await self.git.set_email(user)
        history.log(f"Set git email to {user}")
        if email_result:
            history.log(email_result.strip())

        name_result = await self.git.set_name(name)
        history.log(f"Set git name to {name}")
        if name_result:
            history.log(name_result.strip())

    async def _publish(self, history: HistoryLog, content: str, consumed: List[str]) -> None:
        """새 문서 기록 후 fragment 정리, history 기록, git 반영"""
        with open(self.changelog_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        history.log(f"Wrote new changelog to '{self.changelog_path}'")

        self.store.delete_fragments(consumed)
        history.log(f"Cleaned '{self.store.directory}' folder")

        history.log("Add changes to git")
        history.flush(self.history_path)

        logger.info(await self.git.add_all())
        logger.info(await self.git.commit(self.commit_message))
        for output in await self.git.push():
            if output:
                logger.info(output)

    async def generate(
        self,
        user: str = GIT_USER_EMAIL,
        name: str = GIT_USER_NAME,
        debug: bool = DEBUG_MODE,
        history: Optional[HistoryLog] = None,
    ) -> Dict[str, Any]:
        """
        fragment를 CHANGELOG.md에 병합

        Args:
            user: git 사용자 이메일
            name: git 사용자 이름
            debug: True면 파일 기록과 git 작업 없이 결과만 반환

        Returns:
            {
                "success": True/False,
                "action": "updated" | "preview" | "no_changes",
                "counts": {"Added": int, "Changed": int, "Fixed": int},
                "fragments": [파일 이름],
                "content": str,  # debug 모드일 때
                "error": str     # 실패 시
            }
        """
        history = history or HistoryLog()
        try:
            if not debug:
                await self._init_git(history, user, name)

            history.log("Start generating changelog")
            fragments, consumed = self.collect_fragments(history)
            aggregated = aggregate(fragments)

            counts = aggregated.counts()
            for category in CATEGORIES:
                history.log(f"Added {counts[category.value]} entries to '{category.value}' section")

            result: Dict[str, Any] = {
                "success": True,
                "counts": counts,
                "fragments": [f.name for f in fragments],
            }

            if aggregated.is_empty:
                history.log("No changes found. Exit")
                result["action"] = "no_changes"
                return result

            with open(self.changelog_path, "r", encoding="utf-8", newline="") as f:
                document = f.read()

            content = merge_into_document(document, aggregated)

            if debug:
                result["action"] = "preview"
                result["content"] = content
                return result

            await self._publish(history, content, consumed)
            result["action"] = "updated"
            return result

        except ChangelogError as e:
            logger.error(f"Changelog generation failed: {e}")
            return {"success": False, "error": str(e), "error_type": type(e).__name__}
        except Exception as e:
            logger.error(f"Unexpected error while generating changelog: {e}", exc_info=True)
            return {"success": False, "error": str(e), "error_type": type(e).__name__}
