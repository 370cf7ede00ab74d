"""
카테고리 집계 모듈

여러 fragment의 카테고리별 내용을 fragment 순서대로 모읍니다.
"""

from dataclasses import dataclass, field
from typing import Iterable, List

from .category_splitter import Category, FRAGMENT_HEADING_LEVEL, split_by_category
from .fragment_parser import Fragment


@dataclass
class AggregatedChangelog:
    """카테고리별 새 항목 목록"""
    added: List[str] = field(default_factory=list)
    changed: List[str] = field(default_factory=list)
    fixed: List[str] = field(default_factory=list)

    def entries(self, category: Category) -> List[str]:
        return getattr(self, category.name.lower())

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.changed or self.fixed)

    def counts(self) -> dict:
        return {
            Category.ADDED.value: len(self.added),
            Category.CHANGED.value: len(self.changed),
            Category.FIXED.value: len(self.fixed),
        }


def aggregate(fragments: Iterable[Fragment]) -> AggregatedChangelog:
    """fragment 본문을 분할해 비어 있지 않은 칸만 순서대로 추가 (중복 제거/정렬 없음)"""
    result = AggregatedChangelog()
    for fragment in fragments:
        content = split_by_category(fragment.body, level=FRAGMENT_HEADING_LEVEL)
        if content.added:
            result.added.append(content.added)
        if content.changed:
            result.changed.append(content.changed)
        if content.fixed:
            result.fixed.append(content.fixed)
    return result
