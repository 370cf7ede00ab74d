"""
최신 버전 섹션 추출 모듈

CHANGELOG.md에서 첫 번째 `## [x.y.z]` 섹션(최신 버전)을 찾아
`### Added / ### Changed / ### Fixed` 블록과 그 위치를 반환합니다.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Optional

from .category_splitter import (
    CATEGORIES,
    DOCUMENT_HEADING_LEVEL,
    CategorizedContent,
    Category,
    CategoryChunk,
    split_chunks,
)
from .exceptions import NoVersionSectionError


VERSION_HEADING = re.compile(r'^##[ \t]+\[\d+\.\d+\.\d+[^\]\r\n]*\][^\r\n]*\r?$', re.MULTILINE)

# 다음 버전 헤딩 또는 다른 H1/H2에서 섹션이 끝남
SECTION_BOUNDARY = re.compile(r'^#{1,2}(?=[ \t]|\r?$)', re.MULTILINE)


@dataclass
class LatestSection:
    """최신 버전 섹션과 카테고리 블록 위치"""
    heading: str
    text: str
    remainder: str
    start: int
    end: int
    blocks: Dict[Category, CategoryChunk] = field(default_factory=dict)

    @property
    def content(self) -> CategorizedContent:
        """섹션의 기존 (added, changed, fixed) 내용"""
        return CategorizedContent(**{
            c.name.lower(): self.blocks[c].text if c in self.blocks else ""
            for c in CATEGORIES
        })

    def block(self, category: Category) -> Optional[CategoryChunk]:
        return self.blocks.get(category)


def extract_latest_section(document: str) -> LatestSection:
    """
    문서에서 최신 버전 섹션 추출

    Args:
        document: CHANGELOG.md 전체 내용

    Returns:
        LatestSection (blocks의 위치는 document 기준 절대 오프셋)

    Raises:
        NoVersionSectionError: 버전 헤딩이 하나도 없는 경우
    """
    m = VERSION_HEADING.search(document)
    if not m:
        raise NoVersionSectionError("No version section (## [x.y.z]) found in changelog")

    start = m.end()
    if document.startswith('\n', start):
        start += 1

    boundary = SECTION_BOUNDARY.search(document, start)
    end = boundary.start() if boundary else len(document)
    text = document[start:end]

    blocks: Dict[Category, CategoryChunk] = {}
    for chunk in split_chunks(text, level=DOCUMENT_HEADING_LEVEL, offset=start):
        # 같은 카테고리가 반복되면 첫 블록만 병합 대상
        if chunk.category is not Category.UNKNOWN and chunk.category not in blocks:
            blocks[chunk.category] = chunk

    return LatestSection(
        heading=document[m.start():start],
        text=text,
        remainder=document[end:],
        start=start,
        end=end,
        blocks=blocks,
    )
