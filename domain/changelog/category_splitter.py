"""
카테고리 분할 모듈

마크다운 텍스트를 헤딩 기준으로 나누고, 각 조각을 헤딩 라벨(Added / Changed / Fixed)로
분류합니다. fragment 본문은 `#`, changelog 문서 섹션은 `###` 레벨을 사용합니다.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List


class Category(str, Enum):
    ADDED = "Added"
    CHANGED = "Changed"
    FIXED = "Fixed"
    UNKNOWN = "Unknown"


# 문서에 기록되는 고정 순서
CATEGORIES = (Category.ADDED, Category.CHANGED, Category.FIXED)

FRAGMENT_HEADING_LEVEL = 1
DOCUMENT_HEADING_LEVEL = 3

_LABEL_MAP: Dict[str, Category] = {c.value.lower(): c for c in CATEGORIES}
_FIRST_WORD = re.compile(r'\W*(\w+)')
_BLANK_LINES = re.compile(r'(?:[ \t]*\r?\n)*')
_LINE_END = re.compile(r'[ \t]*\r?\n')


@dataclass
class CategoryChunk:
    """
    헤딩 하나와 그 아래 내용

    모든 위치는 원본 텍스트 기준 절대 오프셋이며,
    text[content_start:content_end]가 정규화된 내용의 원문 구간입니다.
    """
    category: Category
    label: str
    text: str
    heading_start: int
    heading_end: int
    content_start: int
    content_end: int
    end: int


@dataclass
class CategorizedContent:
    """카테고리별로 나눈 결과 (항상 3칸)"""
    added: str = ""
    changed: str = ""
    fixed: str = ""

    def get(self, category: Category) -> str:
        return getattr(self, category.name.lower())

    def __iter__(self) -> Iterator[str]:
        return iter((self.added, self.changed, self.fixed))


def classify_heading(label: str) -> Category:
    """헤딩 라벨의 첫 단어로 카테고리 판별"""
    m = _FIRST_WORD.match(label)
    if not m:
        return Category.UNKNOWN
    return _LABEL_MAP.get(m.group(1).lower(), Category.UNKNOWN)


def _heading_pattern(marker: str, level: int) -> re.Pattern:
    # level 이하의 헤딩은 모두 조각 경계가 되고, 더 깊은 헤딩은 내용으로 남는다
    m = re.escape(marker)
    return re.compile(
        rf'^(?P<marks>{m}{{1,{level}}})(?!{m})(?:[ \t]+(?P<label>[^\r\n]*))?\r?$',
        re.MULTILINE,
    )


def _normalize(text: str, heading_end: int, end: int) -> tuple:
    """조각 내용을 정규화하고 (내용, 시작, 끝) 반환"""
    raw = text[heading_end:end]
    lead = _BLANK_LINES.match(raw).end()
    body = raw[lead:].rstrip()
    if not body:
        return "", heading_end, heading_end

    start = heading_end + lead
    stop = start + len(body)
    # 마지막 줄의 후행 공백과 줄바꿈(\r\n 포함)까지 구간에 포함
    line_end = _LINE_END.match(text, stop, end)
    if line_end:
        stop = line_end.end()
    return body + '\n', start, stop


def split_chunks(text: str, marker: str = '#', level: int = FRAGMENT_HEADING_LEVEL,
                 offset: int = 0) -> List[CategoryChunk]:
    """
    텍스트를 헤딩 단위 조각으로 분할

    첫 헤딩 이전의 텍스트는 버립니다. 라벨이 Added/Changed/Fixed가 아니거나
    헤딩 레벨이 다르면 Category.UNKNOWN으로 표시합니다.

    Args:
        text: 분할할 텍스트
        marker: 헤딩 문자
        level: 카테고리 헤딩으로 인정할 marker 반복 횟수
        offset: 반환 위치에 더할 값 (문서 일부를 분할할 때 사용)
    """
    matches = list(_heading_pattern(marker, level).finditer(text))
    chunks: List[CategoryChunk] = []

    for idx, m in enumerate(matches):
        end = matches[idx + 1].start() if idx + 1 < len(matches) else len(text)
        heading_end = m.end()
        if text.startswith('\n', heading_end):
            heading_end += 1

        label = (m.group('label') or "").strip()
        category = classify_heading(label) if len(m.group('marks')) == level else Category.UNKNOWN
        content, start, stop = _normalize(text, heading_end, end)

        chunks.append(CategoryChunk(
            category=category,
            label=label,
            text=content,
            heading_start=m.start() + offset,
            heading_end=heading_end + offset,
            content_start=start + offset,
            content_end=stop + offset,
            end=end + offset,
        ))

    return chunks


def split_by_category(text: str, marker: str = '#',
                      level: int = FRAGMENT_HEADING_LEVEL) -> CategorizedContent:
    """
    텍스트를 Added / Changed / Fixed 세 칸으로 분할

    같은 카테고리가 여러 번 나오면 순서대로 이어 붙이고,
    알 수 없는 카테고리는 버립니다. 비어 있는 칸은 ""입니다.
    """
    slots: Dict[Category, str] = {c: "" for c in CATEGORIES}
    for chunk in split_chunks(text, marker, level):
        if chunk.category is Category.UNKNOWN:
            continue
        slots[chunk.category] += chunk.text

    return CategorizedContent(
        added=slots[Category.ADDED],
        changed=slots[Category.CHANGED],
        fixed=slots[Category.FIXED],
    )
