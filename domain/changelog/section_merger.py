"""
섹션 병합 모듈

집계된 새 항목을 최신 버전 섹션의 카테고리 블록 뒤에 붙여 문서를 다시 씁니다.
블록 위치(오프셋)로 교체하므로 블록 밖의 텍스트는 그대로 유지됩니다.
"""

import re
from typing import List, Tuple

from .aggregator import AggregatedChangelog
from .category_splitter import CATEGORIES, Category
from .section_extractor import LatestSection, extract_latest_section


HEADING_PREFIX = "###"

_LINE_END = re.compile(r'[ \t]*\r?\n')

# (시작, 끝, 교체 텍스트, 카테고리 순서)
Edit = Tuple[int, int, str, int]


def detect_newline(document: str) -> str:
    """문서가 사용하는 줄바꿈 문자"""
    return "\r\n" if "\r\n" in document else "\n"


def _existing_block_edit(document: str, section: LatestSection, category: Category,
                         addition: str, order: int, nl: str) -> Edit:
    block = section.blocks[category]
    if block.content_start == block.content_end:
        # 빈 블록: 헤딩 바로 아래에 삽입
        prefix = "" if document[:block.heading_end].endswith('\n') else nl
        return block.content_start, block.content_end, prefix + addition, order

    existing = document[block.content_start:block.content_end]
    separator = "" if existing.endswith('\n') else nl
    return block.content_start, block.content_end, existing + separator + addition, order


def _missing_block_edit(document: str, section: LatestSection, category: Category,
                        addition: str, order: int, nl: str) -> Edit:
    heading = f"{HEADING_PREFIX} {category.value}{nl}"

    # 뒤 순서의 카테고리 헤딩이 있으면 그 앞에 새 헤딩 삽입
    for later in CATEGORIES[order + 1:]:
        block = section.block(later)
        if block:
            return block.heading_start, block.heading_start, f"{heading}{addition}{nl}", order

    content = section.text.rstrip()
    if not content:
        prefix = "" if document[:section.start].endswith('\n') else nl
        return section.start, section.start, f"{prefix}{heading}{addition}", order

    # 섹션 마지막 내용 줄 바로 뒤 (기존 블록 구간과 겹치지 않게 줄바꿈 포함)
    pos = section.start + len(content)
    line_end = _LINE_END.match(document, pos)
    if line_end:
        pos = line_end.end()
    lead = nl if document[:pos].endswith('\n') else nl * 2
    return pos, pos, f"{lead}{heading}{addition}", order


def merge_and_rewrite(document: str, section: LatestSection, aggregated: AggregatedChangelog) -> str:
    """
    최신 섹션의 각 카테고리 블록에 새 항목을 추가한 문서 반환

    카테고리마다 `기존 내용 + 새 항목(구분자 없이 연결)`으로 블록을 교체하며,
    새 항목이 없는 카테고리와 섹션 밖의 텍스트는 변경하지 않습니다.
    추가되는 줄바꿈은 문서가 쓰는 줄바꿈(\\n 또는 \\r\\n)을 따릅니다.

    Args:
        document: CHANGELOG.md 전체 내용
        section: extract_latest_section(document) 결과
        aggregated: 집계된 새 항목

    Returns:
        새 문서 텍스트
    """
    if aggregated.is_empty:
        return document

    nl = detect_newline(document)
    edits: List[Edit] = []
    for order, category in enumerate(CATEGORIES):
        entries = aggregated.entries(category)
        if not entries:
            continue
        addition = "".join(entries)
        if nl != "\n":
            # 새 항목도 문서의 줄바꿈(\r\n)에 맞춤
            addition = addition.replace("\r\n", "\n").replace("\n", nl)
        if category in section.blocks:
            edits.append(_existing_block_edit(document, section, category, addition, order, nl))
        else:
            edits.append(_missing_block_edit(document, section, category, addition, order, nl))

    # 원본 오프셋 기준으로 한 번에 조립 (같은 위치 삽입은 카테고리 순서대로)
    edits.sort(key=lambda e: (e[0], e[3]))
    parts: List[str] = []
    cursor = 0
    for start, end, text, _ in edits:
        parts.append(document[cursor:start])
        parts.append(text)
        cursor = end
    parts.append(document[cursor:])
    return "".join(parts)


def merge_into_document(document: str, aggregated: AggregatedChangelog) -> str:
    """섹션 추출과 병합을 한 번에 수행 (새 항목이 없으면 원문 그대로 반환)"""
    if aggregated.is_empty:
        return document
    section = extract_latest_section(document)
    return merge_and_rewrite(document, section, aggregated)
