"""
Changelog 도메인 모듈

fragment 파싱, 카테고리 집계, 최신 버전 섹션 병합 기능을 제공합니다.
"""

from .fragment_parser import (
    FRAGMENT_TEMPLATE,
    Fragment,
    load_fragment,
    parse_fragment,
    parse_metadata,
)

from .category_splitter import (
    CATEGORIES,
    DOCUMENT_HEADING_LEVEL,
    FRAGMENT_HEADING_LEVEL,
    CategorizedContent,
    Category,
    CategoryChunk,
    split_by_category,
    split_chunks,
)

from .aggregator import AggregatedChangelog, aggregate

from .section_extractor import LatestSection, extract_latest_section

from .section_merger import merge_and_rewrite, merge_into_document

from .exceptions import (
    ChangelogError,
    GitCommandError,
    MalformedFragmentError,
    NoVersionSectionError,
)

__all__ = [
    'FRAGMENT_TEMPLATE',
    'Fragment',
    'load_fragment',
    'parse_fragment',
    'parse_metadata',
    'CATEGORIES',
    'DOCUMENT_HEADING_LEVEL',
    'FRAGMENT_HEADING_LEVEL',
    'CategorizedContent',
    'Category',
    'CategoryChunk',
    'split_by_category',
    'split_chunks',
    'AggregatedChangelog',
    'aggregate',
    'LatestSection',
    'extract_latest_section',
    'merge_and_rewrite',
    'merge_into_document',
    'ChangelogError',
    'GitCommandError',
    'MalformedFragmentError',
    'NoVersionSectionError',
]
