"""
Fragment 파싱 모듈

fragment 파일의 원문을 메타데이터 헤더와 본문으로 분리합니다.

    ---
    author: <Your name>
    ---

    # Added

    # Changed

    # Fixed
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .exceptions import MalformedFragmentError


HEADER_MARKER = "---"

# fragment 생성 시 사용하는 기본 템플릿
FRAGMENT_TEMPLATE = """---
author: <Your name>
---

# Added

# Changed

# Fixed
"""

_MARKER_LINE = re.compile(r'^[ \t]*---[ \t]*\r?$', re.MULTILINE)
_ENCLOSING = {'<': '>', '"': '"', "'": "'"}


@dataclass
class Fragment:
    """파싱된 fragment"""
    name: str
    metadata: Dict[str, str] = field(default_factory=dict)
    body: str = ""


def parse_metadata(block: str, fragment_name: Optional[str] = None) -> Dict[str, str]:
    """헤더 블록의 `key: value` 줄들을 딕셔너리로 변환 (중복 키는 마지막 값 사용)"""
    metadata: Dict[str, str] = {}
    for line in block.splitlines():
        if not line.strip():
            continue
        if ':' not in line:
            raise MalformedFragmentError(f"Invalid metadata line: {line.strip()!r}", fragment_name)
        key, value = line.split(':', 1)
        metadata[key.strip()] = _clean_value(value)
    return metadata


def _clean_value(value: str) -> str:
    """앞뒤 공백과 값을 감싼 괄호/따옴표 한 쌍만 제거 (`<Your name>` → `Your name`, `C++` 유지)"""
    value = value.strip()
    if len(value) >= 2 and _ENCLOSING.get(value[0]) == value[-1]:
        value = value[1:-1].strip()
    return value


def parse_fragment(raw: str, fragment_name: Optional[str] = None) -> Tuple[Dict[str, str], str]:
    """
    fragment 원문을 (메타데이터, 본문)으로 분리

    첫 번째 `---` 줄 쌍이 헤더를 감싸며, 헤더를 제외한 나머지가 본문입니다.
    이후에 나오는 `---` 줄은 본문의 일부로 취급합니다.

    Raises:
        MalformedFragmentError: 헤더 블록이 없는 경우
    """
    markers = list(_MARKER_LINE.finditer(raw))
    if len(markers) < 2:
        raise MalformedFragmentError("No metadata header block found", fragment_name)

    opening, closing = markers[0], markers[1]
    header = raw[opening.end():closing.start()]
    body = raw[:opening.start()] + raw[closing.end():]

    return parse_metadata(header, fragment_name), body


def load_fragment(name: str, raw: str) -> Fragment:
    """파일 이름과 원문으로 Fragment 생성"""
    metadata, body = parse_fragment(raw, fragment_name=name)
    return Fragment(name=name, metadata=metadata, body=body)
