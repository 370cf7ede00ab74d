"""
Changelog API Pydantic 스키마 정의
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class CategoryContent(BaseModel):
    """카테고리별 내용"""
    added: str = ""
    changed: str = ""
    fixed: str = ""


class FragmentInput(BaseModel):
    """미리보기용 fragment 원문"""
    name: str = "fragment.md"
    content: str


class FragmentCreateRequest(BaseModel):
    """fragment 생성 요청 (content가 없으면 기본 템플릿)"""
    content: Optional[str] = None


class FragmentCreateResponse(BaseModel):
    """fragment 생성 응답"""
    success: bool
    name: str
    path: str


class FragmentInfo(BaseModel):
    """대기 중인 fragment 정보"""
    name: str
    metadata: Dict[str, str] = {}
    content: Optional[CategoryContent] = None
    error: Optional[str] = None


class FragmentsListResponse(BaseModel):
    """fragment 목록 응답"""
    success: bool
    fragments: List[FragmentInfo] = []
    total: int = 0


class PreviewRequest(BaseModel):
    """병합 미리보기 요청"""
    document: str
    fragments: List[FragmentInput] = []


class GenerateRequest(BaseModel):
    """changelog 생성 요청"""
    debug: bool = False
    user: Optional[str] = None
    name: Optional[str] = None


class ChangelogResponse(BaseModel):
    """changelog 병합 결과"""
    success: bool
    action: str
    counts: Dict[str, int] = Field(default_factory=dict)
    fragments: List[str] = []
    content: Optional[str] = None
