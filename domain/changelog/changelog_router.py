"""
# Changelog API

fragment 파일로 관리되는 변경사항을 CHANGELOG.md에 병합하는 API입니다.

## 주요 기능
- **fragment 생성**: 기본 템플릿으로 새 fragment 파일 생성
- **fragment 조회**: 대기 중인 fragment의 메타데이터와 카테고리별 내용 확인
- **미리보기**: 전달받은 문서와 fragment로 병합 결과만 계산
- **생성**: fragment를 CHANGELOG.md에 병합하고 git에 반영

## 카테고리
- `Added`: 새 기능
- `Changed`: 기존 기능 변경
- `Fixed`: 버그 수정
"""

import os
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from .schema import (
    CategoryContent,
    ChangelogResponse,
    FragmentCreateRequest,
    FragmentCreateResponse,
    FragmentInfo,
    FragmentsListResponse,
    GenerateRequest,
    PreviewRequest,
)
from .category_splitter import split_by_category
from .changelog_service import ChangelogService
from .exceptions import MalformedFragmentError, NoVersionSectionError
from .fragment_parser import FRAGMENT_TEMPLATE, load_fragment
from app.config import GIT_USER_EMAIL, GIT_USER_NAME
from app.logging_config import get_logger

logger = get_logger("changelog_router")
router = APIRouter(
    prefix="/changelog",
    tags=["Changelog"],
    responses={
        500: {"description": "Internal server error"},
    }
)

# 실패 유형별 HTTP 상태 코드
ERROR_STATUS = {
    "MalformedFragmentError": 422,
    "NoVersionSectionError": 422,
    "GitCommandError": 502,
}


def get_changelog_service() -> ChangelogService:
    return ChangelogService()


@router.post(
    "/fragments",
    response_model=FragmentCreateResponse,
    summary="fragment 생성",
    description="기본 템플릿(또는 전달된 내용)으로 새 fragment 파일을 만듭니다.",
)
async def create_fragment(
        request: Optional[FragmentCreateRequest] = None,
        service: ChangelogService = Depends(get_changelog_service)
):
    content = request.content if request and request.content else FRAGMENT_TEMPLATE
    try:
        path = service.store.create_fragment(content)
    except OSError as e:
        logger.error(f"Error creating fragment: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return FragmentCreateResponse(success=True, name=os.path.basename(path), path=path)


@router.get(
    "/fragments",
    response_model=FragmentsListResponse,
    summary="fragment 목록 조회",
    description="병합 대기 중인 fragment와 카테고리별 내용을 조회합니다. 헤더가 없는 fragment는 error로 표시됩니다.",
)
async def list_fragments(service: ChangelogService = Depends(get_changelog_service)):
    infos = []
    for path in service.store.list_fragment_paths():
        name = os.path.basename(path)
        try:
            fragment = load_fragment(name, service.store.read_fragment(path))
        except MalformedFragmentError as e:
            infos.append(FragmentInfo(name=name, error=str(e)))
            continue

        added, changed, fixed = split_by_category(fragment.body)
        infos.append(FragmentInfo(
            name=name,
            metadata=fragment.metadata,
            content=CategoryContent(added=added, changed=changed, fixed=fixed),
        ))

    return FragmentsListResponse(success=True, fragments=infos, total=len(infos))


@router.post(
    "/preview",
    response_model=ChangelogResponse,
    summary="병합 미리보기",
    description="파일을 읽거나 쓰지 않고, 전달받은 changelog 문서에 fragment를 병합한 결과를 반환합니다.",
)
async def preview_changelog(
        request: PreviewRequest,
        service: ChangelogService = Depends(get_changelog_service)
):
    try:
        fragments = [load_fragment(f.name, f.content) for f in request.fragments]
        result = service.preview(request.document, fragments)
    except (MalformedFragmentError, NoVersionSectionError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    result["fragments"] = [f.name for f in fragments]
    return ChangelogResponse(**result)


@router.post(
    "/generate",
    response_model=ChangelogResponse,
    summary="changelog 생성",
    description="""
    fragment 디렉터리의 변경사항을 CHANGELOG.md 최신 버전 섹션에 병합합니다.
    `debug`가 true면 파일 기록과 git 작업 없이 병합 결과만 반환합니다.
    """
)
async def generate_changelog(
        request: GenerateRequest,
        service: ChangelogService = Depends(get_changelog_service)
):
    result = await service.generate(
        user=request.user or GIT_USER_EMAIL,
        name=request.name or GIT_USER_NAME,
        debug=request.debug,
    )

    if not result["success"]:
        status = ERROR_STATUS.get(result.get("error_type", ""), 500)
        raise HTTPException(status_code=status, detail=result["error"])

    logger.info(f"Changelog generation finished: {result['action']}")
    return ChangelogResponse(**result)
