"""
Changelog 생성 스크립트

fragment 디렉터리의 변경사항을 CHANGELOG.md 최신 버전 섹션에 병합하고 git에 반영합니다.

    python scripts/generate_changelog.py --debug=true --user="user.name@domain.com" --name="User Name"
"""
import asyncio
import sys
from pathlib import Path

# 프로젝트 루트를 Python path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import DEBUG_MODE, GIT_USER_EMAIL, GIT_USER_NAME
from app.logging_config import get_logger, setup_logging_from_env
from domain.changelog.changelog_service import ChangelogService

logger = get_logger("generate_changelog")


def str_to_bool(value: str) -> bool:
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Merge changelog fragments into CHANGELOG.md")
    parser.add_argument("--debug", type=str_to_bool, nargs="?", const=True, default=DEBUG_MODE,
                        help="Only print the merged changelog (no write, no git)")
    parser.add_argument("--user", default=GIT_USER_EMAIL, help="Git user email")
    parser.add_argument("--name", default=GIT_USER_NAME, help="Git user name")
    return parser


def main(argv=None) -> int:
    """메인 실행 함수"""
    args = build_parser().parse_args(argv)
    setup_logging_from_env()

    service = ChangelogService()
    result = asyncio.run(service.generate(user=args.user, name=args.name, debug=args.debug))

    if not result["success"]:
        logger.error(f"Changelog generation failed: {result['error']}")
        return 1

    if result["action"] == "preview":
        print(result["content"])

    return 0


if __name__ == "__main__":
    sys.exit(main())
