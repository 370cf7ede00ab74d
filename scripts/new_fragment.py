"""
새 changelog fragment 생성 스크립트

기본 템플릿으로 `<fragment 디렉터리>/<랜덤 ID>.md` 파일을 만듭니다.
"""
import sys
from pathlib import Path

# 프로젝트 루트를 Python path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import FRAGMENT_EXTENSION, FRAGMENTS_DIR
from app.logging_config import setup_logging_from_env
from domain.changelog.fragment_store import FragmentStore


def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Create a new changelog fragment")
    parser.add_argument("--dir", default=FRAGMENTS_DIR, help="Fragment directory")
    parser.add_argument("--id", default=None, help="Fragment id (random if omitted)")
    args = parser.parse_args(argv)

    setup_logging_from_env()

    path = FragmentStore(args.dir, FRAGMENT_EXTENSION).create_fragment(fragment_id=args.id)
    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
