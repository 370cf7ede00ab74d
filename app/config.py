"""
애플리케이션 설정

.env 파일과 환경변수에서 changelog 생성에 필요한 설정값을 읽어옵니다.
"""
import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# 파일 경로
CHANGELOG_PATH = os.getenv("CHANGELOG_PATH", "CHANGELOG.md")
FRAGMENTS_DIR = os.getenv("CHANGELOG_FRAGMENTS_DIR", ".an_changelog_meta")
HISTORY_PATH = os.getenv("CHANGELOG_HISTORY_PATH", os.path.join(FRAGMENTS_DIR, "CHANGELOG_HISTORY.log"))
FRAGMENT_EXTENSION = os.getenv("CHANGELOG_FRAGMENT_EXTENSION", ".md")

# 실행 모드
DEBUG_MODE = _env_bool("CHANGELOG_DEBUG")
SKIP_MALFORMED = _env_bool("CHANGELOG_SKIP_MALFORMED")

# Git
GIT_USER_EMAIL = os.getenv("GIT_USER_EMAIL", "devops.pipeline@example.com")
GIT_USER_NAME = os.getenv("GIT_USER_NAME", "DevOps Pipeline")
GIT_BASE_BRANCH = os.getenv("GIT_BASE_BRANCH", "master")
GIT_TEMP_BRANCH = os.getenv("GIT_TEMP_BRANCH", "temp-changelog")
COMMIT_MESSAGE = os.getenv(
    "CHANGELOG_COMMIT_MESSAGE",
    ":memo: :loud_sound: auto-update changelog [skip ci]",
)

# API 서버
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://127.0.0.1:5173").split(",") if o.strip()]
