from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from domain.changelog import changelog_router
from app.config import CORS_ORIGINS, CHANGELOG_PATH, FRAGMENTS_DIR
from app.logging_config import get_logger, setup_logging_from_env

# 로깅 초기화
setup_logging_from_env()
logger = get_logger("main")

app = FastAPI(title="Changelog Fragments API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(changelog_router.router)


@app.on_event("startup")
async def startup_event():
    """앱 시작시 실행되는 초기화 작업"""
    logger.info("Starting changelog API server...")
    logger.info(f"Changelog: {CHANGELOG_PATH}, fragments: {FRAGMENTS_DIR}")


@app.on_event("shutdown")
async def shutdown_event():
    """앱 종료시 정리 작업"""
    logger.info("Changelog API server stopped")
