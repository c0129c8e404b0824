"""헬스 체크 엔드포인트"""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from datetime import datetime

from image_scraper import __version__
from image_scraper.crawlers import TokenCache, get_token_cache
from image_scraper.schemas.image_schema import HealthResponse

router = APIRouter(tags=["health"])

ROOT_BANNER = "DuckDuckGo Image Scraper API is running. Use /images?q=<query> to start."


@router.get("/health", response_model=HealthResponse)
async def health_check(token_cache: TokenCache = Depends(get_token_cache)):
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 캐시된 vqd 토큰 수
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(),
        version=__version__,
        cached_tokens=len(token_cache),
    )


@router.get("/", response_class=PlainTextResponse)
async def root():
    """루트 엔드포인트 (사용법 안내 문구)"""
    return ROOT_BANNER
